"""Simulation core: vectors, state, timing, diagnostics."""
