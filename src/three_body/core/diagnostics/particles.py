"""Body diagnostics."""

from __future__ import annotations

import numpy as np

from ..state.simulation import SimulationState


def total_mass(state: SimulationState) -> float:
    return float(np.sum(state.masses))


def center_of_mass(state: SimulationState) -> np.ndarray:
    m = state.masses
    total = np.sum(m)
    if total == 0.0:
        raise ValueError("cannot compute center of mass with zero total mass")
    return np.sum(state.positions * m[:, np.newaxis], axis=0) / total


def linear_momentum(state: SimulationState) -> np.ndarray:
    return np.sum(state.velocities * state.masses[:, np.newaxis], axis=0)


def kinetic_energy(state: SimulationState) -> float:
    v2 = np.sum(state.velocities**2, axis=1)
    return float(0.5 * np.sum(state.masses * v2))
