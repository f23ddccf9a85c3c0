"""State namespace."""

from .simulation import SimulationState  # noqa: F401
