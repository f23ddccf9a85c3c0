"""Fixed-step batch run loop with optional sampling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from .state.simulation import SimulationState


@dataclass(slots=True)
class RunResult:
    final_state: SimulationState
    time: np.ndarray | None = None
    positions: np.ndarray | None = None
    velocities: np.ndarray | None = None


def run(
    state: SimulationState,
    dt: float,
    steps: int,
    sample_every: int | None = None,
    callback: Callable[[int, SimulationState], None] | None = None,
) -> RunResult:
    if sample_every is not None and sample_every <= 0:
        raise ValueError("sample_every must be > 0")
    if steps < 0:
        raise ValueError("steps must be >= 0")

    times: list[float] = []
    pos: list[np.ndarray] = []
    vel: list[np.ndarray] = []

    def sample(step: int) -> None:
        times.append(step * dt)
        pos.append(state.positions.copy())
        vel.append(state.velocities.copy())

    if sample_every is not None:
        sample(0)

    for step in range(1, steps + 1):
        state.advance(dt)
        if callback is not None:
            callback(step, state)
        if sample_every is not None and step % sample_every == 0:
            sample(step)

    if sample_every is None:
        return RunResult(final_state=state)

    return RunResult(
        final_state=state,
        time=np.asarray(times, dtype=np.float64),
        positions=np.asarray(pos, dtype=np.float64),
        velocities=np.asarray(vel, dtype=np.float64),
    )
