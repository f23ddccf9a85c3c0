"""Headless random cluster run (deterministic)."""

from __future__ import annotations

import numpy as np

from three_body.core.diagnostics import kinetic_energy, linear_momentum
from three_body.core.run import run
from three_body.core.state import SimulationState
from three_body.core.state.initial_conditions import Viewport


if __name__ == "__main__":
    rng = np.random.default_rng(123)
    state = SimulationState.random(25, Viewport(1280, 720), rng=rng)

    dt = 1.0 / 60.0
    steps = 600
    result = run(state, dt, steps, sample_every=60)
    final = result.final_state

    any_nan = np.isnan(final.positions).any() or np.isnan(final.velocities).any()
    print("any NaN:", any_nan)
    print("total momentum:", linear_momentum(final))
    print("kinetic energy:", kinetic_energy(final))
    print("samples:", result.positions.shape)
