"""Random initial conditions for a fresh simulation run."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ...io.config import SimulationConfig


ArrayF = NDArray[np.float64]


@dataclass(frozen=True, slots=True)
class Viewport:
    """Visible drawing area in pixels."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("viewport width and height must be > 0")

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2.0, self.height / 2.0


def random_masses(
    number_of_stars: int, rng: np.random.Generator, config: SimulationConfig
) -> ArrayF:
    """Draw integer masses, rescale by body count, sort heaviest first."""
    raw = rng.integers(config.mass_low, config.mass_high + 1, size=number_of_stars)
    mass = raw.astype(np.float64) * config.mass_reference_count / number_of_stars
    return np.sort(mass)[::-1].copy()


def random_positions(
    number_of_stars: int,
    viewport: Viewport,
    rng: np.random.Generator,
    config: SimulationConfig,
) -> ArrayF:
    pos = np.empty((number_of_stars, 2), dtype=np.float64)
    for axis, extent in enumerate((viewport.width, viewport.height)):
        margin = math.ceil(extent * config.spawn_margin_fraction)
        span = max(extent - 2 * margin, 1)
        pos[:, axis] = rng.integers(0, span, size=number_of_stars) + margin
    return pos


def random_colors(number_of_stars: int, rng: np.random.Generator) -> NDArray[np.uint8]:
    return rng.integers(0, 256, size=(number_of_stars, 3), dtype=np.uint8)
