"""Columnar state of the gravitating bodies and the per-frame physics step."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from ...io.config import SimulationConfig
from ..math.vector import Vector2, unit
from .initial_conditions import Viewport, random_colors, random_masses, random_positions


ArrayF = NDArray[np.float64]

logger = logging.getLogger(__name__)


class SimulationState:
    """All bodies of one simulation run.

    Index ``i`` addresses the same body in every array for the lifetime of
    the object. Pairwise gravitation factors are cached as the flattened
    upper triangle (``i < j``, row-major) and refreshed every step.
    """

    def __init__(
        self,
        masses: ArrayF,
        positions: ArrayF,
        velocities: ArrayF | None = None,
        colors: NDArray[np.uint8] | None = None,
        *,
        config: SimulationConfig | None = None,
        chunk_size: int | None = None,
    ) -> None:
        self.config = config or SimulationConfig()
        self.G = float(self.config.gravitational_coefficient)
        self.contact_cutoff = float(self.config.contact_cutoff)
        if chunk_size is not None and chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        self.chunk_size = chunk_size

        self.masses = np.ascontiguousarray(masses, dtype=np.float64)
        self.positions = np.array(positions, dtype=np.float64, order="C")
        n = self.masses.shape[0] if self.masses.ndim == 1 else 0
        if velocities is None:
            velocities = np.zeros((n, 2), dtype=np.float64)
        if colors is None:
            colors = np.full((n, 3), 255, dtype=np.uint8)
        self.velocities = np.array(velocities, dtype=np.float64, order="C")
        self.colors = np.ascontiguousarray(colors, dtype=np.uint8)
        self.validate()

        self.sizes = self.masses / self.config.mass_to_size
        min_distance = max(self.config.min_softening_distance, float(np.max(self.sizes)))
        self.min_distance_squared = min_distance * min_distance

        self._pair_rows, self._pair_cols = np.triu_indices(n, k=1)
        self.gravitation_factor = np.zeros(self._pair_rows.shape[0], dtype=np.float64)
        self._factor_full = np.zeros((n, n), dtype=np.float64)
        self.accelerations = np.zeros((n, 2), dtype=np.float64)

        self._update_gravitation_factor()
        self._update_acceleration()
        logger.debug(
            "created state: n=%d min_dist_sq=%.1f total_mass=%.1f",
            n,
            self.min_distance_squared,
            float(np.sum(self.masses)),
        )

    @classmethod
    def random(
        cls,
        number_of_stars: int,
        viewport: Viewport,
        rng: np.random.Generator | None = None,
        config: SimulationConfig | None = None,
        chunk_size: int | None = None,
    ) -> "SimulationState":
        """Build a fresh run with random masses, positions and colors."""
        if number_of_stars < 1:
            raise ValueError("number_of_stars must be >= 1")
        config = config or SimulationConfig()
        rng = rng if rng is not None else np.random.default_rng()
        masses = random_masses(number_of_stars, rng, config)
        positions = random_positions(number_of_stars, viewport, rng, config)
        colors = random_colors(number_of_stars, rng)
        return cls(
            masses=masses,
            positions=positions,
            colors=colors,
            config=config,
            chunk_size=chunk_size,
        )

    @property
    def number_of_stars(self) -> int:
        return self.masses.shape[0]

    def validate(self) -> None:
        if self.masses.ndim != 1 or self.masses.shape[0] < 1:
            raise ValueError("masses must have shape (N,) with N >= 1")
        n = self.masses.shape[0]
        if not np.all(self.masses > 0.0):
            raise ValueError("masses must be strictly positive")
        if self.positions.shape != (n, 2):
            raise ValueError("positions must have shape (N, 2)")
        if self.velocities.shape != (n, 2):
            raise ValueError("velocities must have shape (N, 2)")
        if self.colors.shape != (n, 3):
            raise ValueError("colors must have shape (N, 3)")

    def factor(self, i: int, j: int) -> float:
        """Cached gravitation factor of the unordered pair (i, j)."""
        if i == j:
            raise ValueError("a body has no gravitation factor with itself")
        lo, hi = (i, j) if i < j else (j, i)
        n = self.number_of_stars
        return float(self.gravitation_factor[lo * (2 * n - lo - 1) // 2 + hi - lo - 1])

    def position(self, i: int) -> Vector2:
        return Vector2.from_array(self.positions[i])

    def velocity(self, i: int) -> Vector2:
        return Vector2.from_array(self.velocities[i])

    def acceleration(self, i: int) -> Vector2:
        return Vector2.from_array(self.accelerations[i])

    def advance(self, dt: float) -> None:
        """Advance all bodies by ``dt`` seconds.

        Velocities take the accelerations of the previous position set, then
        positions move with the just-updated velocities; factors and
        accelerations are recomputed last for the next call.
        """
        if dt < 0.0:
            raise ValueError("dt must be >= 0")
        self.velocities += self.accelerations * dt
        self.positions += self.velocities * dt
        self._update_gravitation_factor()
        self._update_acceleration()

    def _update_gravitation_factor(self) -> None:
        delta = self.positions[self._pair_cols] - self.positions[self._pair_rows]
        dist2 = np.sum(delta * delta, axis=-1)
        np.divide(
            self.G,
            np.maximum(dist2, self.min_distance_squared),
            out=self.gravitation_factor,
        )

    def _update_acceleration(self) -> None:
        n = self.number_of_stars
        full = self._factor_full
        full[self._pair_rows, self._pair_cols] = self.gravitation_factor
        full[self._pair_cols, self._pair_rows] = self.gravitation_factor

        pos = self.positions
        step = n if self.chunk_size is None else min(self.chunk_size, n)
        for i0 in range(0, n, step):
            i1 = min(i0 + step, n)
            # delta[a, j] points from body i0 + a towards body j
            delta = pos[None, :, :] - pos[i0:i1, None, :]
            dist = np.sqrt(np.sum(delta * delta, axis=-1))
            strength = np.where(
                dist > self.contact_cutoff, self.masses[None, :] * full[i0:i1], 0.0
            )
            self.accelerations[i0:i1] = np.sum(
                unit(delta) * strength[..., np.newaxis], axis=1
            )
