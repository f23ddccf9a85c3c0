"""Headless simulation controller for the desktop app."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

from ..core.clock import FrameClock
from ..core.diagnostics.particles import kinetic_energy, linear_momentum, total_mass
from ..core.state.initial_conditions import Viewport
from ..core.state.simulation import SimulationState
from ..io.config import SimulationConfig, clamp_number_of_stars
from .viz_utils import (
    ViewTransform,
    offscreen_mask,
    pan_step,
    rgb_to_rgba,
    to_screen,
    visible_radii,
)


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FrameData:
    """Everything the canvas needs to draw one frame, in screen pixels."""

    positions: np.ndarray
    radii: np.ndarray
    colors: np.ndarray
    antialias: bool

    @property
    def count(self) -> int:
        return int(self.positions.shape[0])


class SimulationController:
    def __init__(
        self,
        config: SimulationConfig | None = None,
        viewport: Viewport | None = None,
        rng: np.random.Generator | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.config = config or SimulationConfig()
        self.viewport = viewport or Viewport(800, 600)
        self.rng = rng if rng is not None else np.random.default_rng()
        if clock is None:
            self.clock = FrameClock(max_dt=self.config.max_dt)
        else:
            self.clock = FrameClock(max_dt=self.config.max_dt, clock=clock)
        self.view = ViewTransform()
        self.number_of_stars = self.config.default_number_of_stars
        self.state: SimulationState | None = None
        self.paused = False
        self.frame = 0
        self.sim_time = 0.0

    def reset(self, number_of_stars: int | None = None) -> None:
        """Replace the whole state with a fresh random run."""
        if number_of_stars is not None:
            self.number_of_stars = clamp_number_of_stars(number_of_stars, self.config)
        self.state = SimulationState.random(
            self.number_of_stars, self.viewport, rng=self.rng, config=self.config
        )
        self.paused = False
        self.view.reset()
        self.frame = 0
        self.sim_time = 0.0
        self.clock.restart()
        logger.info("simulation reset with %d stars", self.number_of_stars)

    def set_viewport(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            return
        if (width, height) != (self.viewport.width, self.viewport.height):
            self.viewport = Viewport(width, height)

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.info("simulation %s", "paused" if self.paused else "resumed")
        return self.paused

    def zoom_out(self) -> None:
        self.view.zoom(self.config.zoom_step)

    def zoom_in(self) -> None:
        self.view.zoom(1.0 / self.config.zoom_step)

    def pan(self, dx_steps: int, dy_steps: int) -> None:
        """Pan by whole steps; one step is a fixed screen fraction at any zoom."""
        step = pan_step(self.viewport, self.config.pan_divisor) / self.view.scale_factor
        self.view.pan(dx_steps * step, dy_steps * step)

    def handle_key(self, key: str) -> bool:
        """Apply a keyboard command; return False for unbound keys."""
        name = key.lower().removeprefix("arrow")
        if name == "r":
            self.reset()
        elif name == "p":
            self.toggle_pause()
        elif name == "a":
            self.zoom_out()
        elif name == "z":
            self.zoom_in()
        elif name == "left":
            self.pan(1, 0)
        elif name == "right":
            self.pan(-1, 0)
        elif name == "up":
            self.pan(0, 1)
        elif name == "down":
            self.pan(0, -1)
        else:
            return False
        return True

    def tick(self) -> bool:
        """Measure the frame delta and advance unless paused."""
        dt = self.clock.tick()
        if self.state is None or self.paused:
            return False
        self.step_once(dt)
        return True

    def step_once(self, dt: float) -> None:
        if self.state is None:
            raise ValueError("simulation has not been started; call reset()")
        dt = min(dt, self.config.max_dt)
        self.state.advance(dt)
        self.frame += 1
        self.sim_time += dt

    def render_data(self) -> FrameData:
        if self.state is None:
            return FrameData(
                positions=np.zeros((0, 2), dtype=np.float32),
                radii=np.zeros(0, dtype=np.float32),
                colors=np.zeros((0, 4), dtype=np.float32),
                antialias=True,
            )
        state = self.state
        screen = to_screen(state.positions, self.view, self.viewport)
        radii = visible_radii(
            state.sizes, self.view.scale_factor, self.config.min_visible_size
        )
        keep = ~offscreen_mask(screen, radii, self.viewport)
        return FrameData(
            positions=screen[keep].astype(np.float32),
            radii=radii[keep].astype(np.float32),
            colors=rgb_to_rgba(state.colors[keep]),
            antialias=state.number_of_stars <= self.config.antialias_max_stars,
        )

    def diagnostics(self) -> dict[str, float | int | bool]:
        info: dict[str, float | int | bool] = {
            "frame": self.frame,
            "time": self.sim_time,
            "paused": self.paused,
            "scale": self.view.scale_factor,
        }
        if self.state is None:
            return info
        momentum = linear_momentum(self.state)
        info["stars"] = self.state.number_of_stars
        info["mass"] = total_mass(self.state)
        info["kinetic_energy"] = kinetic_energy(self.state)
        info["momentum"] = float(np.linalg.norm(momentum))
        return info


def parse_star_count(text: str, config: SimulationConfig) -> int:
    """Parse the star count field; empty, invalid or zero input means default."""
    try:
        value = int(text.strip())
    except ValueError:
        value = 0
    if value == 0:
        value = config.default_number_of_stars
    return clamp_number_of_stars(value, config)
