"""Pure helpers for mapping world positions to the screen."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..core.math.vector import Vector2
from ..core.state.initial_conditions import Viewport


@dataclass(slots=True)
class ViewTransform:
    """Uniform zoom about the viewport centre plus a pan offset in world units."""

    scale_factor: float = 1.0
    x_shift: float = 0.0
    y_shift: float = 0.0

    @property
    def shift(self) -> Vector2:
        return Vector2(self.x_shift, self.y_shift)

    def zoom(self, factor: float) -> None:
        self.scale_factor *= factor

    def pan(self, dx: float, dy: float) -> None:
        self.x_shift += dx
        self.y_shift += dy

    def reset(self) -> None:
        self.scale_factor = 1.0
        self.x_shift = 0.0
        self.y_shift = 0.0

    def to_screen(self, point: Vector2, viewport: Viewport) -> Vector2:
        center = Vector2(*viewport.center)
        from_center = point.add(self.shift).subtract(center)
        return from_center.multiply(self.scale_factor).add(center)


def to_screen(
    positions: np.ndarray, view: ViewTransform, viewport: Viewport
) -> np.ndarray:
    """Vectorised ``ViewTransform.to_screen`` for an (N, 2) array."""
    pos = np.asarray(positions, dtype=np.float64)
    center = np.asarray(viewport.center, dtype=np.float64)
    shift = np.array([view.x_shift, view.y_shift], dtype=np.float64)
    return (pos + shift - center) * view.scale_factor + center


def visible_radii(
    sizes: np.ndarray, scale_factor: float, min_visible_size: float
) -> np.ndarray:
    return np.maximum(np.asarray(sizes, dtype=np.float64) * scale_factor, min_visible_size)


def offscreen_mask(
    screen_pos: np.ndarray, radii: np.ndarray, viewport: Viewport
) -> np.ndarray:
    """True for discs lying entirely outside the viewport."""
    x = screen_pos[:, 0]
    y = screen_pos[:, 1]
    return (
        (x + radii < 0.0)
        | (x - radii > viewport.width)
        | (y + radii < 0.0)
        | (y - radii > viewport.height)
    )


def pan_step(viewport: Viewport, pan_divisor: float) -> float:
    return max(viewport.width, viewport.height) / pan_divisor


def rgb_to_rgba(colors: np.ndarray, alpha: float = 1.0) -> np.ndarray:
    rgb = np.asarray(colors, dtype=np.float32) / 255.0
    rgba = np.empty((rgb.shape[0], 4), dtype=np.float32)
    rgba[:, :3] = rgb
    rgba[:, 3] = alpha
    return rgba
