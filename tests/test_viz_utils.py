from __future__ import annotations

import numpy as np

from three_body.app.viz_utils import (
    ViewTransform,
    offscreen_mask,
    pan_step,
    rgb_to_rgba,
    to_screen,
    visible_radii,
)
from three_body.core.math import Vector2
from three_body.core.state.initial_conditions import Viewport


def test_identity_view_keeps_positions() -> None:
    viewport = Viewport(800, 600)
    pos = np.array([[10.0, 20.0], [400.0, 300.0]])
    assert np.allclose(to_screen(pos, ViewTransform(), viewport), pos)


def test_zoom_is_about_viewport_center() -> None:
    viewport = Viewport(800, 600)
    view = ViewTransform(scale_factor=2.0)
    pos = np.array([[400.0, 300.0], [500.0, 300.0]])

    screen = to_screen(pos, view, viewport)
    assert np.allclose(screen, [[400.0, 300.0], [600.0, 300.0]])


def test_pan_is_in_world_units() -> None:
    viewport = Viewport(800, 600)
    view = ViewTransform(scale_factor=0.5)
    view.pan(100.0, -40.0)

    screen = to_screen(np.array([[400.0, 300.0]]), view, viewport)
    assert np.allclose(screen, [[450.0, 280.0]])


def test_scalar_and_array_transforms_agree() -> None:
    viewport = Viewport(1024, 768)
    view = ViewTransform(scale_factor=1.7, x_shift=-12.0, y_shift=33.0)
    point = Vector2(123.0, 456.0)

    single = view.to_screen(point, viewport)
    batch = to_screen(np.array([[123.0, 456.0]]), view, viewport)
    assert np.allclose(batch[0], [single.x, single.y])


def test_view_reset_and_zoom() -> None:
    view = ViewTransform()
    view.zoom(0.9)
    view.pan(5.0, 6.0)
    assert view.shift == Vector2(5.0, 6.0)
    view.reset()
    assert view == ViewTransform()


def test_visible_radii_floor() -> None:
    radii = visible_radii(np.array([40.0, 1.0]), 0.5, 3.0)
    assert np.allclose(radii, [20.0, 3.0])


def test_offscreen_mask() -> None:
    viewport = Viewport(100, 100)
    pos = np.array([[50.0, 50.0], [-20.0, 50.0], [-5.0, 50.0], [50.0, 130.0]])
    radii = np.array([10.0, 10.0, 10.0, 10.0])
    assert offscreen_mask(pos, radii, viewport).tolist() == [False, True, False, True]


def test_pan_step_uses_larger_extent() -> None:
    assert pan_step(Viewport(800, 600), 20.0) == 40.0
    assert pan_step(Viewport(300, 1000), 20.0) == 50.0


def test_rgb_to_rgba() -> None:
    rgba = rgb_to_rgba(np.array([[255, 0, 51]], dtype=np.uint8))
    assert rgba.shape == (1, 4)
    assert np.allclose(rgba[0], [1.0, 0.0, 0.2, 1.0])
