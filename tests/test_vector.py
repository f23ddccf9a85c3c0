from __future__ import annotations

import math

import numpy as np

from three_body.core.math import Vector2, unit


def test_arithmetic_returns_new_values() -> None:
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, -1.0)

    assert a.add(b) == Vector2(4.0, 1.0)
    assert a.subtract(b) == Vector2(-2.0, 3.0)
    assert a.multiply(2.0) == Vector2(2.0, 4.0)
    assert a.divide(2.0) == Vector2(0.5, 1.0)
    assert a + b == Vector2(4.0, 1.0)
    assert 3.0 * a == Vector2(3.0, 6.0)
    assert -a == Vector2(-1.0, -2.0)
    assert a == Vector2(1.0, 2.0)


def test_divide_by_zero_follows_ieee() -> None:
    v = Vector2(1.0, 0.0).divide(0.0)
    assert math.isinf(v.x) and v.x > 0
    assert math.isnan(v.y)


def test_lengths_and_distances() -> None:
    a = Vector2(3.0, 4.0)
    assert a.length() == 5.0
    assert a.length_squared() == 25.0
    assert Vector2(1.0, 1.0).distance_to(Vector2(4.0, 5.0)) == 5.0
    assert Vector2(1.0, 1.0).distance_squared_to(Vector2(4.0, 5.0)) == 25.0


def test_normalize_zero_vector_is_zero() -> None:
    v = Vector2(0.0, 0.0)
    n = v.normalize()
    assert n == Vector2(0.0, 0.0)
    assert not math.isnan(n.x) and not math.isnan(n.y)

    v.normalize_ip()
    assert v == Vector2(0.0, 0.0)


def test_normalize_in_place() -> None:
    v = Vector2(0.0, -2.0)
    assert v.normalize() == Vector2(0.0, -1.0)
    assert v == Vector2(0.0, -2.0)
    v.normalize_ip()
    assert v == Vector2(0.0, -1.0)


def test_scale_to_length() -> None:
    v = Vector2(3.0, 4.0)
    v.scale_to_length(10.0)
    assert math.isclose(v.x, 6.0)
    assert math.isclose(v.y, 8.0)

    zero = Vector2(0.0, 0.0)
    zero.scale_to_length(5.0)
    assert zero == Vector2(0.0, 0.0)


def test_update_and_copy() -> None:
    v = Vector2(1.0, 2.0)
    c = v.copy()
    v.update(7.0, -3.0)
    assert v == Vector2(7.0, -3.0)
    assert c == Vector2(1.0, 2.0)
    x, y = v
    assert (x, y) == (7.0, -3.0)
    assert np.array_equal(v.as_array(), [7.0, -3.0])


def test_unit_array_handles_zero_rows() -> None:
    v = np.array([[3.0, 4.0], [0.0, 0.0], [0.0, -2.0]])
    u = unit(v)
    assert np.allclose(u, [[0.6, 0.8], [0.0, 0.0], [0.0, -1.0]])
    assert not np.isnan(u).any()
