"""2D vector value type and array helpers.

Array helpers expect vectors shaped (..., 2).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np
from numpy.typing import NDArray


ArrayF = NDArray[np.float64]


@dataclass(slots=True)
class Vector2:
    """Plain 2D vector.

    Arithmetic returns new vectors. ``normalize_ip``, ``scale_to_length`` and
    ``update`` mutate the receiver and are meant for reused accumulators.
    """

    x: float = 0.0
    y: float = 0.0

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def multiply(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def divide(self, scalar: float) -> "Vector2":
        """Divide component-wise with IEEE-754 semantics (x / 0 -> inf or nan)."""
        with np.errstate(divide="ignore", invalid="ignore"):
            x = np.float64(self.x) / np.float64(scalar)
            y = np.float64(self.y) / np.float64(scalar)
        return Vector2(float(x), float(y))

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance_to(self, other: "Vector2") -> float:
        return self.subtract(other).length()

    def distance_squared_to(self, other: "Vector2") -> float:
        return self.subtract(other).length_squared()

    def normalize(self) -> "Vector2":
        length = self.length()
        if length == 0.0:
            return Vector2(0.0, 0.0)
        return self.divide(length)

    def normalize_ip(self) -> None:
        length = self.length()
        if length == 0.0:
            self.x = 0.0
            self.y = 0.0
            return
        self.x /= length
        self.y /= length

    def scale_to_length(self, target: float) -> None:
        length = self.length()
        if length == 0.0:
            return
        factor = target / length
        self.x *= factor
        self.y *= factor

    def update(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def as_array(self) -> ArrayF:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, v: ArrayF) -> "Vector2":
        return cls(float(v[0]), float(v[1]))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "Vector2":
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2":
        return self.divide(scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)


def unit(v: ArrayF, axis: int = -1) -> ArrayF:
    """Return unit vectors with safe handling of zero vectors."""
    v = np.asarray(v, dtype=np.float64)
    n = np.linalg.norm(v, axis=axis, keepdims=True)
    with np.errstate(divide="ignore", invalid="ignore"):
        u = np.where(n > 0.0, v / n, 0.0)
    return u
