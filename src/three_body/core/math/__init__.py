"""Math utilities namespace."""

from .vector import Vector2, unit  # noqa: F401
