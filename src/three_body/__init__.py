"""Interactive 2D N-body gravity simulation."""

__version__ = "0.1.0"
