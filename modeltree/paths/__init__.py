"""Path types and the per-path transform primitives."""

from .ops import length, mirror, move_relative, rotate, scale
from .shapes import Arc, Circle, Line, Path

__all__ = [
    "Arc",
    "Circle",
    "Line",
    "Path",
    "length",
    "mirror",
    "move_relative",
    "rotate",
    "scale",
]
