"""Transform primitives for individual paths.

Each primitive looks up the implementation for the path's ``type`` in a
dispatch table. ``move_relative``, ``rotate`` and ``scale`` mutate the path
in place; ``mirror`` returns a new path and leaves its input untouched.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

from ..core import point
from .shapes import Arc, Circle, Line, Path


def _lookup(table: dict[str, Callable], path: Path) -> Callable:
    """Find the implementation of a primitive for a path's type.

    Raises:
        ValueError: If no implementation exists for the path type
    """
    path_type = getattr(path, "type", None)
    if path_type not in table:
        raise ValueError(f"Unknown path type: {path_type}. Available: {list(table.keys())}")
    return table[path_type]


# Move

def _move_line(line: Line, delta: Sequence[float]) -> None:
    line.origin = point.add(line.origin, delta)
    line.end = point.add(line.end, delta)


def _move_centered(path: Circle | Arc, delta: Sequence[float]) -> None:
    path.origin = point.add(path.origin, delta)


MOVE_RELATIVE = {
    "line": _move_line,
    "circle": _move_centered,
    "arc": _move_centered,
}


def move_relative(path: Path, delta: Sequence[float]) -> Path:
    """Shift a path by a delta, in place.

    Args:
        path: Path to move
        delta: Offset to add to every defining point

    Returns:
        The same path (for chaining)
    """
    _lookup(MOVE_RELATIVE, path)(path, delta)
    return path


# Mirror

def _mirror_line(line: Line, mirror_x: bool, mirror_y: bool) -> Line:
    return Line(
        origin=point.mirror(line.origin, mirror_x, mirror_y),
        end=point.mirror(line.end, mirror_x, mirror_y),
    )


def _mirror_circle(circle: Circle, mirror_x: bool, mirror_y: bool) -> Circle:
    return Circle(
        origin=point.mirror(circle.origin, mirror_x, mirror_y),
        radius=circle.radius,
    )


def _mirror_arc(arc: Arc, mirror_x: bool, mirror_y: bool) -> Arc:
    start_angle = point.mirror_angle(arc.start_angle, mirror_x, mirror_y)
    end_angle = point.mirror_angle(arc.end_angle, mirror_x, mirror_y)

    # A single reflection reverses the sweep direction
    flipped = mirror_x != mirror_y

    return Arc(
        origin=point.mirror(arc.origin, mirror_x, mirror_y),
        radius=arc.radius,
        start_angle=end_angle if flipped else start_angle,
        end_angle=start_angle if flipped else end_angle,
    )


MIRROR = {
    "line": _mirror_line,
    "circle": _mirror_circle,
    "arc": _mirror_arc,
}


def mirror(path: Path, mirror_x: bool, mirror_y: bool) -> Path:
    """Create a mirrored copy of a path.

    Args:
        path: Path to mirror (not modified)
        mirror_x: Negate x coordinates
        mirror_y: Negate y coordinates

    Returns:
        New, independent path
    """
    return _lookup(MIRROR, path)(path, mirror_x, mirror_y)


# Rotate

def _rotate_line(line: Line, angle_in_degrees: float, rotation_origin: Sequence[float]) -> None:
    line.origin = point.rotate(line.origin, angle_in_degrees, rotation_origin)
    line.end = point.rotate(line.end, angle_in_degrees, rotation_origin)


def _rotate_circle(circle: Circle, angle_in_degrees: float, rotation_origin: Sequence[float]) -> None:
    circle.origin = point.rotate(circle.origin, angle_in_degrees, rotation_origin)


def _rotate_arc(arc: Arc, angle_in_degrees: float, rotation_origin: Sequence[float]) -> None:
    arc.origin = point.rotate(arc.origin, angle_in_degrees, rotation_origin)
    arc.start_angle += angle_in_degrees
    arc.end_angle += angle_in_degrees


ROTATE = {
    "line": _rotate_line,
    "circle": _rotate_circle,
    "arc": _rotate_arc,
}


def rotate(path: Path, angle_in_degrees: float, rotation_origin: Sequence[float]) -> Path:
    """Rotate a path counter-clockwise about a center, in place."""
    _lookup(ROTATE, path)(path, angle_in_degrees, rotation_origin)
    return path


# Scale

def _scale_line(line: Line, scale_value: float) -> None:
    line.origin = point.scale(line.origin, scale_value)
    line.end = point.scale(line.end, scale_value)


def _scale_round(path: Circle | Arc, scale_value: float) -> None:
    path.origin = point.scale(path.origin, scale_value)
    path.radius *= scale_value


SCALE = {
    "line": _scale_line,
    "circle": _scale_round,
    "arc": _scale_round,
}


def scale(path: Path, scale_value: float) -> Path:
    """Scale a path about its frame's origin, in place.

    Defining points are scaled as vectors and radii are multiplied, so the
    whole shape grows or shrinks relative to (0, 0) of the owning model.
    """
    _lookup(SCALE, path)(path, scale_value)
    return path


# Measure

LENGTH = {
    "line": lambda line: point.distance(line.origin, line.end),
    "circle": lambda circle: 2 * math.pi * circle.radius,
    "arc": lambda arc: math.radians(arc.sweep) * arc.radius,
}


def length(path: Path) -> float:
    """Length of a path: segment length, circumference or arc length."""
    return float(_lookup(LENGTH, path)(path))
