"""Point arithmetic for 2D drawings.

Points are immutable ``(x, y)`` tuples. Every function here returns a new
tuple; none of them mutate their arguments. Where an operand is optional,
``None`` stands for the zero point so callers never have to check for an
absent origin themselves.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from scipy.spatial.transform import Rotation

Point = tuple[float, float]


def zero() -> Point:
    """Return the origin point."""
    return (0.0, 0.0)


def clone(p: Sequence[float]) -> Point:
    """Return an independent copy of a point."""
    return (float(p[0]), float(p[1]))


def add(a: Sequence[float] | None, b: Sequence[float] | None = None) -> Point:
    """Add two points. An absent operand counts as the zero point."""
    a = zero() if a is None else a
    b = zero() if b is None else b
    return (a[0] + b[0], a[1] + b[1])


def subtract(a: Sequence[float] | None, b: Sequence[float] | None = None) -> Point:
    """Subtract ``b`` from ``a``. An absent operand counts as the zero point."""
    a = zero() if a is None else a
    b = zero() if b is None else b
    return (a[0] - b[0], a[1] - b[1])


def scale(p: Sequence[float], scale_value: float) -> Point:
    """Scale a point (as a vector from the origin) by a scalar."""
    return (p[0] * scale_value, p[1] * scale_value)


def mirror(p: Sequence[float], mirror_x: bool, mirror_y: bool) -> Point:
    """Reflect a point.

    Args:
        p: Point to reflect
        mirror_x: Negate the x coordinate
        mirror_y: Negate the y coordinate

    Returns:
        Reflected point
    """
    return (
        -float(p[0]) if mirror_x else float(p[0]),
        -float(p[1]) if mirror_y else float(p[1]),
    )


def rotate(
    p: Sequence[float],
    angle_in_degrees: float,
    rotation_origin: Sequence[float] | None = None,
) -> Point:
    """Rotate a point counter-clockwise about a center.

    Args:
        p: Point to rotate
        angle_in_degrees: Rotation angle, positive is counter-clockwise
        rotation_origin: Center of rotation (defaults to the origin)

    Returns:
        Rotated point
    """
    if angle_in_degrees == 0:
        return clone(p)

    center = np.asarray(rotation_origin if rotation_origin is not None else zero(), dtype=np.float64)
    matrix = Rotation.from_euler("z", angle_in_degrees, degrees=True).as_matrix()[:2, :2]

    rotated = matrix @ (np.asarray(p, dtype=np.float64) - center) + center
    return (float(rotated[0]), float(rotated[1]))


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return float(np.hypot(a[0] - b[0], a[1] - b[1]))


def is_close(a: Sequence[float], b: Sequence[float], tolerance: float = 1e-9) -> bool:
    """Check whether two points coincide within an absolute tolerance."""
    return bool(np.allclose(a, b, rtol=0.0, atol=tolerance))


def mirror_angle(angle_in_degrees: float, mirror_x: bool, mirror_y: bool) -> float:
    """Reflect an angle (degrees, counter-clockwise from +X).

    Mirroring y maps ``a`` to ``360 - a``. Mirroring x maps ``a`` to
    ``180 - a``, shifted by a full turn for the lower half plane so the
    result stays non-negative.
    """
    if mirror_y:
        angle_in_degrees = 360 - angle_in_degrees
    if mirror_x:
        angle_in_degrees = (180 if angle_in_degrees < 180 else 540) - angle_in_degrees
    return angle_in_degrees
