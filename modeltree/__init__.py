"""modeltree - nested 2D drawings and the transforms that act on them.

A drawing is a tree of models. Each model may carry its own origin, a set
of named paths (lines, circles, arcs) and named child models. The
transforms in ``modeltree.drawing`` reposition, rotate, scale and mirror
whole subtrees while keeping every nested frame consistent.
"""

__version__ = "0.1.0"

from .core.config import ModelTreeConfig
from .core.units import UnitType, conversion_scale
from .drawing import Model, mirror, move, originate, rotate, scale, scale_units
from .paths import Arc, Circle, Line

__all__ = [
    "Arc",
    "Circle",
    "Line",
    "Model",
    "ModelTreeConfig",
    "UnitType",
    "conversion_scale",
    "mirror",
    "move",
    "originate",
    "rotate",
    "scale",
    "scale_units",
]
