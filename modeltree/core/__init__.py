"""Core modules for modeltree."""

from .config import ModelTreeConfig
from .point import Point
from .units import UnitType, conversion_scale

__all__ = ["ModelTreeConfig", "Point", "UnitType", "conversion_scale"]
