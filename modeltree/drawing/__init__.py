"""Model trees and the transforms that act on them.

This module provides the recursive Model data structure and operations
that move, rotate, scale and mirror whole subtrees.
"""

from .model import Model
from .transform import mirror, move, originate, rotate, scale, scale_units

__all__ = [
    "Model",
    "mirror",
    "move",
    "originate",
    "rotate",
    "scale",
    "scale_units",
]
