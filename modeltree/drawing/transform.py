"""Transforms over whole model trees.

Every operation here walks a model and its descendants, carrying the
transform through each nested origin so that the geometry of every frame
stays consistent with its ancestors. ``mirror`` builds a new tree; all
other operations mutate the model they are given and return it for
chaining.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .. import paths
from ..core import point, units
from .model import Model

logger = logging.getLogger(__name__)


def originate(model_to_originate: Model, origin: Sequence[float] | None = None) -> Model:
    """Move all paths of a model tree into one common frame.

    Nested origins are folded into the path coordinates and every origin in
    the tree is reset to (0, 0). Useful when points between children need to
    connect to each other.

    Args:
        model_to_originate: The model to originate
        origin: Optional offset reference point

    Returns:
        The original model (for chaining)
    """
    new_origin = point.add(model_to_originate.origin, origin)

    if model_to_originate.paths:
        for path in model_to_originate.paths.values():
            paths.move_relative(path, new_origin)

    if model_to_originate.models:
        for child in model_to_originate.models.values():
            originate(child, new_origin)

    model_to_originate.origin = point.zero()

    return model_to_originate


def move(model_to_move: Model, origin: Sequence[float]) -> Model:
    """Move a model to an absolute position.

    This is the same as setting ``origin`` directly, except the point is
    copied so the caller keeps ownership of its own value.

    Args:
        model_to_move: The model to move
        origin: The new position of the model

    Returns:
        The original model (for chaining)
    """
    model_to_move.origin = point.clone(origin)
    return model_to_move


def rotate(model_to_rotate: Model, angle_in_degrees: float, rotation_origin: Sequence[float]) -> Model:
    """Rotate the contents of a model tree.

    The rotation center is re-expressed in each model's local frame before
    that model's paths are rotated. The model's own origin is left as is.

    Args:
        model_to_rotate: The model to rotate
        angle_in_degrees: The amount of rotation, in degrees
        rotation_origin: The center point of rotation

    Returns:
        The original model (for chaining)
    """
    offset_origin = point.subtract(rotation_origin, model_to_rotate.origin)

    if model_to_rotate.paths:
        for path in model_to_rotate.paths.values():
            paths.rotate(path, angle_in_degrees, offset_origin)

    if model_to_rotate.models:
        for child in model_to_rotate.models.values():
            rotate(child, angle_in_degrees, offset_origin)

    return model_to_rotate


def scale(model_to_scale: Model, scale_value: float, scale_origin: bool = False) -> Model:
    """Scale a model tree.

    Children's origins are offsets inside the frame being scaled, so they
    are always scaled. The top-level origin places the model in its parent
    and is only scaled on request.

    Args:
        model_to_scale: The model to scale
        scale_value: The amount of scaling
        scale_origin: Also scale this model's own origin. Typically False
            for the root model.

    Returns:
        The original model (for chaining)
    """
    if scale_origin and model_to_scale.origin is not None:
        model_to_scale.origin = point.scale(model_to_scale.origin, scale_value)

    if model_to_scale.paths:
        for path in model_to_scale.paths.values():
            paths.scale(path, scale_value)

    if model_to_scale.models:
        for child in model_to_scale.models.values():
            scale(child, scale_value, True)

    return model_to_scale


def scale_units(model_to_scale: Model, destination_model: Model) -> Model:
    """Scale a model to match the unit system of another model.

    Nothing happens unless both models declare their units. The ``units``
    field of the scaled model is not changed.

    Args:
        model_to_scale: The model to scale
        destination_model: The model whose unit system to match

    Returns:
        The scaled model (for chaining)
    """
    if model_to_scale.units and destination_model.units:
        ratio = units.conversion_scale(model_to_scale.units, destination_model.units)

        if ratio != 1:
            logger.debug(
                f"Scaling {units.parse_units(model_to_scale.units).value} -> "
                f"{units.parse_units(destination_model.units).value} by {ratio}"
            )
            scale(model_to_scale, ratio)

    return model_to_scale


def mirror(model_to_mirror: Model, mirror_x: bool, mirror_y: bool) -> Model:
    """Create a copy of a model tree, mirrored on either or both axes.

    The source tree is not modified and shares nothing with the result.
    Fields absent on a source model stay absent on its copy.

    Args:
        model_to_mirror: The model to mirror
        mirror_x: Negate x coordinates
        mirror_y: Negate y coordinates

    Returns:
        Mirrored model
    """
    new_model = Model()

    if model_to_mirror.origin is not None:
        new_model.origin = point.mirror(model_to_mirror.origin, mirror_x, mirror_y)

    if model_to_mirror.type is not None:
        new_model.type = model_to_mirror.type

    if model_to_mirror.units is not None:
        new_model.units = model_to_mirror.units

    if model_to_mirror.paths is not None:
        new_model.paths = {
            path_id: paths.mirror(path, mirror_x, mirror_y)
            for path_id, path in model_to_mirror.paths.items()
        }

    if model_to_mirror.models is not None:
        new_model.models = {
            model_id: mirror(child, mirror_x, mirror_y)
            for model_id, child in model_to_mirror.models.items()
        }

    return new_model
