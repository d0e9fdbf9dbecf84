"""The Model tree: nested drawing nodes with their own local frames.

A Model holds an optional origin (its offset within the parent's frame),
named paths drawn in its own frame, and named child models. Every field is
optional; ``None`` means "absent", which is kept distinct from a zero origin
or an empty mapping.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from pydantic import BaseModel, Field

from ..core.point import Point
from ..core.units import UnitType
from ..paths.shapes import Path as DrawingPath

logger = logging.getLogger(__name__)


class Model(BaseModel):
    """A node in a drawing's composition tree.

    Attributes:
        origin: Offset of this model's frame within its parent's frame
        type: Free-form tag, carried along by copies
        units: Unit system the geometry is expressed in
        paths: Paths owned by this model, keyed by id
        models: Child models, keyed by id
    """

    origin: Point | None = Field(default=None, description="Local frame offset")
    type: str | None = Field(default=None, description="Opaque model tag")
    units: UnitType | None = Field(default=None, description="Unit system")
    paths: dict[str, DrawingPath] | None = Field(default=None, description="Owned paths")
    models: dict[str, Model] | None = Field(default=None, description="Child models")

    model_config = {"frozen": False}

    def walk(self, route: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Model]]:
        """Iterate over this model and all of its descendants, depth first.

        Yields:
            (route, model) pairs where route is the tuple of child ids
            leading from this model to the yielded one
        """
        yield route, self
        if self.models:
            for model_id, child in self.models.items():
                yield from child.walk(route + (model_id,))

    def save(self, path: str | Path, indent: int | None = 2, precision: int | None = None) -> None:
        """Save the model tree to a JSON file.

        Absent fields are omitted so they stay absent when loaded again.

        Args:
            path: Output file path
            indent: JSON indentation (None for compact output)
            precision: Optional number of decimal places for numbers
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(mode="json", exclude_none=True)
        if precision is not None:
            data = _round_numbers(data, precision)

        with open(path, "w") as f:
            json.dump(data, f, indent=indent)
        logger.debug(f"Drawing saved: {path}")

    @classmethod
    def load(cls, path: str | Path) -> Model:
        """Load a model tree from a JSON file.

        Args:
            path: Input file path

        Returns:
            Loaded Model

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Drawing not found: {path}")

        with open(path) as f:
            data = json.load(f)

        model = cls.model_validate(data)
        logger.debug(f"Drawing loaded: {path}")
        return model


def _round_numbers(data: Any, precision: int) -> Any:
    """Round every float in a JSON-like structure."""
    if isinstance(data, float):
        return round(data, precision)
    if isinstance(data, dict):
        return {key: _round_numbers(value, precision) for key, value in data.items()}
    if isinstance(data, list):
        return [_round_numbers(value, precision) for value in data]
    return data
