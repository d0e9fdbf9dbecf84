"""Configuration management for modeltree.

This module defines configuration models using Pydantic for validation.
Configuration can be loaded from JSON files or constructed programmatically.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field

from .units import UnitType


class OutputParams(BaseModel):
    """How drawings are written back to disk."""

    indent: int | None = Field(default=2, ge=0, description="JSON indentation (None = compact)")
    precision: int | None = Field(
        default=None,
        ge=0,
        le=15,
        description="Decimal places for written coordinates (None = full precision)"
    )


class TransformParams(BaseModel):
    """Defaults for transforms applied from the command line."""

    default_units: UnitType | None = Field(
        default=None,
        description="Units to convert loaded drawings into"
    )
    scale_origin: bool = Field(
        default=False,
        description="Also scale the top-level model's own origin"
    )


class ModelTreeConfig(BaseModel):
    """Main configuration container."""

    output: OutputParams = Field(default_factory=OutputParams)
    transform: TransformParams = Field(default_factory=TransformParams)

    @classmethod
    def from_file(cls, path: Path | str) -> ModelTreeConfig:
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        return cls.model_validate(data)

    def to_file(self, path: Path | str) -> None:
        """Save configuration to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)

    @classmethod
    def default(cls) -> ModelTreeConfig:
        """Create a default configuration."""
        return cls()
