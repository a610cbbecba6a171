"""Configuration models and I/O for framer.

Pydantic models describing an engine (picture size, frame size, origin, fit
mode) plus optional quad options, with YAML/JSON I/O.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .enums import FitMode, Origin, Rotation
from .errors import ConfigError


class SizeModel(BaseModel):
    """Width and height of a space, in that space's units."""

    width: float = Field(description="Extent along x")
    height: float = Field(description="Extent along y")

    @model_validator(mode="before")
    @classmethod
    def accept_pair(cls, data: Any) -> Any:
        """Accept ``[w, h]`` as shorthand for ``{width: w, height: h}``."""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"Size must have exactly two values, got {len(data)}")
            return {"width": data[0], "height": data[1]}
        return data

    @field_validator("width", "height")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        if not (math.isfinite(v) and v > 0):
            raise ValueError(f"Size dimensions must be positive and finite, got {v}")
        return v


class QuadOptions(BaseModel):
    """Defaults for quad generation."""

    rotation: Rotation = Field(default=Rotation.NONE, description="Clockwise quarter turns")
    mirror: bool = Field(default=False, description="Swap left and right vertices")

    @field_validator("rotation", mode="before")
    @classmethod
    def accept_degrees(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            try:
                return Rotation.from_degrees(v)
            except ConfigError as e:
                raise ValueError(str(e)) from e
        return v


class FramerConfig(BaseModel):
    """Complete engine configuration."""

    picture: SizeModel = Field(description="Content space size")
    frame: SizeModel = Field(description="Display space size")
    origin: Origin = Field(default=Origin.BOTTOM_LEFT, description="Origin convention")
    mode: FitMode = Field(default=FitMode.ASPECT_FIT, description="Fit policy")
    quad: QuadOptions = Field(default_factory=QuadOptions, description="Quad options")


def parse_config(data: Any) -> FramerConfig:
    """Validate a mapping into a FramerConfig, raising ConfigError on failure."""
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
    try:
        return FramerConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid framer config: {e}") from e


def load_config(path: str | Path) -> FramerConfig:
    """Load configuration from YAML or JSON file.

    Args:
        path: Path to configuration file

    Returns:
        Validated FramerConfig

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If config is malformed or invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        if path.suffix.lower() in [".yaml", ".yml"]:
            data = yaml.safe_load(content)
        elif path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            # Try YAML first, then JSON
            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError:
                data = json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e

    return parse_config(data)


def save_config(cfg: FramerConfig, path: str | Path) -> None:
    """Save configuration to YAML or JSON file.

    Args:
        cfg: Configuration to save
        path: Output file path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = cfg.model_dump(mode="json")

    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() in [".yaml", ".yml"]:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)


def round_trip_config(cfg: FramerConfig) -> FramerConfig:
    """Serialize through YAML and back."""
    data = cfg.model_dump(mode="json")
    yaml_str = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    return parse_config(yaml.safe_load(yaml_str))


__all__ = [
    "SizeModel",
    "QuadOptions",
    "FramerConfig",
    "parse_config",
    "load_config",
    "save_config",
    "round_trip_config",
]
