"""Enumerations shared by the engine, configuration and CLI.

String-valued so they travel through YAML/JSON configuration unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from .errors import ConfigError

E = TypeVar("E", bound=Enum)


class Origin(str, Enum):
    """Where (0, 0) sits in a space, shared by picture and frame."""

    CENTER = "center"  # x-right, y-up
    BOTTOM_LEFT = "bottom_left"  # x-right, y-up
    TOP_LEFT = "top_left"  # x-right, y-down


class FitMode(str, Enum):
    """How the uniform picture-to-frame scale is chosen."""

    ASPECT_FIT = "aspect_fit"
    ASPECT_FILL = "aspect_fill"


class Rotation(str, Enum):
    """Clockwise quarter turns applied to generated quads."""

    NONE = "none"
    CW_90 = "cw_90"
    CW_180 = "cw_180"
    CW_270 = "cw_270"

    @classmethod
    def from_degrees(cls, degrees: int) -> Rotation:
        """Map 0/90/180/270 (modulo 360) to a rotation."""
        steps = {0: cls.NONE, 90: cls.CW_90, 180: cls.CW_180, 270: cls.CW_270}
        try:
            return steps[int(degrees) % 360]
        except KeyError:
            raise ConfigError(f"Rotation must be a multiple of 90 degrees, got {degrees}") from None

    @property
    def degrees(self) -> int:
        return {"none": 0, "cw_90": 90, "cw_180": 180, "cw_270": 270}[self.value]


class Normalization(str, Enum):
    """Final remapping of transformed points."""

    NONE = "none"
    NORMALIZE = "normalize"  # [0, 1]
    NDC = "ndc"  # [-1, 1]


class Space(str, Enum):
    PICTURE = "picture"
    FRAME = "frame"


def coerce(enum_cls: type[E], value: E | str) -> E:
    """Convert a member or its string value to ``enum_cls``.

    Raises:
        ConfigError: If the value names no member
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ConfigError(
            f"Invalid {enum_cls.__name__} {value!r}; expected one of: {allowed}"
        ) from None


__all__ = [
    "Origin",
    "FitMode",
    "Rotation",
    "Normalization",
    "Space",
    "coerce",
]
