"""Value types and aliases for picture/frame geometry."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    from .affine import Affine2D


@dataclass(frozen=True)
class Point2D:
    """A 2D coordinate."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> Point2D:
        return Point2D(self.x * s, self.y * s)

    def apply(self, m: Affine2D) -> Point2D:
        """Return this point transformed by ``m``."""
        return m.apply(self)


@dataclass(frozen=True)
class Size2D:
    """A 2D extent (width, height)."""

    width: float
    height: float

    def __iter__(self) -> Iterator[float]:
        yield self.width
        yield self.height

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def center(self) -> Point2D:
        return Point2D(self.width / 2.0, self.height / 2.0)

    def as_point(self) -> Point2D:
        """Read the extent as the point (width, height)."""
        return Point2D(self.width, self.height)


# Anything that unpacks to two numbers
PointLike = Union[Point2D, Sequence[float], np.ndarray]
SizeLike = Union[Size2D, Sequence[float]]
# (N, 2) float buffer
PointArray = np.ndarray


def as_point(value: PointLike) -> Point2D:
    if isinstance(value, Point2D):
        return value
    x, y = value
    return Point2D(float(x), float(y))


def as_size(value: SizeLike) -> Size2D:
    if isinstance(value, Size2D):
        return value
    w, h = value
    return Size2D(float(w), float(h))


__all__ = [
    "Point2D",
    "Size2D",
    "PointLike",
    "SizeLike",
    "PointArray",
    "as_point",
    "as_size",
]
