"""2D affine matrices in row-vector form.

A matrix ``(a, b, c, d, tx, ty)`` stands for the homogeneous 3x3

    | a   b   0 |
    | c   d   0 |
    | tx  ty  1 |

and maps a row vector ``[x, y, 1]`` to

    x' = x*a + y*c + tx
    y' = x*b + y*d + ty

Composition multiplies on the right: ``m1 @ m2`` applies ``m1`` first and
``m2`` second. Every derived transform in the engine depends on this order.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .enums import Rotation, coerce
from .errors import GeometryError, TransformError
from .types import Point2D, PointLike, as_point

SINGULAR_TOL = 1e-12


@dataclass(frozen=True)
class Affine2D:
    a: float
    b: float
    c: float
    d: float
    tx: float
    ty: float

    @classmethod
    def identity(cls) -> Affine2D:
        return cls(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    @classmethod
    def translate(cls, tx: float, ty: float) -> Affine2D:
        return cls(1.0, 0.0, 0.0, 1.0, float(tx), float(ty))

    @classmethod
    def scale(cls, sx: float, sy: float) -> Affine2D:
        return cls(float(sx), 0.0, 0.0, float(sy), 0.0, 0.0)

    def __matmul__(self, rhs: Affine2D) -> Affine2D:
        if not isinstance(rhs, Affine2D):
            return NotImplemented
        return Affine2D(
            a=self.a * rhs.a + self.b * rhs.c,
            b=self.a * rhs.b + self.b * rhs.d,
            c=self.c * rhs.a + self.d * rhs.c,
            d=self.c * rhs.b + self.d * rhs.d,
            tx=self.tx * rhs.a + self.ty * rhs.c + rhs.tx,
            ty=self.tx * rhs.b + self.ty * rhs.d + rhs.ty,
        )

    def concat(self, m: Affine2D) -> Affine2D:
        """Return ``self`` followed by ``m``."""
        return self @ m

    @property
    def translation(self) -> tuple[float, float]:
        return (self.tx, self.ty)

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def inverse(self) -> Affine2D:
        """Return the matrix undoing ``self``.

        Raises:
            TransformError: If the linear part is singular
        """
        det = self.determinant
        if abs(det) < SINGULAR_TOL:
            raise TransformError(f"Cannot invert singular matrix (det={det:.3e})")
        a = self.d / det
        b = -self.b / det
        c = -self.c / det
        d = self.a / det
        return Affine2D(
            a=a,
            b=b,
            c=c,
            d=d,
            tx=-(self.tx * a + self.ty * c),
            ty=-(self.tx * b + self.ty * d),
        )

    def apply(self, point: PointLike) -> Point2D:
        p = as_point(point)
        return Point2D(
            p.x * self.a + p.y * self.c + self.tx,
            p.x * self.b + p.y * self.d + self.ty,
        )

    def linear(self) -> np.ndarray:
        """2x2 linear part, laid out for ``points @ linear``."""
        return np.array([[self.a, self.b], [self.c, self.d]], dtype=np.float64)

    def to_numpy(self) -> np.ndarray:
        """Homogeneous 3x3 matrix for row vectors."""
        return np.array(
            [[self.a, self.b, 0.0], [self.c, self.d, 0.0], [self.tx, self.ty, 1.0]],
            dtype=np.float64,
        )

    def apply_array(self, points: np.ndarray) -> np.ndarray:
        """Transform an ``(..., 2)`` array, returning a new float64 array."""
        pts = np.asarray(points, dtype=np.float64)
        _check_points(pts)
        return pts @ self.linear() + np.array([self.tx, self.ty])

    def apply_inplace(self, points: np.ndarray) -> np.ndarray:
        """Transform an ``(..., 2)`` float array in place and return it."""
        _check_points(points)
        if not points.flags.writeable:
            raise GeometryError("Cannot transform a read-only array in place")
        points[...] = points @ self.linear() + np.array([self.tx, self.ty])
        return points

    def is_close(self, other: Affine2D, atol: float = 1e-9) -> bool:
        return bool(np.allclose(self.to_numpy(), other.to_numpy(), rtol=0.0, atol=atol))


def _check_points(points: np.ndarray) -> None:
    if points.ndim < 1 or points.shape[-1] != 2:
        raise GeometryError(f"Expected points with shape (..., 2), got {points.shape}")


def rotation(rot: Rotation | str) -> Affine2D:
    """Rotation-only matrix for a quarter-turn step.

    Entries are exact so repeated application accumulates no error.
    """
    rot = coerce(Rotation, rot)
    if rot is Rotation.NONE:
        return Affine2D.identity()
    if rot is Rotation.CW_90:
        return Affine2D(0.0, 1.0, -1.0, 0.0, 0.0, 0.0)
    if rot is Rotation.CW_180:
        return Affine2D(-1.0, 0.0, 0.0, -1.0, 0.0, 0.0)
    if rot is Rotation.CW_270:
        return Affine2D(0.0, -1.0, 1.0, 0.0, 0.0, 0.0)
    raise TransformError(f"Unhandled rotation {rot!r}")


def rotation_about(rot: Rotation | str, cx: float, cy: float) -> Affine2D:
    """Rotation about ``(cx, cy)`` instead of the origin."""
    return Affine2D.translate(-cx, -cy).concat(rotation(rot)).concat(Affine2D.translate(cx, cy))


__all__ = [
    "Affine2D",
    "rotation",
    "rotation_about",
]
