"""Picture/frame transform engine.

A ``Framer`` relates two spaces: the *picture* (content, e.g. an image's
pixel grid) and the *frame* (display, e.g. a window). A single uniform
scale ratio is derived from the fit mode at construction; every transform,
point mapping and quad is a pure function of that cached state.

Both spaces use the same origin convention. For corner origins the
transform re-centres content so the picture centre lands on the frame
centre; for ``center`` origin a pure scale suffices.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from .affine import Affine2D, rotation, rotation_about
from .config import FramerConfig
from .enums import FitMode, Normalization, Origin, Rotation, Space, coerce
from .errors import GeometryError, TransformError
from .logging import get_logger
from .types import Point2D, PointLike, Size2D, SizeLike, as_point, as_size

logger = get_logger(__name__)

QUAD_FLOATS = 8

# Vertex order for every quad: top-left, top-right, bottom-left, bottom-right
UNIT_TEXCOORDS = (0.0, 1.0, 1.0, 1.0, 0.0, 0.0, 1.0, 0.0)
NDC_VERTICES = (-1.0, 1.0, 1.0, 1.0, -1.0, -1.0, 1.0, -1.0)


class Quad(NamedTuple):
    """Vertex positions and texture coordinates, 8 float32 values each."""

    vertices: np.ndarray
    texcoords: np.ndarray


def _corners(size: Size2D) -> np.ndarray:
    # y-up corner coordinates in quad vertex order
    w, h = size.width, size.height
    return np.array([[0.0, h], [w, h], [0.0, 0.0], [w, 0.0]], dtype=np.float64)


def _mirror(points: np.ndarray) -> None:
    points[[0, 1]] = points[[1, 0]]
    points[[2, 3]] = points[[3, 2]]


def _output_buffer(buf: np.ndarray | None, name: str) -> np.ndarray:
    if buf is None:
        return np.empty(QUAD_FLOATS, dtype=np.float32)
    if not isinstance(buf, np.ndarray) or not np.issubdtype(buf.dtype, np.floating):
        raise GeometryError(f"{name} buffer must be a floating point ndarray, got {buf!r}")
    if not buf.flags.writeable:
        raise GeometryError(f"{name} buffer is read-only")
    if buf.size != QUAD_FLOATS:
        raise GeometryError(f"{name} buffer must hold {QUAD_FLOATS} floats, got {buf.size}")
    return buf


def _fill(buf: np.ndarray, values: np.ndarray) -> None:
    buf.flat[:] = np.asarray(values, dtype=buf.dtype).ravel()


class Framer:
    """Coordinate transforms between a picture space and a frame space.

    Args:
        picture_size: Extent of the content space
        frame_size: Extent of the display space
        origin: Origin convention shared by both spaces
        mode: Fit policy deciding the scale ratio

    Raises:
        GeometryError: If any dimension is not a positive finite number
        ConfigError: If ``origin`` or ``mode`` names no member
    """

    __slots__ = ("_picture", "_frame", "_origin", "_mode", "_ratio")

    def __init__(
        self,
        picture_size: SizeLike,
        frame_size: SizeLike,
        origin: Origin | str = Origin.BOTTOM_LEFT,
        mode: FitMode | str = FitMode.ASPECT_FIT,
    ) -> None:
        self._picture = _validated_size(picture_size, "picture")
        self._frame = _validated_size(frame_size, "frame")
        self._origin = coerce(Origin, origin)
        self._mode = coerce(FitMode, mode)
        self._ratio = self._calculate_ratio()
        logger.debug(
            "Framer created",
            {
                "picture": tuple(self._picture),
                "frame": tuple(self._frame),
                "origin": self._origin.value,
                "mode": self._mode.value,
                "ratio": self._ratio,
            },
        )

    @classmethod
    def from_config(cls, cfg: FramerConfig) -> Framer:
        return cls(
            (cfg.picture.width, cfg.picture.height),
            (cfg.frame.width, cfg.frame.height),
            cfg.origin,
            cfg.mode,
        )

    def to_config(self) -> FramerConfig:
        return FramerConfig(
            picture=tuple(self._picture),
            frame=tuple(self._frame),
            origin=self._origin,
            mode=self._mode,
        )

    @property
    def picture_size(self) -> Size2D:
        return self._picture

    @property
    def frame_size(self) -> Size2D:
        return self._frame

    @property
    def origin(self) -> Origin:
        return self._origin

    @property
    def mode(self) -> FitMode:
        return self._mode

    @property
    def ratio(self) -> float:
        """Frame units per picture unit."""
        return self._ratio

    def __repr__(self) -> str:
        return (
            f"Framer(picture={tuple(self._picture)}, frame={tuple(self._frame)}, "
            f"origin={self._origin.value}, mode={self._mode.value}, ratio={self._ratio:g})"
        )

    def _calculate_ratio(self) -> float:
        rw = self._frame.width / self._picture.width
        rh = self._frame.height / self._picture.height
        if self._mode is FitMode.ASPECT_FIT:
            return min(rw, rh)
        if self._mode is FitMode.ASPECT_FILL:
            return max(rw, rh)
        raise TransformError(f"Unhandled fit mode {self._mode!r}")

    def _size_of(self, space: Space) -> Size2D:
        return self._picture if space is Space.PICTURE else self._frame

    def rotation(self, rot: Rotation | str) -> Affine2D:
        """Rotation-only matrix for ``rot``."""
        return rotation(rot)

    def transform_from(self, src: Space | str, dst: Space | str) -> Affine2D:
        """Matrix taking ``src`` coordinates to ``dst`` coordinates."""
        src = coerce(Space, src)
        dst = coerce(Space, dst)
        if src is dst:
            return Affine2D.identity()

        s = self._ratio if src is Space.PICTURE else 1.0 / self._ratio
        if self._origin is Origin.CENTER:
            return Affine2D.scale(s, s)
        if self._origin in (Origin.BOTTOM_LEFT, Origin.TOP_LEFT):
            f1 = self._size_of(src)
            f2 = self._size_of(dst)
            return (
                Affine2D.translate(-f1.width / 2.0, -f1.height / 2.0)
                .concat(Affine2D.scale(s, s))
                .concat(Affine2D.translate(f2.width / 2.0, f2.height / 2.0))
            )
        raise TransformError(f"Unhandled origin {self._origin!r}")

    def transform_points(
        self,
        src: Space | str,
        dst: Space | str,
        points: np.ndarray,
        norm: Normalization | str = Normalization.NONE,
    ) -> np.ndarray:
        """Map ``points`` from ``src`` to ``dst``, then normalize.

        A writeable floating point ndarray of shape ``(..., 2)`` is updated
        in place; anything else (read-only or integer arrays, sequences of
        pairs) is copied into a new float64 array. Either way the
        transformed array is returned. Normalization uses the destination
        size. When ``src == dst`` the points are returned untouched.
        """
        src = coerce(Space, src)
        dst = coerce(Space, dst)
        norm = coerce(Normalization, norm)

        if isinstance(points, np.ndarray):
            if np.issubdtype(points.dtype, np.floating) and points.flags.writeable:
                pts = points
            else:
                pts = np.array(points, dtype=np.float64)
        else:
            try:
                pts = np.array([tuple(as_point(p)) for p in points], dtype=np.float64)
            except (TypeError, ValueError) as e:
                raise GeometryError(f"Points must be (x, y) pairs: {e}") from e
            pts = pts.reshape(-1, 2)
        if pts.ndim < 1 or pts.shape[-1] != 2:
            raise GeometryError(f"Expected points with shape (..., 2), got {pts.shape}")

        if src is dst:
            return pts

        self.transform_from(src, dst).apply_inplace(pts)

        size = np.array(tuple(self._size_of(dst)), dtype=np.float64)
        if norm is Normalization.NONE:
            pass
        elif norm is Normalization.NORMALIZE:
            pts /= size
        elif norm is Normalization.NDC:
            if self._origin is Origin.CENTER:
                pts /= size / 2.0
            else:
                pts[...] = 2.0 * (pts / size) - 1.0
        else:
            raise TransformError(f"Unhandled normalization {norm!r}")
        return pts

    def pic_to_frame(
        self, point: PointLike, norm: Normalization | str = Normalization.NONE
    ) -> Point2D:
        p = as_point(point)
        buf = np.array([[p.x, p.y]], dtype=np.float64)
        out = self.transform_points(Space.PICTURE, Space.FRAME, buf, norm)
        return Point2D(float(out[0, 0]), float(out[0, 1]))

    def frame_to_pic(
        self, point: PointLike, norm: Normalization | str = Normalization.NONE
    ) -> Point2D:
        p = as_point(point)
        buf = np.array([[p.x, p.y]], dtype=np.float64)
        out = self.transform_points(Space.FRAME, Space.PICTURE, buf, norm)
        return Point2D(float(out[0, 0]), float(out[0, 1]))

    def visible_picture_rect(self) -> tuple[Point2D, Point2D]:
        """Picture-space (min, max) corners of the region the frame shows.

        Under ``aspect_fill`` this lies inside the picture (cropping); under
        ``aspect_fit`` it extends past the picture (letterboxing).
        """
        pts = self.transform_points(Space.FRAME, Space.PICTURE, _corners(self._frame))
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        return Point2D(float(lo[0]), float(lo[1])), Point2D(float(hi[0]), float(hi[1]))

    def dynamic_quad(
        self,
        rot: Rotation | str = Rotation.NONE,
        mirror: bool = False,
        vertices: np.ndarray | None = None,
        texcoords: np.ndarray | None = None,
    ) -> Quad:
        """Quad placing the picture in the frame, in NDC.

        Positions are the picture corners mapped to frame NDC and rotated
        about the NDC origin; texture coordinates are the unit square.
        ``mirror`` swaps the left and right vertices.
        """
        rot = coerce(Rotation, rot)
        verts_out = _output_buffer(vertices, "vertices")
        tex_out = _output_buffer(texcoords, "texcoords")

        v = self.transform_points(
            Space.PICTURE, Space.FRAME, _corners(self._picture), Normalization.NDC
        )
        if rot is not Rotation.NONE:
            rotation(rot).apply_inplace(v)
        if mirror:
            _mirror(v)

        _fill(verts_out, v)
        _fill(tex_out, np.array(UNIT_TEXCOORDS))
        return Quad(verts_out, tex_out)

    def fullscreen_quad(
        self,
        rot: Rotation | str = Rotation.NONE,
        mirror: bool = False,
        vertices: np.ndarray | None = None,
        texcoords: np.ndarray | None = None,
    ) -> Quad:
        """Quad covering the whole frame, cropping the picture by texcoords.

        Positions are the full NDC square; texture coordinates select the
        part of the picture visible in the frame and rotate about the
        texture centre (0.5, 0.5). ``mirror`` applies to texcoords only.
        """
        rot = coerce(Rotation, rot)
        verts_out = _output_buffer(vertices, "vertices")
        tex_out = _output_buffer(texcoords, "texcoords")

        t = self.transform_points(
            Space.FRAME, Space.PICTURE, _corners(self._frame), Normalization.NORMALIZE
        )
        if rot is not Rotation.NONE:
            rotation_about(rot, 0.5, 0.5).apply_inplace(t)
        if mirror:
            _mirror(t)

        _fill(verts_out, np.array(NDC_VERTICES))
        _fill(tex_out, t)
        return Quad(verts_out, tex_out)


def _validated_size(value: SizeLike, name: str) -> Size2D:
    try:
        size = as_size(value)
    except (TypeError, ValueError) as e:
        raise GeometryError(f"{name} size must be a (width, height) pair, got {value!r}") from e
    for dim in size:
        if not math.isfinite(dim) or dim <= 0:
            raise GeometryError(f"{name} size must be positive and finite, got {tuple(size)}")
    return size


__all__ = [
    "Framer",
    "Quad",
    "QUAD_FLOATS",
    "UNIT_TEXCOORDS",
    "NDC_VERTICES",
]
