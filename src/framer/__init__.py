"""Picture/frame coordinate transforms for rendering scaled content.

Maps points between a content space and a display space under a fit policy
and produces NDC vertex and texture-coordinate quads for a renderer.
"""

from .core.affine import Affine2D, rotation, rotation_about
from .core.engine import Framer, Quad
from .core.enums import FitMode, Normalization, Origin, Rotation, Space
from .core.errors import ConfigError, FramerError, GeometryError, TransformError
from .core.types import Point2D, Size2D

__version__ = "0.1.0"

__all__ = [
    "Affine2D",
    "ConfigError",
    "FitMode",
    "Framer",
    "FramerError",
    "GeometryError",
    "Normalization",
    "Origin",
    "Point2D",
    "Quad",
    "Rotation",
    "Size2D",
    "Space",
    "TransformError",
    "rotation",
    "rotation_about",
]
