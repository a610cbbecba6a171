"""Custom exception types for picture/frame transforms."""


class FramerError(Exception):
    """Base exception for all framer errors."""

    pass


class ConfigError(FramerError):
    """Configuration-related errors, including unknown enum values."""

    pass


class GeometryError(FramerError):
    """Degenerate sizes, malformed point arrays and output buffers."""

    pass


class TransformError(FramerError):
    """Matrix derivation errors."""

    pass


__all__ = [
    "FramerError",
    "ConfigError",
    "GeometryError",
    "TransformError",
]
