"""Core module with types, enums, errors, logging, matrices, engine and config."""

__all__ = [
    "types",
    "enums",
    "errors",
    "logging",
    "affine",
    "engine",
    "config",
]
