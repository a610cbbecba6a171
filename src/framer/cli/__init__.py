"""Command line interface for inspecting framer transforms."""

__all__ = ["main"]
