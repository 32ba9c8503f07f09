"""Content provider errors."""

from __future__ import annotations


class ContentLoadError(Exception):
    """A collection could not be enumerated."""
    pass
