"""Content collection providers."""

from .errors import ContentLoadError
from .filesystem import FileSystemProvider, split_frontmatter
from .memory import MemoryProvider

__all__ = ["ContentLoadError", "FileSystemProvider", "MemoryProvider", "split_frontmatter"]
