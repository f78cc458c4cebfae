"""Content sources yielding raw documents."""

from .filesystem_source import DEFAULT_EXTENSIONS, FileSystemSource
from .memory_source import InMemorySource
from .source import ContentSource

__all__ = [
    "ContentSource",
    "DEFAULT_EXTENSIONS",
    "FileSystemSource",
    "InMemorySource",
]
