"""Base class for content sources."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from schemas.document import SourceDocument


class ContentSource(ABC):
    """Abstract base class for content sources.

    A content source yields ``(path, text)`` pairs, one per content document.
    Paths are source-relative and use POSIX separators; they are the input to
    slug derivation. Sources should yield documents in a stable order so that
    repeated builds over the same content behave identically.
    """

    @property
    def location(self) -> str | None:
        """Human-readable description of where the documents come from."""
        return None

    @abstractmethod
    def documents(self) -> Iterator[SourceDocument]:
        """Yield every content document in this source."""
        pass

    def __iter__(self) -> Iterator[SourceDocument]:
        return self.documents()
