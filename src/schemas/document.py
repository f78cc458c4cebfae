"""Raw and parsed content documents."""

from dataclasses import dataclass
from typing import NamedTuple

from .article import ArticleMetadata


class SourceDocument(NamedTuple):
    """A content document as yielded by a content source.

    Attributes:
        path: Source-relative POSIX path (e.g. "guides/prism.mdx")
        text: Raw document text, or the undecoded bytes of a file
    """

    path: str
    text: str | bytes


@dataclass(frozen=True)
class ParsedDocument:
    """A document split into decoded front-matter and body text."""

    metadata: ArticleMetadata
    body: str


@dataclass(frozen=True)
class DocumentError:
    """A document excluded from the store, with the reason."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"
