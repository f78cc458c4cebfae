"""Content source serving documents held in memory."""

from collections.abc import Iterator, Mapping

from schemas.document import SourceDocument

from .source import ContentSource


class InMemorySource(ContentSource):
    """Yield documents from a ``path -> text`` mapping, in insertion order."""

    def __init__(self, documents: Mapping[str, str]):
        self._documents = dict(documents)

    def __repr__(self) -> str:
        return f"InMemorySource({len(self._documents)} documents)"

    def documents(self) -> Iterator[SourceDocument]:
        for path, text in self._documents.items():
            yield SourceDocument(path, text)
