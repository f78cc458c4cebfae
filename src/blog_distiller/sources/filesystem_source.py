"""Content source reading documents from a directory tree."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from schemas.document import SourceDocument

from .source import ContentSource

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".md", ".mdx")


class FileSystemSource(ContentSource):
    """Yield content documents found under a directory.

    Files are matched by extension (case-insensitive) and yielded in sorted
    path order. Hidden files and files inside hidden directories are skipped.
    Text is yielded as raw bytes; ``load_article`` decodes it as UTF-8.

    Example:
        source = FileSystemSource(Path("./data/blog"))
        for path, text in source:
            ...
    """

    def __init__(self, root: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS):
        """Initialize the source.

        Args:
            root: Directory to scan recursively
            extensions: File extensions to include, with leading dots

        Raises:
            NotADirectoryError: If root is not a directory
        """
        self.root = Path(root)
        if not self.root.is_dir():
            raise NotADirectoryError(f"Content directory not found: {self.root}")
        self.extensions = tuple(ext.lower() for ext in extensions)

    def __repr__(self) -> str:
        return f"FileSystemSource('{self.root}')"

    @property
    def location(self) -> str:
        return str(self.root)

    def paths(self) -> list[Path]:
        """List matching content files, sorted by relative path."""
        matches = []
        for path in self.root.rglob("*"):
            relative = path.relative_to(self.root)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.is_file() and path.suffix.lower() in self.extensions:
                matches.append(path)
        return sorted(matches, key=lambda p: p.relative_to(self.root).as_posix())

    def documents(self) -> Iterator[SourceDocument]:
        for path in self.paths():
            relative = path.relative_to(self.root).as_posix()
            logger.debug(f"Reading {relative}")
            yield SourceDocument(relative, path.read_bytes())
