"""Base class for build artefact compilers."""

from abc import ABC, abstractmethod
from pathlib import Path

from blog_distiller.store import DocumentStore


class Compiler(ABC):
    """Abstract base class for compilers.

    Compilers turn a populated document store into a file consumed by the
    site build/publish pipeline.
    """

    @abstractmethod
    def compile(self, store: DocumentStore, output_dir: Path) -> Path:
        """Compile an artefact from a document store.

        Args:
            store: The populated document store
            output_dir: Directory to write the artefact into

        Returns:
            Path of the written file
        """
        pass
