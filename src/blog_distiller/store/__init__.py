"""Document store for one build."""

from .document_store import DocumentStore, load_article

__all__ = ["DocumentStore", "load_article"]
