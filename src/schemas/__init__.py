"""Schema definitions for Blog Distiller."""

from .article import Article, ArticleMetadata
from .document import DocumentError, ParsedDocument, SourceDocument
from .manifest import BuildInfo, ContentManifest, ManifestEntry

__all__ = [
    "Article",
    "ArticleMetadata",
    "BuildInfo",
    "ContentManifest",
    "DocumentError",
    "ManifestEntry",
    "ParsedDocument",
    "SourceDocument",
]
