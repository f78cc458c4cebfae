"""Content manifest schemas.

The content manifest is the JSON description of one build of the document
store, written for the site build/publish pipeline:

    output/
    ├── content-manifest.json     # ContentManifest
    └── feed.xml                  # RSS feed (when a site URL is configured)
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field


class BuildInfo(BaseModel):
    """Provenance of a store build.

    Attributes:
        build_timestamp: When the manifest was compiled
        build_agent: Software that performed the build
        content_dir: Directory the articles were read from
        include_drafts: Whether draft articles are listed
    """

    build_timestamp: datetime = Field(default_factory=datetime.now)
    build_agent: str = "blog-distiller"
    content_dir: str | None = None
    include_drafts: bool = False


class ManifestEntry(BaseModel):
    """An article listed in the manifest."""

    slug: str
    path: str | None = None
    title: str
    date: date
    lastmod: date | None = None
    tags: list[str] = []
    draft: bool = False
    summary: str
    images: list[str] = []
    authors: list[str] = []
    code_languages: list[str] = []
    extra: dict[str, Any] = {}


class ContentManifest(BaseModel):
    """Manifest for one build of the document store.

    Attributes:
        version: Manifest schema version
        build: Build provenance
        articles: Listed articles, newest first
        tags: Tag slug to article count
        validation_errors: Documents excluded from the build
    """

    version: str = "1.0"
    build: BuildInfo = Field(default_factory=BuildInfo)
    articles: list[ManifestEntry] = []
    tags: dict[str, int] = {}
    validation_errors: list[str] = []

    model_config = {"extra": "allow"}
