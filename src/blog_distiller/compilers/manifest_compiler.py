"""Compile the JSON content manifest for a build."""

import logging
from datetime import datetime
from pathlib import Path

from blog_distiller.store import DocumentStore
from schemas.article import Article
from schemas.manifest import BuildInfo, ContentManifest, ManifestEntry

from .compiler import Compiler

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "content-manifest.json"


class ManifestCompiler(Compiler):
    """Write ``content-manifest.json`` describing the listed articles.

    The manifest lists articles in store listing order (newest first), the
    per-tag article counts, and every document excluded from the build.
    """

    def __init__(self, include_drafts: bool = False):
        self.include_drafts = include_drafts

    def build_manifest(self, store: DocumentStore) -> ContentManifest:
        """Assemble the manifest model without writing it."""
        build = BuildInfo(
            build_timestamp=datetime.now(),
            content_dir=store.location,
            include_drafts=self.include_drafts,
        )
        return ContentManifest(
            build=build,
            articles=[self._entry(a) for a in store.listing(self.include_drafts)],
            tags=store.tag_counts(self.include_drafts),
            validation_errors=[str(error) for error in store.errors],
        )

    def compile(self, store: DocumentStore, output_dir: Path) -> Path:
        manifest = self.build_manifest(store)

        output_dir.mkdir(parents=True, exist_ok=True)
        manifest_path = output_dir / MANIFEST_FILENAME
        manifest_path.write_text(manifest.model_dump_json(indent=2))

        logger.info(
            f"Wrote manifest with {len(manifest.articles)} articles to {manifest_path}"
        )
        return manifest_path

    @staticmethod
    def _entry(article: Article) -> ManifestEntry:
        return ManifestEntry.model_validate(
            article.model_dump(include=set(ManifestEntry.model_fields))
        )
