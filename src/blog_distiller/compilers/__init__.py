"""Compilers for build artefacts."""

from .compiler import Compiler
from .manifest_compiler import MANIFEST_FILENAME, ManifestCompiler
from .rss_compiler import FEED_FILENAME, RSSCompiler

__all__ = [
    "Compiler",
    "FEED_FILENAME",
    "MANIFEST_FILENAME",
    "ManifestCompiler",
    "RSSCompiler",
]
