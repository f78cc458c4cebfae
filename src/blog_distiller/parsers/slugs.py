"""Slug normalization for article paths and tags."""

import re
import unicodedata
from pathlib import PurePosixPath

from blog_distiller.exceptions import InvalidArticle

NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Normalize text to a lowercase, hyphen-separated, URL-safe slug.

    Examples:
        >>> slugify("Next.js & Prism")
        'next-js-prism'
        >>> slugify("Café Crème")
        'cafe-creme'
    """
    folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return NON_ALPHANUMERIC.sub("-", folded.lower()).strip("-")


def slug_from_path(path: str) -> str:
    """Derive an article slug from its source-relative path.

    The extension is dropped and directory separators become hyphens.

    Args:
        path: Source-relative path, POSIX or Windows separators

    Returns:
        The normalized slug

    Raises:
        InvalidArticle: If nothing URL-safe remains after normalization

    Examples:
        >>> slug_from_path("guides/Adding Prism.mdx")
        'guides-adding-prism'
    """
    posix = PurePosixPath(path.replace("\\", "/"))
    stem = posix.with_suffix("") if posix.suffix else posix
    slug = slugify("-".join(part for part in stem.parts if part not in ("/", ".")))
    if not slug:
        raise InvalidArticle(f"Cannot derive a slug from path '{path}'", path=path)
    return slug
