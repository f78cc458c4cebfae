"""Parsers for content documents."""

from .code_fences import find_code_languages
from .front_matter import dump_document, dump_front_matter, parse_front_matter
from .slugs import slug_from_path, slugify

__all__ = [
    "dump_document",
    "dump_front_matter",
    "find_code_languages",
    "parse_front_matter",
    "slug_from_path",
    "slugify",
]
