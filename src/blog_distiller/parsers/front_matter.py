"""Front-matter parsing and serialization.

A content document starts with a ``---`` line, followed by ``key: value``
metadata lines, a closing ``---`` line, and the body text:

    ---
    title: 'Adding Prism to a Next.js project'
    date: '2023-01-04'
    tags: ['next-js', 'prism', 'guide']
    draft: false
    summary: 'Guide to installing Prism in Next.js.'
    ---
    Body text here.

The block is read with YAML's base loader, which keeps every scalar as a
string; booleans and dates are decoded by ``ArticleMetadata`` so that a value
like ``draft: yes`` is rejected rather than guessed.
"""

import json
import re
from typing import Any

import yaml
from pydantic import ValidationError

from blog_distiller.exceptions import MalformedFrontMatter
from schemas.article import RECOGNIZED_KEYS, REQUIRED_KEYS, ArticleMetadata
from schemas.document import ParsedDocument

DELIMITER = "---"
PLAIN_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_.-]*$")
OPTIONAL_KEYS = tuple(k for k in RECOGNIZED_KEYS if k not in REQUIRED_KEYS)


def split_front_matter(text: str) -> tuple[str, str]:
    """Split a document into its raw metadata block and body.

    Args:
        text: Raw document text

    Returns:
        Tuple of (metadata block, body) with the body trimmed

    Raises:
        MalformedFrontMatter: If either delimiter line is missing
    """
    text = text.lstrip("\ufeff").replace("\r\n", "\n")
    lines = text.split("\n")

    if lines[0].rstrip() != DELIMITER:
        raise MalformedFrontMatter("Missing opening front-matter delimiter")

    for index in range(1, len(lines)):
        if lines[index].rstrip() == DELIMITER:
            block = "\n".join(lines[1:index])
            body = "\n".join(lines[index + 1 :])
            return block, body.strip()

    raise MalformedFrontMatter("Missing closing front-matter delimiter")


def decode_front_matter(block: str) -> ArticleMetadata:
    """Decode a raw metadata block into an ArticleMetadata record.

    Args:
        block: Text between the two delimiter lines

    Returns:
        The decoded metadata

    Raises:
        MalformedFrontMatter: If the block is not a mapping, a required key is
            missing, or a value cannot be decoded
    """
    try:
        raw = yaml.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise MalformedFrontMatter(f"Front-matter is not valid YAML: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise MalformedFrontMatter("Front-matter must be a mapping of key: value lines")

    missing = [key for key in REQUIRED_KEYS if key not in raw]
    if missing:
        raise MalformedFrontMatter(
            f"Missing required key(s): {', '.join(missing)}",
            errors=[f"{key}: Field required" for key in missing],
        )

    fields: dict[str, Any] = {}
    extra: dict[str, Any] = {}
    for key, value in raw.items():
        if key in RECOGNIZED_KEYS:
            # An empty value for an optional key reads as absent
            if key in OPTIONAL_KEYS and value in ("", None):
                continue
            fields[key] = value
        else:
            extra[key] = value

    try:
        return ArticleMetadata(**fields, extra=extra)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise MalformedFrontMatter(
            f"Invalid front-matter value(s): {'; '.join(errors)}",
            errors=errors,
        ) from e


def parse_front_matter(text: str) -> ParsedDocument:
    """Parse a content document into metadata and body.

    The slug is not assigned here; callers derive it from the document path.

    Args:
        text: Raw document text

    Returns:
        ParsedDocument with decoded metadata and trimmed body

    Raises:
        MalformedFrontMatter: If the document has no valid front-matter block
    """
    block, body = split_front_matter(text)
    return ParsedDocument(metadata=decode_front_matter(block), body=body)


def _format_string(value: str) -> str:
    if "\n" in value:
        # JSON strings are valid YAML double-quoted scalars
        return json.dumps(value, ensure_ascii=False)
    return "'" + value.replace("'", "''") + "'"


def _format_key(key: str) -> str:
    return key if PLAIN_KEY.match(key) else _format_string(key)


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return _format_string(value)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return "[" + ", ".join(_format_string(item) for item in value) + "]"
    if not isinstance(value, (list, dict)):
        return _format_string(str(value))
    return yaml.safe_dump(
        value, default_flow_style=True, allow_unicode=True, width=float("inf")
    ).strip()


def dump_front_matter(metadata: ArticleMetadata) -> str:
    """Serialize metadata as a front-matter block, delimiters included.

    Recognized keys come first in canonical order; ``lastmod`` and ``images``
    are written only when set. Unrecognized keys follow in their original
    order.

    Args:
        metadata: The metadata to serialize

    Returns:
        Front-matter text ending with the closing delimiter and a newline
    """
    lines = [
        DELIMITER,
        f"title: {_format_string(metadata.title)}",
        f"date: '{metadata.date.isoformat()}'",
    ]
    if metadata.lastmod is not None:
        lines.append(f"lastmod: '{metadata.lastmod.isoformat()}'")
    lines.append(f"tags: {_format_value(metadata.tags)}")
    lines.append(f"draft: {'true' if metadata.draft else 'false'}")
    lines.append(f"summary: {_format_string(metadata.summary)}")
    if metadata.images:
        lines.append(f"images: {_format_value(metadata.images)}")
    lines.append(f"authors: {_format_value(metadata.authors)}")
    for key, value in metadata.extra.items():
        lines.append(f"{_format_key(key)}: {_format_value(value)}")
    lines.append(DELIMITER)
    return "\n".join(lines) + "\n"


def dump_document(metadata: ArticleMetadata, body: str) -> str:
    """Serialize metadata and body as a complete content document."""
    return dump_front_matter(metadata) + body
