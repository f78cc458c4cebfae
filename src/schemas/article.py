"""Article domain objects.

An article is a single blog post: a front-matter block decoded into
``ArticleMetadata`` plus the body text that follows it. ``Article`` adds the
slug and derived data assigned while the document store is built.
"""

import re
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
BOOLEAN_LITERALS = {"true": True, "false": False}
# Characters not allowed in XML 1.0 text
XML_INCOMPATIBLE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

RECOGNIZED_KEYS = (
    "title",
    "date",
    "lastmod",
    "tags",
    "draft",
    "summary",
    "images",
    "authors",
)
REQUIRED_KEYS = ("title", "date", "summary")
DEFAULT_AUTHORS = ["default"]


class ArticleMetadata(BaseModel):
    """Recognized front-matter fields of a blog post.

    Attributes:
        title: Post title
        date: Publication date
        lastmod: Last modification date, if any
        tags: Tags in display order (not deduplicated)
        draft: Whether the post is unpublished
        summary: Short abstract
        images: Image URLs in display order
        authors: Author identifiers, ``["default"]`` when omitted
        extra: Unrecognized front-matter keys, kept as decoded
    """

    title: str = Field(min_length=1)
    date: date
    lastmod: date | None = None
    tags: list[str] = Field(default_factory=list)
    draft: bool = False
    summary: str = Field(min_length=1)
    images: list[str] = Field(default_factory=list)
    authors: list[str] = Field(default_factory=lambda: list(DEFAULT_AUTHORS))
    extra: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("date", "lastmod", mode="before")
    @classmethod
    def _decode_date(cls, value: Any) -> Any:
        if value is None or (isinstance(value, date) and not isinstance(value, datetime)):
            return value
        if isinstance(value, str) and DATE_PATTERN.match(value.strip()):
            return date.fromisoformat(value.strip())
        raise ValueError(f"expected a YYYY-MM-DD date, got {value!r}")

    @field_validator("draft", mode="before")
    @classmethod
    def _decode_draft(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in BOOLEAN_LITERALS:
            return BOOLEAN_LITERALS[value.strip().lower()]
        raise ValueError(f"expected true or false, got {value!r}")

    @field_validator("tags", "images", "authors", mode="before")
    @classmethod
    def _require_sequence(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return list(value)
        raise ValueError(f"expected a list of strings, got {value!r}")

    @field_validator("title", "summary", "tags", "images", "authors")
    @classmethod
    def _reject_control_characters(cls, value: Any) -> Any:
        for text in [value] if isinstance(value, str) else value:
            match = XML_INCOMPATIBLE.search(text)
            if match:
                raise ValueError(f"contains disallowed character {match.group()!r}")
        return value


class Article(ArticleMetadata):
    """A blog post held by the document store.

    Attributes:
        slug: Unique identifier derived from the storage path
        body: Raw markdown/MDX text following the front-matter block
        path: Source-relative path the article was read from
        code_languages: Language tags of fenced code blocks, first-seen order
    """

    slug: str = Field(min_length=1)
    body: str = ""
    path: str | None = None
    code_languages: list[str] = Field(default_factory=list)

    @property
    def metadata(self) -> ArticleMetadata:
        """The recognized front-matter fields without store-assigned data."""
        return ArticleMetadata.model_validate(
            self.model_dump(include=set(ArticleMetadata.model_fields))
        )

    @property
    def sort_key(self) -> tuple[int, str]:
        """Key ordering articles by date descending, then slug ascending."""
        return (-self.date.toordinal(), self.slug)
