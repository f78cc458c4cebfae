"""Tests for slug normalization."""

import pytest

from blog_distiller.exceptions import InvalidArticle
from blog_distiller.parsers import slug_from_path, slugify


class TestSlugFromPath:
    """Tests for slug_from_path."""

    def test_strips_extension(self):
        assert slug_from_path("prism-nextjs.mdx") == "prism-nextjs"

    def test_directories_become_hyphens(self):
        """Directory separators are folded into the slug."""
        assert slug_from_path("guides/React Context.md") == "guides-react-context"

    def test_windows_separators(self):
        assert slug_from_path("guides\\react.md") == "guides-react"

    def test_lowercase_and_punctuation(self):
        """Case is folded and punctuation runs collapse to one hyphen."""
        assert slug_from_path("Next.js__Guide (2023).MDX") == "next-js-guide-2023"

    def test_unicode_folded(self):
        assert slug_from_path("café-crème.md") == "cafe-creme"

    def test_only_last_suffix_removed(self):
        assert slug_from_path("notes.v2.md") == "notes-v2"

    def test_unusable_path(self):
        """A path with nothing URL-safe left is an invalid article."""
        with pytest.raises(InvalidArticle) as exc_info:
            slug_from_path("___.md")

        assert exc_info.value.path == "___.md"


class TestSlugify:
    """Tests for slugify."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("next-js", "next-js"),
            ("Next JS", "next-js"),
            ("  React  ", "react"),
            ("C++", "c"),
        ],
    )
    def test_slugify(self, text, expected):
        assert slugify(text) == expected
