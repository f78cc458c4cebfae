"""Build configuration.

Configuration is a plain dict, typically loaded from a JSON file and
overlaid with command-line options, wrapped by ``BuildConfig`` for typed
access with defaults.

Config keys:
    content_dir (required): Directory holding the content documents
    extensions: File extensions to read, a list or a single string
        (default: [".md", ".mdx"])
    max_workers: Parser worker threads (default: 4)
    duplicate_policy: "fail" or "skip" on slug collisions (default: "fail")
    include_drafts: List draft articles in exports (default: False)
    site_url: Public site URL, required for the RSS feed
    site_title: Feed title (default: "Blog")
    site_description: Feed description (default: "")
    language: Feed language (default: "en-us")
"""

import json
import logging
from pathlib import Path

from blog_distiller.sources import DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)

DUPLICATE_POLICIES = ("fail", "skip")


class BuildConfig:
    """Typed view of a build configuration dict."""

    def __init__(self, config: dict):
        if not config.get("content_dir"):
            raise ValueError("config must include 'content_dir'")

        self._config = dict(config)

        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(
                f"duplicate_policy must be one of {', '.join(DUPLICATE_POLICIES)}, "
                f"got '{self.duplicate_policy}'"
            )
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    def __repr__(self) -> str:
        return f"BuildConfig({self._config!r})"

    @property
    def content_dir(self) -> Path:
        return Path(self._config["content_dir"])

    @property
    def extensions(self) -> tuple[str, ...]:
        extensions = self._config.get("extensions", DEFAULT_EXTENSIONS)
        if isinstance(extensions, str):
            return (extensions,)
        return tuple(extensions)

    @property
    def max_workers(self) -> int:
        return int(self._config.get("max_workers", 4))

    @property
    def duplicate_policy(self) -> str:
        return str(self._config.get("duplicate_policy", "fail"))

    @property
    def include_drafts(self) -> bool:
        return bool(self._config.get("include_drafts", False))

    @property
    def site_url(self) -> str | None:
        url = self._config.get("site_url")
        return str(url).rstrip("/") if url else None

    @property
    def site_title(self) -> str:
        return str(self._config.get("site_title", "Blog"))

    @property
    def site_description(self) -> str:
        return str(self._config.get("site_description", ""))

    @property
    def language(self) -> str:
        return str(self._config.get("language", "en-us"))


def load_config_file(path: Path) -> dict:
    """Load a JSON configuration file.

    Args:
        path: Path to the JSON file

    Returns:
        The configuration dict

    Raises:
        ValueError: If the file does not hold a JSON object
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    logger.debug(f"Loaded config from {path}")
    return data
