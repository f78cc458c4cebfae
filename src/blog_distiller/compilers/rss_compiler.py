"""Compile an RSS 2.0 feed of the published articles."""

import logging
from datetime import date, datetime, time, timezone
from email.utils import format_datetime
from pathlib import Path

from lxml import etree

from blog_distiller.config import BuildConfig
from blog_distiller.store import DocumentStore
from schemas.article import Article

from .compiler import Compiler

logger = logging.getLogger(__name__)

ATOM_NS = "http://www.w3.org/2005/Atom"
FEED_FILENAME = "feed.xml"


def rfc822_date(value: date) -> str:
    """Format a date as an RFC 822 timestamp at midnight UTC.

    Examples:
        >>> from datetime import date
        >>> rfc822_date(date(2023, 1, 4))
        'Wed, 04 Jan 2023 00:00:00 +0000'
    """
    return format_datetime(datetime.combine(value, time(0, 0), tzinfo=timezone.utc))


class RSSCompiler(Compiler):
    """Write ``feed.xml`` with one item per listed article.

    Article links are ``{site_url}/blog/{slug}``. The channel's
    ``lastBuildDate`` is the newest article date, so the feed is identical
    across rebuilds of the same content.
    """

    def __init__(self, config: BuildConfig):
        if not config.site_url:
            raise ValueError("RSS feed requires 'site_url' in the config")
        self.config = config

    def article_url(self, article: Article) -> str:
        return f"{self.config.site_url}/blog/{article.slug}"

    def build_feed(self, store: DocumentStore) -> etree._Element:
        """Build the feed document without writing it."""
        articles = store.listing(self.config.include_drafts)

        rss = etree.Element("rss", nsmap={"atom": ATOM_NS})
        rss.set("version", "2.0")
        channel = etree.SubElement(rss, "channel")

        etree.SubElement(channel, "title").text = self.config.site_title
        etree.SubElement(channel, "link").text = f"{self.config.site_url}/blog"
        etree.SubElement(channel, "description").text = self.config.site_description
        etree.SubElement(channel, "language").text = self.config.language
        if articles:
            newest = max(max(a.date, a.lastmod or a.date) for a in articles)
            etree.SubElement(channel, "lastBuildDate").text = rfc822_date(newest)

        self_link = etree.SubElement(channel, f"{{{ATOM_NS}}}link")
        self_link.set("href", f"{self.config.site_url}/{FEED_FILENAME}")
        self_link.set("rel", "self")
        self_link.set("type", "application/rss+xml")

        for article in articles:
            channel.append(self._build_item(article))

        return rss

    def _build_item(self, article: Article) -> etree._Element:
        item = etree.Element("item")
        url = self.article_url(article)

        guid = etree.SubElement(item, "guid")
        guid.text = url
        etree.SubElement(item, "title").text = article.title
        etree.SubElement(item, "link").text = url
        etree.SubElement(item, "description").text = article.summary
        etree.SubElement(item, "pubDate").text = rfc822_date(article.date)
        for tag in article.tags:
            etree.SubElement(item, "category").text = tag

        return item

    def compile(self, store: DocumentStore, output_dir: Path) -> Path:
        feed = self.build_feed(store)

        output_dir.mkdir(parents=True, exist_ok=True)
        feed_path = output_dir / FEED_FILENAME
        feed_path.write_bytes(
            etree.tostring(
                feed,
                xml_declaration=True,
                encoding="UTF-8",
                pretty_print=True,
            )
        )

        logger.info(f"Wrote RSS feed to {feed_path}")
        return feed_path
