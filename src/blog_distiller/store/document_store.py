"""Document store holding the articles of one build."""

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType

from blog_distiller.config import DUPLICATE_POLICIES, BuildConfig
from blog_distiller.exceptions import DuplicateSlug, EmptyBody, InvalidArticle, NotFound
from blog_distiller.parsers import find_code_languages, parse_front_matter, slug_from_path, slugify
from blog_distiller.sources import ContentSource, FileSystemSource
from schemas.article import Article
from schemas.document import DocumentError, SourceDocument

logger = logging.getLogger(__name__)


def load_article(document: SourceDocument) -> Article:
    """Turn a source document into an Article.

    Args:
        document: The (path, text) pair to load; bytes are decoded as UTF-8

    Returns:
        The Article, with slug derived from the document path

    Raises:
        MalformedFrontMatter: If the front-matter cannot be decoded
        EmptyBody: If a non-draft article has no body text
        InvalidArticle: If no slug can be derived from the path, or the
            document bytes are not valid UTF-8
    """
    text = document.text
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidArticle(f"Document is not valid UTF-8: {e}", path=document.path) from e

    try:
        slug = slug_from_path(document.path)
        parsed = parse_front_matter(text)
    except InvalidArticle as e:
        e.path = document.path
        raise

    if not parsed.metadata.draft and not parsed.body:
        raise EmptyBody(path=document.path)

    return Article(
        **parsed.metadata.model_dump(),
        slug=slug,
        body=parsed.body,
        path=document.path,
        code_languages=find_code_languages(parsed.body),
    )


def _load_outcome(document: SourceDocument) -> Article | InvalidArticle:
    """Load an article on a worker thread, returning failures instead of raising."""
    try:
        return load_article(document)
    except InvalidArticle as e:
        return e


class DocumentStore:
    """Read-only collection of the articles of one build, keyed by slug.

    Build a store with ``DocumentStore.build`` (any content source) or
    ``DocumentStore.from_config`` (a content directory). Documents that cannot
    be loaded are excluded and listed in ``errors``.

    Example:
        store = DocumentStore.build(FileSystemSource(Path("./data/blog")))
        for article in store.published():
            ...
    """

    def __init__(
        self,
        articles: Iterable[Article] = (),
        errors: Iterable[DocumentError] = (),
        location: str | None = None,
    ):
        """Initialize the store from already-loaded articles.

        Args:
            articles: Articles to hold
            errors: Documents excluded while loading
            location: Where the articles were read from

        Raises:
            DuplicateSlug: If two articles share a slug
        """
        by_slug: dict[str, Article] = {}
        for article in articles:
            if article.slug in by_slug:
                raise DuplicateSlug(
                    article.slug, [str(by_slug[article.slug].path), str(article.path)]
                )
            by_slug[article.slug] = article

        self._articles = MappingProxyType(by_slug)
        self.errors: tuple[DocumentError, ...] = tuple(errors)
        self.location = location

    def __repr__(self) -> str:
        return f"DocumentStore({len(self._articles)} articles, {len(self.errors)} errors)"

    def __len__(self) -> int:
        return len(self._articles)

    def __contains__(self, slug: object) -> bool:
        return slug in self._articles

    def __iter__(self) -> Iterator[Article]:
        return iter(self.list_articles())

    @classmethod
    def build(
        cls,
        source: ContentSource,
        max_workers: int = 4,
        duplicate_policy: str = "fail",
    ) -> "DocumentStore":
        """Build a store by parsing every document of a content source.

        Documents are parsed on a thread pool; results are merged on the
        calling thread in source order, so the outcome does not depend on
        which worker finishes first.

        Args:
            source: Content source yielding (path, text) pairs
            max_workers: Number of parser threads
            duplicate_policy: "fail" to raise on a slug collision, "skip" to
                keep the earlier document and exclude the later one

        Returns:
            The populated store

        Raises:
            DuplicateSlug: On a slug collision under the "fail" policy
            ValueError: If duplicate_policy is unknown
        """
        if duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(f"Unknown duplicate policy: {duplicate_policy}")

        documents = list(source)
        logger.info(f"Parsing {len(documents)} documents from {source.location or source!r}")

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(executor.map(_load_outcome, documents))

        articles: dict[str, Article] = {}
        errors: list[DocumentError] = []

        for document, outcome in zip(documents, outcomes):
            if isinstance(outcome, InvalidArticle):
                logger.warning(f"Excluding {document.path}: {outcome.message}")
                errors.append(DocumentError(document.path, outcome.message))
                continue

            existing = articles.get(outcome.slug)
            if existing is not None:
                if duplicate_policy == "fail":
                    logger.error(
                        f"Duplicate slug '{outcome.slug}': {existing.path} and {document.path}"
                    )
                    raise DuplicateSlug(outcome.slug, [str(existing.path), document.path])
                message = f"Duplicate slug '{outcome.slug}' already used by {existing.path}"
                logger.warning(f"Skipping {document.path}: {message}")
                errors.append(DocumentError(document.path, message))
                continue

            if outcome.lastmod is not None and outcome.lastmod < outcome.date:
                logger.warning(
                    f"{document.path}: lastmod {outcome.lastmod} is earlier than date {outcome.date}"
                )

            logger.debug(f"Loaded {document.path} as '{outcome.slug}'")
            articles[outcome.slug] = outcome

        logger.info(f"Loaded {len(articles)} articles ({len(errors)} excluded)")
        return cls(articles.values(), errors, location=source.location)

    @classmethod
    def from_config(cls, config: BuildConfig) -> "DocumentStore":
        """Build a store from the content directory named in a build config."""
        source = FileSystemSource(config.content_dir, config.extensions)
        return cls.build(
            source,
            max_workers=config.max_workers,
            duplicate_policy=config.duplicate_policy,
        )

    def get(self, slug: str) -> Article:
        """Look up an article by exact slug.

        Raises:
            NotFound: If no article has this slug
        """
        try:
            return self._articles[slug]
        except KeyError:
            raise NotFound(slug) from None

    def list_articles(self, draft: bool | None = None) -> list[Article]:
        """List articles newest first, ties broken by slug.

        Args:
            draft: If given, only articles whose draft flag equals it

        Returns:
            The matching articles in listing order
        """
        articles = self._articles.values()
        if draft is not None:
            articles = [a for a in articles if a.draft == draft]
        return sorted(articles, key=lambda a: a.sort_key)

    def published(self) -> list[Article]:
        """List non-draft articles in listing order."""
        return self.list_articles(draft=False)

    def listing(self, include_drafts: bool = False) -> list[Article]:
        """List published articles, plus drafts when include_drafts is set."""
        return self.list_articles(draft=None if include_drafts else False)

    def tag_counts(self, include_drafts: bool = False) -> dict[str, int]:
        """Count articles per tag slug.

        A tag repeated within one article counts once for that article.

        Returns:
            Mapping of tag slug to article count, sorted by slug
        """
        counts: Counter[str] = Counter()
        for article in self.listing(include_drafts):
            counts.update({slugify(tag) for tag in article.tags} - {""})
        return dict(sorted(counts.items()))

    def by_tag(self, tag: str, include_drafts: bool = False) -> list[Article]:
        """List articles carrying a tag, compared by tag slug."""
        target = slugify(tag)
        return [
            article
            for article in self.listing(include_drafts)
            if target in {slugify(t) for t in article.tags}
        ]
