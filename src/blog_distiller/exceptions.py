"""Custom exceptions for content ingestion."""


class DistillerError(Exception):
    """Base exception for all blog-distiller errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class InvalidArticle(DistillerError):
    """Raised when a content document cannot become an Article."""

    def __init__(self, message: str, path: str | None = None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class MalformedFrontMatter(InvalidArticle):
    """Raised when the front-matter block is missing or cannot be decoded."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        errors: list[str] | None = None,
        *args,
        **kwargs,
    ):
        self.errors = errors or []
        super().__init__(message, path, *args, **kwargs)


class EmptyBody(InvalidArticle):
    """Raised when a published article has no body text."""

    def __init__(self, message: str = "Published article has an empty body", path: str | None = None):
        super().__init__(message, path)


class DuplicateSlug(DistillerError):
    """Raised when two documents normalize to the same slug."""

    def __init__(self, slug: str, paths: list[str]):
        self.slug = slug
        self.paths = list(paths)
        super().__init__(f"Duplicate slug '{slug}': {', '.join(self.paths)}")


class NotFound(DistillerError):
    """Raised when a slug lookup has no matching article."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Article not found: {slug}")
