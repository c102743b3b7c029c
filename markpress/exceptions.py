class MarkpressError(Exception):
    """Base exception for all build-time failures."""


class PostNotFoundError(MarkpressError, LookupError):
    """Raised when no file in the content directory matches a slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Post not found: {slug}")


class MalformedContentError(MarkpressError, ValueError):
    """Raised when front matter cannot be parsed or is missing required fields."""

    def __init__(self, slug: str, reason: str):
        self.slug = slug
        self.reason = reason
        super().__init__(f"Malformed post {slug}: {reason}")


class RenderError(MarkpressError, RuntimeError):
    """Raised when markdown cannot be converted to HTML."""
