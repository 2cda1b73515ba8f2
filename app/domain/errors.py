"""
Domain errors raised by services and adapters.
HTTP status mapping lives in main.py, so nothing here knows about FastAPI.
"""


class BlogError(Exception):
    """Base class for every blog-post error."""


class ValidationError(BlogError):
    """Malformed or inconsistent input on a write path."""


class NotFoundError(BlogError):
    """The targeted blog post does not exist."""

    def __init__(self, post_id: str) -> None:
        super().__init__(f"Blog post not found: {post_id}")
        self.post_id = post_id


class PersistenceError(BlogError):
    """The storage engine is unreachable or rejected the operation."""
