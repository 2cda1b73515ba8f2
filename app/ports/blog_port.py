from abc import ABC, abstractmethod
from typing import Any


class BlogPort(ABC):
    @abstractmethod
    async def insert_blog_post(self, data: dict[str, Any]) -> dict[str, Any]:
        """Insert one post and return the stored document, id included."""
        ...

    @abstractmethod
    async def insert_blog_posts(self, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Bulk insert; returns the stored documents in input order."""
        ...

    @abstractmethod
    async def list_blog_posts(self) -> list[dict[str, Any]]:
        """Fetch every post, oldest first."""
        ...

    @abstractmethod
    async def get_blog_post(self, post_id: str) -> dict[str, Any] | None:
        """Fetch a single post by ID."""
        ...

    @abstractmethod
    async def update_blog_post(
        self, post_id: str, data: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Partially update a post. Returns None when the ID is unknown."""
        ...

    @abstractmethod
    async def delete_blog_post(self, post_id: str) -> bool:
        """Delete a post. Returns whether anything was removed."""
        ...

    @abstractmethod
    async def count_blog_posts(self) -> int:
        ...
