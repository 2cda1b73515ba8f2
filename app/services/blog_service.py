"""
Blog post service — CRUD over the blog_posts collection.
Single Responsibility: validates write intent, delegates storage to the port,
and maps stored documents to their public shape.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from app.domain.errors import NotFoundError, ValidationError
from app.domain.models import AuthorName, BlogPostCreate, BlogPostPublic, BlogPostUpdate
from app.ports.blog_port import BlogPort

logger = logging.getLogger(__name__)


def to_public(doc: dict[str, Any]) -> BlogPostPublic:
    """Collapse the stored {firstName, lastName} author into a display string."""
    author = AuthorName.model_validate(doc["author"])
    return BlogPostPublic(
        id=str(doc["id"]),
        author=author.display_name,
        title=doc["title"],
        content=doc["content"],
        created=doc["created"],
    )


def to_document(body: BlogPostCreate) -> dict[str, Any]:
    """Storage shape of a new post; `created` defaults to now (UTC)."""
    created = body.created or datetime.now(timezone.utc)
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return {
        "author": body.author.model_dump(by_alias=True),
        "title": body.title,
        "content": body.content,
        "created": created.isoformat(),
    }


class BlogPostService:
    """Handles blog post CRUD operations."""

    def __init__(self, db: BlogPort) -> None:
        self._db = db

    async def list_posts(self) -> list[BlogPostPublic]:
        docs = await self._db.list_blog_posts()
        return [to_public(d) for d in docs]

    async def get_post(self, post_id: str) -> BlogPostPublic:
        doc = await self._db.get_blog_post(post_id)
        if doc is None:
            raise NotFoundError(post_id)
        return to_public(doc)

    async def create_post(self, body: BlogPostCreate) -> BlogPostPublic:
        doc = await self._db.insert_blog_post(to_document(body))
        logger.info(f"Created blog post {doc['id']}")
        return to_public(doc)

    async def update_post(self, post_id: str, body: BlogPostUpdate) -> None:
        """
        Apply a partial update. Fields left out of `body` are untouched,
        and `id` / `created` are never written.
        """
        if body.id is not None and body.id != post_id:
            raise ValidationError(
                f"Request path id ({post_id}) and request body id ({body.id}) must match"
            )

        changes = body.changes()
        if not changes:
            # empty partial is a no-op, but the post must still exist
            if await self._db.get_blog_post(post_id) is None:
                raise NotFoundError(post_id)
            return

        updated = await self._db.update_blog_post(post_id, changes)
        if updated is None:
            raise NotFoundError(post_id)
        logger.info(f"Updated blog post {post_id}: {', '.join(sorted(changes))}")

    async def delete_post(self, post_id: str) -> None:
        """Delete by id. Unknown ids succeed silently (logged only)."""
        removed = await self._db.delete_blog_post(post_id)
        if removed:
            logger.info(f"Deleted blog post {post_id}")
        else:
            logger.warning(f"Delete requested for unknown blog post {post_id}")
