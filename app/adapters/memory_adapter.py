"""
Process-local implementation of DatabasePort.

Backs DATABASE_BACKEND=memory and the test suite. Documents are deep-copied
on the way in and out so callers never share state with the store.
"""

import copy
import uuid
from typing import Any

from app.ports.database_port import DatabasePort


class InMemoryAdapter(DatabasePort):
    """Dict-backed document store keyed by id, in insertion order."""

    def __init__(self) -> None:
        self._posts: dict[str, dict[str, Any]] = {}

    # ── Blog Posts ─────────────────────────────────────────────

    async def insert_blog_post(self, data: dict[str, Any]) -> dict[str, Any]:
        # ids are never reused: uuid4 keeps them unique after deletes too
        post_id = uuid.uuid4().hex
        doc = {**copy.deepcopy(data), "id": post_id}
        self._posts[post_id] = doc
        return copy.deepcopy(doc)

    async def insert_blog_posts(self, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [await self.insert_blog_post(item) for item in items]

    async def list_blog_posts(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(doc) for doc in self._posts.values()]

    async def get_blog_post(self, post_id: str) -> dict[str, Any] | None:
        doc = self._posts.get(post_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def update_blog_post(
        self, post_id: str, data: dict[str, Any]
    ) -> dict[str, Any] | None:
        doc = self._posts.get(post_id)
        if doc is None:
            return None
        changes = {k: v for k, v in data.items() if k not in ("id", "created")}
        doc.update(copy.deepcopy(changes))
        return copy.deepcopy(doc)

    async def delete_blog_post(self, post_id: str) -> bool:
        return self._posts.pop(post_id, None) is not None

    async def count_blog_posts(self) -> int:
        return len(self._posts)

    # ── Maintenance ────────────────────────────────────────────

    async def drop_all(self) -> None:
        self._posts.clear()
