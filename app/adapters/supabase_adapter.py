"""
Concrete implementation of DatabasePort using the Supabase Python client.

Posts live in a single table whose `author` column is JSON, so each row is
stored and returned as a document: {id, author: {firstName, lastName},
title, content, created}.
"""

import logging
from typing import Any
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from app.domain.errors import PersistenceError
from app.ports.database_port import DatabasePort

logger = logging.getLogger(__name__)

# Supabase refuses an unfiltered DELETE; every real id differs from this one.
_NIL_UUID = "00000000-0000-0000-0000-000000000000"


def _is_uuid(value: str) -> bool:
    try:
        UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return True


class SupabaseAdapter(DatabasePort):
    """All database I/O goes through the Supabase REST client."""

    def __init__(self, client: Client, table: str = "blog_posts") -> None:
        self._client = client
        self._table_name = table

    def _table(self):
        return self._client.table(self._table_name)

    def _execute(self, query, action: str):
        try:
            return query.execute()
        except (APIError, httpx.HTTPError) as exc:
            logger.error(f"Supabase failed to {action} on '{self._table_name}': {exc}")
            raise PersistenceError(f"Failed to {action}: {exc}") from exc

    # ── Blog Posts ─────────────────────────────────────────────

    async def insert_blog_post(self, data: dict[str, Any]) -> dict[str, Any]:
        result = self._execute(self._table().insert(data), "insert blog post")
        return result.data[0]

    async def insert_blog_posts(self, items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        if not items:
            return []
        result = self._execute(self._table().insert(items), "insert blog posts")
        return result.data or []

    async def list_blog_posts(self) -> list[dict[str, Any]]:
        result = self._execute(
            self._table().select("*").order("created"),
            "list blog posts",
        )
        return result.data or []

    async def get_blog_post(self, post_id: str) -> dict[str, Any] | None:
        if not _is_uuid(post_id):
            return None
        result = self._execute(
            self._table().select("*").eq("id", post_id).maybe_single(),
            "fetch blog post",
        )
        return result.data if result else None

    async def update_blog_post(
        self, post_id: str, data: dict[str, Any]
    ) -> dict[str, Any] | None:
        if not _is_uuid(post_id):
            return None
        result = self._execute(
            self._table().update(data).eq("id", post_id),
            "update blog post",
        )
        return result.data[0] if result.data else None

    async def delete_blog_post(self, post_id: str) -> bool:
        if not _is_uuid(post_id):
            return False
        result = self._execute(
            self._table().delete().eq("id", post_id),
            "delete blog post",
        )
        return bool(result.data)

    async def count_blog_posts(self) -> int:
        result = self._execute(
            self._table().select("id", count="exact"),
            "count blog posts",
        )
        return result.count if result.count is not None else len(result.data or [])

    # ── Maintenance ────────────────────────────────────────────

    async def drop_all(self) -> None:
        self._execute(self._table().delete().neq("id", _NIL_UUID), "drop blog posts")
