"""
Pydantic models for requests, responses, and internal data transfer.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ── Author ────────────────────────────────────────────────────


class AuthorName(BaseModel):
    """Structured author as accepted on write and kept in storage."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: str = Field(..., alias="firstName", min_length=1)
    last_name: str = Field(..., alias="lastName", min_length=1)

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


# ── Blog Post ─────────────────────────────────────────────────


class BlogPostCreate(BaseModel):
    """Request body for POST /posts."""

    model_config = ConfigDict(str_strip_whitespace=True)

    author: AuthorName
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    created: datetime | None = None


class BlogPostUpdate(BaseModel):
    """
    Request body for PUT /posts/{id}.

    Every field is optional. `id`, when sent, must match the path id;
    an explicit null is treated the same as leaving the field out.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    id: str | None = None
    title: str | None = Field(None, min_length=1)
    content: str | None = Field(None, min_length=1)
    author: AuthorName | None = None

    def changes(self) -> dict:
        """Fields to write, in storage shape (author keys camelCased)."""
        return self.model_dump(
            include={"title", "content", "author"},
            exclude_none=True,
            by_alias=True,
        )


class BlogPostPublic(BaseModel):
    """Public representation returned by every read path."""

    id: str
    author: str
    title: str
    content: str
    created: datetime
