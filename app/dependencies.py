"""
Dependency Injection container.

Wires abstract ports → concrete adapters. To swap a storage backend,
change the adapter instantiation here (or set DATABASE_BACKEND).
Tests replace `get_db` through `app.dependency_overrides`.
"""

from functools import lru_cache

from fastapi import Depends
from supabase import create_client

from app.adapters.memory_adapter import InMemoryAdapter
from app.adapters.supabase_adapter import SupabaseAdapter
from app.config import settings
from app.ports.database_port import DatabasePort
from app.services.blog_service import BlogPostService


# ── Singletons (cached) ──────────────────────────────────────


@lru_cache(maxsize=1)
def _get_supabase_client():
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set "
            "when DATABASE_BACKEND=supabase"
        )
    # Use service role key — bypasses RLS for server-side operations
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


@lru_cache(maxsize=1)
def _get_supabase_adapter() -> SupabaseAdapter:
    return SupabaseAdapter(client=_get_supabase_client(), table=settings.blog_posts_table)


@lru_cache(maxsize=1)
def _get_memory_adapter() -> InMemoryAdapter:
    return InMemoryAdapter()


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_db() -> DatabasePort:
    """Inject the database adapter selected by DATABASE_BACKEND."""
    if settings.database_backend == "memory":
        return _get_memory_adapter()
    return _get_supabase_adapter()


# ── Domain Services ───────────────────────────────────────────


def get_blog_service(db: DatabasePort = Depends(get_db)) -> BlogPostService:
    """Injects the DB adapter into the blog post service."""
    return BlogPostService(db=db)
