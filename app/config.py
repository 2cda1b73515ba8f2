"""
Application configuration loaded from environment variables.
Uses pydantic-settings for typed, validated config.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All environment variables read by the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Storage ───────────────────────────────────────────────
    database_backend: Literal["supabase", "memory"] = "supabase"

    # ── Supabase (required when database_backend == "supabase") ──
    supabase_url: str | None = None
    supabase_service_role_key: str | None = None  # bypasses RLS
    blog_posts_table: str = "blog_posts"

    # ── App ───────────────────────────────────────────────────
    app_name: str = "blog-posts-api"
    debug: bool = False
    log_level: str = "INFO"


# Singleton — import this wherever config is needed
settings = Settings()
