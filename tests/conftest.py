"""Test fixtures — seeded in-memory store + FastAPI test client.

Invariants:
    - Every test gets its own InMemoryAdapter, seeded with 10 fake posts
    - get_db dependency overridden so routes never touch Supabase
    - Store dropped after each test
"""

import os

# Never reach a real Supabase project from the test suite
os.environ.setdefault("DATABASE_BACKEND", "memory")

import pytest
from faker import Faker
from httpx import ASGITransport, AsyncClient

from app.adapters.memory_adapter import InMemoryAdapter
from app.dependencies import get_db
from app.services.seed_service import seed_blog_posts, tear_down
from main import app


@pytest.fixture
def fake():
    return Faker()


@pytest.fixture
async def db(fake):
    adapter = InMemoryAdapter()
    await seed_blog_posts(adapter, count=10, fake=fake)
    yield adapter
    await tear_down(adapter)


@pytest.fixture
async def client(db):
    """FastAPI test client with the DB dependency overridden."""
    app.dependency_overrides[get_db] = lambda: db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
