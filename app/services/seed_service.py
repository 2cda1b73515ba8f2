"""
Seed / teardown helpers — fill the store with fake posts and wipe it again.
Used by the test suite and by seed_posts.py.
"""

import logging
from typing import Any

from faker import Faker

from app.domain.models import BlogPostCreate
from app.ports.database_port import DatabasePort
from app.services.blog_service import to_document

logger = logging.getLogger(__name__)


def generate_blog_post_data(fake: Faker) -> dict[str, Any]:
    """One valid POST /posts body with placeholder author, title and content."""
    return {
        "author": {
            "firstName": fake.first_name(),
            "lastName": fake.last_name(),
        },
        "title": fake.sentence(),
        "content": fake.text(),
    }


async def seed_blog_posts(
    db: DatabasePort, count: int = 10, fake: Faker | None = None
) -> list[dict[str, Any]]:
    """Bulk-insert `count` generated posts and return the stored documents."""
    fake = fake or Faker()
    logger.info(f"Seeding {count} blog posts")
    items = [
        to_document(BlogPostCreate.model_validate(generate_blog_post_data(fake)))
        for _ in range(count)
    ]
    return await db.insert_blog_posts(items)


async def tear_down(db: DatabasePort) -> None:
    """Drop every blog post."""
    logger.warning("Deleting all blog posts")
    await db.drop_all()
