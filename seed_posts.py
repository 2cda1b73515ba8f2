"""
Wipe the blog posts table and insert fresh fake posts (no server needed).
Run from project root: python seed_posts.py [count]
"""
import asyncio
import sys
import os

sys.path.insert(0, os.getcwd())


async def main(count: int):
    from app.dependencies import get_db
    from app.services.seed_service import seed_blog_posts, tear_down

    db = get_db()

    print("[1/3] Deleting old posts...")
    print(f"  Found {await db.count_blog_posts()} posts")
    await tear_down(db)

    print(f"\n[2/3] Seeding {count} posts...")
    posts = await seed_blog_posts(db, count=count)
    print(f"  Inserted {len(posts)} posts")

    print(f"\n[3/3] Done! Total posts: {await db.count_blog_posts()}")


if __name__ == "__main__":
    asyncio.run(main(int(sys.argv[1]) if len(sys.argv) > 1 else 10))
