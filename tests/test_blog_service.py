"""BlogPostService — resource logic against an in-memory store."""

from datetime import datetime, timezone

import pytest

from app.domain.errors import NotFoundError, ValidationError
from app.domain.models import BlogPostCreate, BlogPostUpdate
from app.services.blog_service import BlogPostService, to_document, to_public


@pytest.fixture
def svc(db):
    return BlogPostService(db=db)


def _create_body(**overrides) -> BlogPostCreate:
    data = {
        "author": {"firstName": "Jane", "lastName": "Doe"},
        "title": "Hello",
        "content": "World",
    }
    data.update(overrides)
    return BlogPostCreate.model_validate(data)


def test_to_public_joins_author_names():
    doc = {
        "id": "abc",
        "author": {"firstName": "Jane", "lastName": "Doe"},
        "title": "t",
        "content": "c",
        "created": "2024-05-01T12:00:00+00:00",
    }

    public = to_public(doc)

    assert public.author == "Jane Doe"
    assert public.created == datetime(2024, 5, 1, 12, tzinfo=timezone.utc)


def test_to_document_defaults_created_to_now():
    before = datetime.now(timezone.utc)

    doc = to_document(_create_body())

    assert datetime.fromisoformat(doc["created"]) >= before
    assert doc["author"] == {"firstName": "Jane", "lastName": "Doe"}
    assert "id" not in doc


async def test_created_post_is_retrievable_by_id(svc):
    created = await svc.create_post(_create_body())

    fetched = await svc.get_post(created.id)

    assert fetched == created


async def test_list_length_matches_store_count(svc, db):
    await svc.create_post(_create_body())

    assert len(await svc.list_posts()) == await db.count_blog_posts() == 11


async def test_partial_update_leaves_other_fields(svc):
    created = await svc.create_post(_create_body())

    await svc.update_post(created.id, BlogPostUpdate(content="New content"))

    fetched = await svc.get_post(created.id)
    assert fetched.content == "New content"
    assert fetched.title == created.title
    assert fetched.author == created.author
    assert fetched.created == created.created


async def test_explicit_null_is_treated_as_omitted(svc):
    created = await svc.create_post(_create_body())

    await svc.update_post(
        created.id, BlogPostUpdate.model_validate({"title": "New", "content": None})
    )

    fetched = await svc.get_post(created.id)
    assert fetched.title == "New"
    assert fetched.content == created.content


async def test_update_rejects_mismatched_body_id(svc):
    created = await svc.create_post(_create_body())

    with pytest.raises(ValidationError):
        await svc.update_post(created.id, BlogPostUpdate(id="other", title="x"))


async def test_update_unknown_id_raises_not_found(svc):
    with pytest.raises(NotFoundError) as exc_info:
        await svc.update_post("nope", BlogPostUpdate(title="x"))

    assert exc_info.value.post_id == "nope"


async def test_delete_then_get_raises_not_found(svc):
    created = await svc.create_post(_create_body())

    await svc.delete_post(created.id)

    with pytest.raises(NotFoundError):
        await svc.get_post(created.id)


async def test_delete_unknown_id_is_silent(svc, db, caplog):
    await svc.delete_post("nope")

    assert await db.count_blog_posts() == 10
    assert "unknown blog post nope" in caplog.text


def test_to_document_attaches_utc_to_naive_created():
    doc = to_document(_create_body(created="2020-01-02T03:04:05"))

    assert datetime.fromisoformat(doc["created"]).tzinfo is not None
    assert doc["created"] == "2020-01-02T03:04:05+00:00"


async def test_empty_update_is_a_no_op(svc):
    created = await svc.create_post(_create_body())

    await svc.update_post(created.id, BlogPostUpdate())

    assert await svc.get_post(created.id) == created


async def test_empty_update_unknown_id_raises_not_found(svc):
    with pytest.raises(NotFoundError):
        await svc.update_post("nope", BlogPostUpdate(id="nope"))
