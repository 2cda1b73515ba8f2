"""
Blog post endpoints — list, fetch, create, update, delete.
Bodies are validated here by the pydantic schemas; all logic is delegated
to BlogPostService. Domain errors are mapped to status codes in main.py.
"""

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import get_blog_service
from app.domain.models import BlogPostCreate, BlogPostPublic, BlogPostUpdate
from app.services.blog_service import BlogPostService

router = APIRouter(prefix="/posts", tags=["Blog Posts"])


@router.get("", response_model=list[BlogPostPublic])
async def list_posts(svc: BlogPostService = Depends(get_blog_service)):
    """List every blog post."""
    return await svc.list_posts()


@router.get("/{post_id}", response_model=BlogPostPublic)
async def get_post(post_id: str, svc: BlogPostService = Depends(get_blog_service)):
    return await svc.get_post(post_id)


@router.post(
    "",
    response_model=BlogPostPublic,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: BlogPostCreate,
    svc: BlogPostService = Depends(get_blog_service),
):
    """
    Create a blog post.
    Author is sent as {firstName, lastName} and returned as one display string.
    """
    return await svc.create_post(body)


@router.put(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def update_post(
    post_id: str,
    body: BlogPostUpdate,
    svc: BlogPostService = Depends(get_blog_service),
):
    """Partially update title, content and/or author."""
    await svc.update_post(post_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_post(post_id: str, svc: BlogPostService = Depends(get_blog_service)):
    """Delete a blog post. Unknown ids also answer 204."""
    await svc.delete_post(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
