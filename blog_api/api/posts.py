"""
Post Management API

Provides CRUD endpoints for blog posts.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from blog_api.api.deps import PostServiceDep
from blog_api.common.errors import AppError
from blog_api.domain.post import PostCreate, PostUpdate, PostResponse

router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
)


@router.get("", response_model=list[PostResponse])
async def list_posts(
    service: PostServiceDep,
):
    """
    Get Post List

    Returns every stored post, oldest first.
    """
    try:
        return await service.get_all()
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    service: PostServiceDep,
):
    """
    Get single Post details
    """
    try:
        return await service.get_by_id(post_id)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    data: PostCreate,
    service: PostServiceDep,
):
    """
    Create Post
    """
    try:
        return await service.create(data)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


# Update answers 201 rather than 200; existing clients depend on it.
@router.put("/{post_id}", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def update_post(
    post_id: str,
    data: PostUpdate,
    service: PostServiceDep,
):
    """
    Update Post

    Only fields present in the body are changed.
    """
    try:
        return await service.update(post_id, data)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    service: PostServiceDep,
):
    """
    Delete Post

    Succeeds whether or not the post exists.
    """
    try:
        await service.delete(post_id)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)
