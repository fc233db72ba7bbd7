"""
API Dependency Injection Module

Provides dependencies required by FastAPI routes.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.config import get_settings
from blog_api.db.redis import get_redis
from blog_api.db.session import get_db as _get_db
from blog_api.repositories.post_repo import PostRepository
from blog_api.repositories.redis import RedisPostRepository
from blog_api.repositories.sqlalchemy import SQLAlchemyPostRepository
from blog_api.services import PostService


async def get_db():
    """
    Get database session dependency

    Yields:
        AsyncSession: Async database session
    """
    async for session in _get_db():
        yield session


# Database session dependency type
DbSession = Annotated[AsyncSession, Depends(get_db)]


# ============ Repository Dependencies ============

def get_post_repo(db: DbSession) -> PostRepository:
    """
    Get Post Repository

    Picks the backend from POST_STORE_TYPE. The session is only connected
    on first use, so the redis backend never touches the database.
    """
    if get_settings().POST_STORE_TYPE == "redis":
        return RedisPostRepository(get_redis())
    return SQLAlchemyPostRepository(db)


PostRepositoryDep = Annotated[PostRepository, Depends(get_post_repo)]


# ============ Service Dependencies ============

def get_post_service(repo: PostRepositoryDep) -> PostService:
    """Get Post Service"""
    return PostService(repo)


PostServiceDep = Annotated[PostService, Depends(get_post_service)]
