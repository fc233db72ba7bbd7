"""
Post Repository SQLAlchemy Implementation

Provides concrete database operation implementation for Post data.
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.common.time import ensure_utc
from blog_api.db.models import Post as PostORM
from blog_api.domain.post import AuthorName, Post, PostCreate, PostUpdate
from blog_api.repositories.post_repo import PostRepository


class SQLAlchemyPostRepository(PostRepository):
    """
    Post Repository SQLAlchemy Implementation

    Uses SQLAlchemy ORM to implement database operations for Posts.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Repository

        Args:
            session: Async database session
        """
        self.session = session

    def _to_domain(self, entity: PostORM) -> Post:
        """Convert ORM entity to domain model"""
        return Post(
            id=entity.id,
            title=entity.title,
            content=entity.content,
            author=AuthorName(
                first_name=entity.author_first_name,
                last_name=entity.author_last_name,
            ),
            created=ensure_utc(entity.created),
        )

    async def _get_entity(self, id: str) -> Optional[PostORM]:
        result = await self.session.execute(
            select(PostORM).where(PostORM.id == id)
        )
        return result.scalar_one_or_none()

    async def insert(self, data: PostCreate) -> Post:
        """Insert Post"""
        entity = PostORM(
            title=data.title,
            content=data.content,
            author_first_name=data.author.first_name,
            author_last_name=data.author.last_name,
        )
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return self._to_domain(entity)

    async def get_by_id(self, id: str) -> Optional[Post]:
        """Get Post by ID"""
        entity = await self._get_entity(id)
        return self._to_domain(entity) if entity else None

    async def get_all(self) -> list[Post]:
        """Get all Posts ordered by creation time"""
        result = await self.session.execute(
            select(PostORM).order_by(PostORM.created.asc())
        )
        return [self._to_domain(e) for e in result.scalars().all()]

    async def update(self, id: str, data: PostUpdate) -> Optional[Post]:
        """Update Post"""
        entity = await self._get_entity(id)
        if not entity:
            return None

        fields = data.model_fields_set
        if "title" in fields:
            entity.title = data.title
        if "content" in fields:
            entity.content = data.content
        if "author" in fields:
            entity.author_first_name = data.author.first_name
            entity.author_last_name = data.author.last_name

        await self.session.commit()
        await self.session.refresh(entity)
        return self._to_domain(entity)

    async def delete(self, id: str) -> bool:
        """Delete Post"""
        entity = await self._get_entity(id)
        if not entity:
            return False

        await self.session.delete(entity)
        await self.session.commit()
        return True

    async def count(self) -> int:
        """Count Posts"""
        result = await self.session.execute(
            select(func.count()).select_from(PostORM)
        )
        return result.scalar() or 0
