"""
Post Management Service Module

Provides business logic processing for Posts.
"""

import logging

from blog_api.common.errors import NotFoundError, ValidationError
from blog_api.domain.post import Post, PostCreate, PostUpdate, PostResponse
from blog_api.repositories.post_repo import PostRepository

logger = logging.getLogger(__name__)


class PostService:
    """
    Post Management Service

    Maps API operations onto the post repository and renders stored posts for responses.
    """

    def __init__(self, repo: PostRepository):
        """
        Initialize Service

        Args:
            repo: Post Repository
        """
        self.repo = repo

    async def create(self, data: PostCreate) -> PostResponse:
        """
        Create Post

        Args:
            data: Creation data

        Returns:
            PostResponse: Created post with store-assigned id and creation time
        """
        post = await self.repo.insert(data)
        logger.info("Created post %s", post.id)
        return self._to_response(post)

    async def get_by_id(self, id: str) -> PostResponse:
        """
        Get Post by ID

        Raises:
            NotFoundError: Post not found
        """
        post = await self.repo.get_by_id(id)
        if not post:
            raise NotFoundError(
                message=f"Post with id {id} not found",
                code="post_not_found",
            )
        return self._to_response(post)

    async def get_all(self) -> list[PostResponse]:
        """Get all Posts, oldest first"""
        posts = await self.repo.get_all()
        return [self._to_response(p) for p in posts]

    async def update(self, id: str, data: PostUpdate) -> PostResponse:
        """
        Update Post

        Args:
            id: Post ID from the request path
            data: Update data; unset fields are left unchanged

        Returns:
            PostResponse: Updated post

        Raises:
            ValidationError: Body id doesn't match path id
            NotFoundError: Post not found
        """
        if data.id is not None and data.id != id:
            raise ValidationError(
                message=f"Request path id ({id}) and request body id ({data.id}) must match",
                code="id_mismatch",
                details={"path_id": id, "body_id": data.id},
            )

        post = await self.repo.update(id, data)
        if not post:
            raise NotFoundError(
                message=f"Post with id {id} not found",
                code="post_not_found",
            )
        logger.info("Updated post %s", id)
        return self._to_response(post)

    async def delete(self, id: str) -> None:
        """
        Delete Post

        Deleting a post that doesn't exist is not an error.
        """
        deleted = await self.repo.delete(id)
        if deleted:
            logger.info("Deleted post %s", id)
        else:
            logger.debug("Delete of unknown post %s ignored", id)

    def _to_response(self, post: Post) -> PostResponse:
        return PostResponse(
            id=post.id,
            title=post.title,
            content=post.content,
            author=post.author.display_name,
            created=post.created,
        )
