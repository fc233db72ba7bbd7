"""
Post Repository Interface

Defines the data access interface for Posts.
"""

from abc import ABC, abstractmethod
from typing import Optional

from blog_api.domain.post import Post, PostCreate, PostUpdate


class PostRepository(ABC):
    """Post Repository Interface"""

    @abstractmethod
    async def insert(self, data: PostCreate) -> Post:
        """
        Insert a new post

        The store assigns ``id`` and ``created``.

        Args:
            data: Creation data

        Returns:
            Post: The stored post including its new id
        """
        pass

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[Post]:
        """Get Post by ID, None if it doesn't exist"""
        pass

    @abstractmethod
    async def get_all(self) -> list[Post]:
        """Get all Posts, oldest first"""
        pass

    @abstractmethod
    async def update(self, id: str, data: PostUpdate) -> Optional[Post]:
        """
        Update a post

        Only fields set on ``data`` are written; ``id`` and ``created`` never change.

        Returns:
            The updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, id: str) -> bool:
        """
        Delete a post

        Returns:
            True if deleted, False if the post didn't exist
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored posts"""
        pass
