"""
Post Repository Redis Implementation

Stores each post as a JSON document under ``post:{id}`` and keeps insertion
order in the sorted set ``posts:index`` (score = creation timestamp).
"""

import json
from datetime import datetime
from typing import Optional

from redis.asyncio import Redis

from blog_api.common.time import ensure_utc, utc_now
from blog_api.common.utils import generate_post_id
from blog_api.domain.post import AuthorName, Post, PostCreate, PostUpdate
from blog_api.repositories.post_repo import PostRepository

POST_KEY_PREFIX = "post:"
POST_INDEX_KEY = "posts:index"


class RedisPostRepository(PostRepository):
    """
    Post Repository Redis Implementation

    Insert and delete write the document and the index in one MULTI/EXEC.
    Updates are read-modify-write guarded by SET XX; two concurrent updates
    to one post resolve last-writer-wins.
    """

    def __init__(self, client: Redis):
        """
        Initialize Repository

        Args:
            client: Async Redis client instance (decode_responses=True)
        """
        self.client = client

    @staticmethod
    def _key(id: str) -> str:
        return f"{POST_KEY_PREFIX}{id}"

    def _serialize(self, post: Post) -> str:
        """Serialize domain model to JSON document"""
        return json.dumps(
            {
                "id": post.id,
                "title": post.title,
                "content": post.content,
                "author": {
                    "firstName": post.author.first_name,
                    "lastName": post.author.last_name,
                },
                "created": post.created.isoformat(),
            }
        )

    def _deserialize(self, raw: str) -> Post:
        """Deserialize JSON document to domain model"""
        data = json.loads(raw)
        return Post(
            id=data["id"],
            title=data["title"],
            content=data["content"],
            author=AuthorName(**data["author"]),
            created=ensure_utc(datetime.fromisoformat(data["created"])),
        )

    async def insert(self, data: PostCreate) -> Post:
        """Insert Post, assigning id and creation time"""
        post = Post(
            id=generate_post_id(),
            title=data.title,
            content=data.content,
            author=data.author,
            created=utc_now(),
        )
        async with self.client.pipeline(transaction=True) as pipe:
            pipe.set(self._key(post.id), self._serialize(post))
            pipe.zadd(POST_INDEX_KEY, {post.id: post.created.timestamp()})
            await pipe.execute()
        return post

    async def get_by_id(self, id: str) -> Optional[Post]:
        """Get Post by ID"""
        raw = await self.client.get(self._key(id))
        if raw is None:
            return None
        return self._deserialize(raw)

    async def get_all(self) -> list[Post]:
        """Get all Posts in insertion order"""
        ids = await self.client.zrange(POST_INDEX_KEY, 0, -1)
        if not ids:
            return []
        raws = await self.client.mget([self._key(id) for id in ids])
        return [self._deserialize(raw) for raw in raws if raw is not None]

    async def update(self, id: str, data: PostUpdate) -> Optional[Post]:
        """Update Post"""
        existing = await self.get_by_id(id)
        if existing is None:
            return None

        changes = {
            name: getattr(data, name)
            for name in ("title", "content", "author")
            if name in data.model_fields_set
        }
        updated = existing.model_copy(update=changes)
        # SET XX never recreates a post deleted after the read above
        written = await self.client.set(self._key(id), self._serialize(updated), xx=True)
        if not written:
            return None
        return updated

    async def delete(self, id: str) -> bool:
        """Delete Post"""
        async with self.client.pipeline(transaction=True) as pipe:
            pipe.delete(self._key(id))
            pipe.zrem(POST_INDEX_KEY, id)
            deleted_count, _ = await pipe.execute()
        return deleted_count > 0

    async def count(self) -> int:
        """Count Posts"""
        return await self.client.zcard(POST_INDEX_KEY)
