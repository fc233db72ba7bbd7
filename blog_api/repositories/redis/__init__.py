"""
Redis Repository Implementation Module Initialization
"""

from blog_api.repositories.redis.post_repo import RedisPostRepository

__all__ = [
    "RedisPostRepository",
]
