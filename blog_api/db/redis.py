"""
Redis Connection Management Module

Owns the shared async client for the document post store.
Only used when POST_STORE_TYPE is "redis".
"""

import logging
from typing import Optional

from redis.asyncio import Redis

from blog_api.config import get_settings

logger = logging.getLogger(__name__)

_redis_client: Optional[Redis] = None


async def init_redis() -> None:
    """
    Connect to REDIS_URL and publish the client once PING succeeds.

    A failed PING closes the half-open client, so startup can be retried.
    """
    global _redis_client

    if _redis_client is not None:
        logger.warning("Redis client already initialized")
        return

    url = get_settings().REDIS_URL
    client = Redis.from_url(url, decode_responses=True)
    try:
        await client.ping()
    except Exception:
        await client.aclose()
        raise

    _redis_client = client
    logger.info("Redis connection established: %s", url)


async def close_redis() -> None:
    """Close the shared client on shutdown; no-op if never opened."""
    global _redis_client

    if _redis_client is None:
        return

    await _redis_client.aclose()
    _redis_client = None
    logger.info("Redis connection closed")


def get_redis() -> Redis:
    """
    Return the shared client

    Raises:
        RuntimeError: init_redis() has not run
    """
    if _redis_client is None:
        raise RuntimeError(
            "Redis client not initialized; set POST_STORE_TYPE=redis so startup calls init_redis()."
        )
    return _redis_client
