"""
Redis client - per-user activity lists.
Challenge: Connection pooling, bounded call time.
Design: Single client instance, dependency injection for testability.
"""

from redis.asyncio import Redis

from library.config import get_settings

settings = get_settings()

# Shared async Redis client (connection pool managed by redis-py)
_redis: Redis | None = None


async def get_redis() -> Redis:
    """Get Redis connection. Used as FastAPI dependency."""
    global _redis
    if _redis is None:
        _redis = Redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_timeout=settings.users_request_timeout,
            socket_connect_timeout=settings.users_request_timeout,
        )
    return _redis


async def close_redis() -> None:
    global _redis
    if _redis is not None:
        await _redis.aclose()
        _redis = None
