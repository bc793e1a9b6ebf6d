"""
Activity repository - bounded per-user action lists in Redis.
Challenge: Keep only the last N actions; LPUSH then LTRIM.
Design: Push and trim are separate commands, so a list can briefly hold more than N
entries if the process dies in between. Readers only ever see the first N.
"""

import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

from library.constants import USER_ACTIVITY_ACTIONS, USER_ACTIVITY_KEY
from library.core.exceptions import StoreError

logger = logging.getLogger(__name__)


class RedisActivityRepository:
    """ActivityRepository backed by one Redis list per user."""

    def __init__(self, redis: Redis, max_actions: int = USER_ACTIVITY_ACTIONS):
        self.redis = redis
        self.max_actions = max_actions

    @staticmethod
    def key_for(username: str) -> str:
        return USER_ACTIVITY_KEY.format(username=username)

    async def save_action(self, username: str, action: str) -> None:
        """Push action to the head of the user's list, then trim to max_actions."""
        key = self.key_for(username)
        try:
            await self.redis.lpush(key, action)
        except RedisError as e:
            logger.warning("error saving action for user %s: %s", username, e)
            raise StoreError(f"error saving action for user {username}") from e
        try:
            await self.redis.ltrim(key, 0, self.max_actions - 1)
        except RedisError as e:
            # Push already succeeded; the next save trims again
            logger.warning("error trimming actions for user %s: %s", username, e)

    async def get_activity(self, username: str) -> list[str]:
        """Most recent first. Unknown users get an empty list."""
        try:
            return await self.redis.lrange(self.key_for(username), 0, self.max_actions - 1)
        except RedisError as e:
            logger.warning("error getting activity for user %s: %s", username, e)
            raise StoreError(f"error getting activity for user {username}") from e
