"""
Activity service - records and reads "<METHOD> <ROUTE>" entries per user.
Design: Recording is best effort; failures are logged and never reach the caller.
"""

import logging

from library.core.exceptions import StoreError
from library.repositories.base import ActivityRepository
from library.schemas.activity import UserAction
from library.services.validators import require_username

logger = logging.getLogger(__name__)


class ActivityService:
    def __init__(self, activity_repo: ActivityRepository):
        self.activity_repo = activity_repo

    async def record(self, username: str, method: str, route: str) -> None:
        """Append an action for username. Never raises."""
        action = UserAction(username=username, method=method, route=route)
        try:
            await self.activity_repo.save_action(action.username, action.action)
        except StoreError as e:
            logger.warning("failed to save user action %r for %s: %s", action.action, username, e)

    async def get_user_activity(self, username: str) -> list[str]:
        require_username(username)
        return await self.activity_repo.get_activity(username)
