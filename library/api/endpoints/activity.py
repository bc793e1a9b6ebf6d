"""User activity endpoint - last actions recorded for a user, most recent first."""

from fastapi import APIRouter

from library.core.dependencies import ActivitySvc

router = APIRouter()


@router.get("/{username}", response_model=list[str])
async def get_user_activity(svc: ActivitySvc, username: str):
    return await svc.get_user_activity(username)
