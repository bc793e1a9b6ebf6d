"""Store inventory endpoint - aggregate computed by Elasticsearch on every call."""

from fastapi import APIRouter

from library.core.dependencies import BookSvc
from library.schemas.book import StoreInventory

router = APIRouter()


@router.get("", response_model=StoreInventory)
async def get_store_inventory(svc: BookSvc, username: str | None = None):
    """Total books and distinct authors."""
    return await svc.get_store_inventory(username)
