"""
API router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from library.api.endpoints import activity, books, health, store

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(books.router, prefix="/books", tags=["books"])
api_router.include_router(store.router, prefix="/store", tags=["store"])
api_router.include_router(activity.router, prefix="/activity", tags=["activity"])
