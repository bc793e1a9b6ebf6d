"""
FastAPI dependencies - injection for store clients, repositories and services (SOLID: Dependency Inversion).
Challenge: Tests override the repository providers to run without Elasticsearch or Redis.
"""

from typing import Annotated

from elasticsearch import AsyncElasticsearch
from fastapi import Depends
from redis.asyncio import Redis

from library.cache.redis_client import get_redis
from library.config import get_settings
from library.repositories.activity_repository import RedisActivityRepository
from library.repositories.base import ActivityRepository, BookRepository
from library.repositories.book_repository import ElasticsearchBookRepository
from library.search.elasticsearch_client import get_elasticsearch
from library.services.activity_service import ActivityService
from library.services.book_service import BookService


async def get_book_repository(
    es: Annotated[AsyncElasticsearch, Depends(get_elasticsearch)],
) -> BookRepository:
    return ElasticsearchBookRepository(es, refresh=get_settings().books_refresh)


async def get_activity_repository(
    redis: Annotated[Redis, Depends(get_redis)],
) -> ActivityRepository:
    return RedisActivityRepository(redis)


def get_activity_service(
    activity_repo: Annotated[ActivityRepository, Depends(get_activity_repository)],
) -> ActivityService:
    return ActivityService(activity_repo)


def get_book_service(
    book_repo: Annotated[BookRepository, Depends(get_book_repository)],
    activity: Annotated[ActivityService, Depends(get_activity_service)],
) -> BookService:
    """Factory for service with repository injection."""
    return BookService(book_repo, activity)


BookSvc = Annotated[BookService, Depends(get_book_service)]
ActivitySvc = Annotated[ActivityService, Depends(get_activity_service)]
