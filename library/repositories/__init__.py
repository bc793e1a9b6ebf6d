# Repository pattern: one class per external store (SOLID - Dependency Inversion)

from library.repositories.activity_repository import RedisActivityRepository
from library.repositories.base import ActivityRepository, BookRepository
from library.repositories.book_repository import ElasticsearchBookRepository

__all__ = [
    "ActivityRepository",
    "BookRepository",
    "ElasticsearchBookRepository",
    "RedisActivityRepository",
]
