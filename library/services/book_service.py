"""
Book service - business logic for books (SOLID: Single Responsibility).
Challenge: Validate, call the book store, shape the response, record user activity.
Design: Service depends on abstractions (repositories); easy to test with fakes.
"""

from library.constants import BOOK_ROUTE, BOOKS_ROUTE, STORE_ROUTE
from library.repositories.base import BookRepository
from library.schemas.book import (
    BookCreate,
    BookQuery,
    BookResponse,
    BookTitleUpdate,
    StoreInventory,
)
from library.services.activity_service import ActivityService
from library.services import validators


class BookService:
    """Handles all book use cases: CRUD, filtered search, inventory."""

    def __init__(self, book_repo: BookRepository, activity: ActivityService):
        self.book_repo = book_repo
        self.activity = activity

    async def create_book(self, req: BookCreate) -> BookResponse:
        book = validators.validate_create_book(req)
        book_id = await self.book_repo.create(book)
        await self.activity.record(req.username, "POST", BOOKS_ROUTE)
        return BookResponse(id=book_id, **book.model_dump())

    async def get_books(self, req: BookQuery) -> list[BookResponse]:
        validators.validate_get_books(req)
        books = await self.book_repo.get(req.filters())
        await self.activity.record(req.username, "GET", BOOKS_ROUTE)
        return books

    async def get_book_by_id(self, book_id: str, username: str | None) -> BookResponse:
        validators.validate_book_ref(book_id, username)
        book = await self.book_repo.get_by_id(book_id)
        await self.activity.record(username, "GET", BOOK_ROUTE)
        return book

    async def update_book_title(self, book_id: str, req: BookTitleUpdate) -> None:
        validators.validate_update_book_title(book_id, req)
        await self.book_repo.update_title(book_id, req.title)
        await self.activity.record(req.username, "PUT", BOOK_ROUTE)

    async def delete_book(self, book_id: str, username: str | None) -> None:
        validators.validate_book_ref(book_id, username)
        await self.book_repo.delete(book_id)
        await self.activity.record(username, "DELETE", BOOK_ROUTE)

    async def get_store_inventory(self, username: str | None = None) -> StoreInventory:
        """Inventory needs no acting user; activity is recorded only when one is given."""
        inventory = await self.book_repo.get_store_inventory()
        if username:
            await self.activity.record(username, "GET", STORE_ROUTE)
        return inventory
