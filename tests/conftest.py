"""
Pytest fixtures - in-memory stores, HTTP client.
Challenge: Isolated tests; no Elasticsearch or Redis needed for API and service tests.
"""

import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from library.constants import USER_ACTIVITY_ACTIONS
from library.core.dependencies import get_activity_repository, get_book_repository
from library.core.exceptions import NotFoundError
from library.main import app
from library.schemas.book import BookBase, BookFilters, BookResponse, StoreInventory


class InMemoryBookRepository:
    """BookRepository over a dict; mirrors the Elasticsearch repository's contract."""

    def __init__(self):
        self.books: dict[str, BookBase] = {}

    async def create(self, book: BookBase) -> str:
        book_id = uuid.uuid4().hex
        self.books[book_id] = book
        return book_id

    async def get(self, filters: BookFilters) -> list[BookResponse]:
        result = []
        for book_id, book in self.books.items():
            if filters.title and book.title != filters.title:
                continue
            if filters.author_name and filters.author_name.lower() not in book.author_name.lower():
                continue
            if filters.min_price is not None and filters.max_price is not None:
                if not filters.min_price <= book.price <= filters.max_price:
                    continue
            result.append(BookResponse(id=book_id, **book.model_dump()))
        return result

    async def get_by_id(self, book_id: str) -> BookResponse:
        if book_id not in self.books:
            raise NotFoundError("book not found")
        return BookResponse(id=book_id, **self.books[book_id].model_dump())

    async def update_title(self, book_id: str, title: str) -> None:
        if book_id not in self.books:
            raise NotFoundError("book not found")
        self.books[book_id] = self.books[book_id].model_copy(update={"title": title})

    async def delete(self, book_id: str) -> None:
        if self.books.pop(book_id, None) is None:
            raise NotFoundError("book not found")

    async def get_store_inventory(self) -> StoreInventory:
        authors = {book.author_name for book in self.books.values()}
        return StoreInventory(total_books=len(self.books), authors=len(authors))


class InMemoryActivityRepository:
    """ActivityRepository over a dict of lists, newest first."""

    def __init__(self, max_actions: int = USER_ACTIVITY_ACTIONS):
        self.max_actions = max_actions
        self.actions: dict[str, list[str]] = {}

    async def save_action(self, username: str, action: str) -> None:
        actions = self.actions.setdefault(username, [])
        actions.insert(0, action)
        del actions[self.max_actions:]

    async def get_activity(self, username: str) -> list[str]:
        return list(self.actions.get(username, []))


@pytest.fixture
def book_repo() -> InMemoryBookRepository:
    return InMemoryBookRepository()


@pytest.fixture
def activity_repo() -> InMemoryActivityRepository:
    return InMemoryActivityRepository()


@pytest.fixture
def override_stores(book_repo, activity_repo):
    app.dependency_overrides[get_book_repository] = lambda: book_repo
    app.dependency_overrides[get_activity_repository] = lambda: activity_repo
    yield
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(override_stores):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def book_payload() -> dict:
    return {
        "title": "Dune",
        "author_name": "Frank Herbert",
        "price": 9.99,
        "ebook_available": True,
        "publish_date": "1965-08-01",
        "username": "alice",
    }
