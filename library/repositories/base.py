"""
Store-client interfaces (SOLID: Interface Segregation, Dependency Inversion).
Challenge: Services depend on these, so the stores can be swapped or faked in tests.
"""

from typing import Protocol

from library.schemas.book import BookBase, BookFilters, BookResponse, StoreInventory


class BookRepository(Protocol):
    """Book documents. Raises NotFoundError for absent ids and StoreError on store failures."""

    async def create(self, book: BookBase) -> str: ...

    async def get(self, filters: BookFilters) -> list[BookResponse]: ...

    async def get_by_id(self, book_id: str) -> BookResponse: ...

    async def update_title(self, book_id: str, title: str) -> None: ...

    async def delete(self, book_id: str) -> None: ...

    async def get_store_inventory(self) -> StoreInventory: ...


class ActivityRepository(Protocol):
    """Bounded per-user action lists, most recent first."""

    async def save_action(self, username: str, action: str) -> None: ...

    async def get_activity(self, username: str) -> list[str]: ...
