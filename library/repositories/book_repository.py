"""
Book repository - Elasticsearch data access for book documents.
Challenge: Map store responses (found flags, result strings, 404 bodies) onto domain errors.
Design: Client injected at construction; one round trip per call, no retries.
"""

import logging
from typing import Any

from elasticsearch import ApiError, AsyncElasticsearch, TransportError
from pydantic import ValidationError as SchemaError

from library.constants import BOOKS_INDEX, UNIQUE_AUTHORS_AGGREGATION
from library.core.exceptions import NotFoundError, StoreError
from library.schemas.book import BookBase, BookFilters, BookResponse, StoreInventory
from library.search.query_builder import build_books_query, build_inventory_query

logger = logging.getLogger(__name__)

BOOK_NOT_FOUND = "book not found"

StoreFailure = (ApiError, TransportError)


def _body(response: Any) -> dict[str, Any]:
    # Response may be ObjectApiResponse; support both .body and dict access
    return getattr(response, "body", response)


def _to_book(book_id: str, source: dict[str, Any]) -> BookResponse:
    """Stored documents missing fields or holding wrong types are a store fault, not a client one."""
    try:
        return BookResponse(id=book_id, **source)
    except SchemaError as e:
        logger.warning("malformed book document %s: %s", book_id, e)
        raise StoreError(f"malformed book document {book_id}") from e


class ElasticsearchBookRepository:
    """BookRepository backed by a single Elasticsearch index."""

    def __init__(self, es: AsyncElasticsearch, index: str = BOOKS_INDEX, refresh: bool = False):
        self.es = es
        self.index = index
        # Extra kwargs for index/update/delete calls
        self._write_opts: dict[str, Any] = {"refresh": "wait_for"} if refresh else {}

    async def create(self, book: BookBase) -> str:
        """Index a new document and return the id Elasticsearch assigned."""
        try:
            response = await self.es.index(index=self.index, document=book.model_dump(), **self._write_opts)
        except StoreFailure as e:
            logger.warning("error creating book: %s", e)
            raise StoreError("error creating book") from e
        return _body(response)["_id"]

    async def get(self, filters: BookFilters) -> list[BookResponse]:
        try:
            response = await self.es.search(index=self.index, **build_books_query(filters))
        except StoreFailure as e:
            logger.warning("error searching books: filters=%r error=%s", filters, e)
            raise StoreError("error searching books") from e
        hits = _body(response)["hits"]["hits"]
        return [_to_book(hit["_id"], hit["_source"]) for hit in hits]

    async def get_by_id(self, book_id: str) -> BookResponse:
        try:
            response = await self.es.options(ignore_status=404).get(index=self.index, id=book_id)
        except StoreFailure as e:
            logger.warning("error getting book %s: %s", book_id, e)
            raise StoreError("error getting book") from e
        body = _body(response)
        if not body.get("found"):
            raise NotFoundError(BOOK_NOT_FOUND)
        return _to_book(body["_id"], body["_source"])

    async def update_title(self, book_id: str, title: str) -> None:
        """Partial update of the title field only."""
        try:
            response = await self.es.options(ignore_status=404).update(
                index=self.index, id=book_id, doc={"title": title}, **self._write_opts
            )
        except StoreFailure as e:
            logger.warning("error updating book %s: %s", book_id, e)
            raise StoreError("error updating book") from e
        body = _body(response)
        if body.get("error"):
            if body.get("status") == 404:
                raise NotFoundError(BOOK_NOT_FOUND)
            raise StoreError("error updating book")

    async def delete(self, book_id: str) -> None:
        try:
            response = await self.es.options(ignore_status=404).delete(
                index=self.index, id=book_id, **self._write_opts
            )
        except StoreFailure as e:
            logger.warning("error deleting book %s: %s", book_id, e)
            raise StoreError("error deleting book") from e
        body = _body(response)
        result = body.get("result")
        # Missing index answers 404 with an error body and no result
        if result == "not_found" or (result is None and body.get("status") == 404):
            raise NotFoundError(BOOK_NOT_FOUND)
        if result != "deleted":
            raise StoreError("error deleting book")

    async def get_store_inventory(self) -> StoreInventory:
        """Total document count and distinct author names, computed by the store."""
        try:
            response = await self.es.search(index=self.index, **build_inventory_query())
        except StoreFailure as e:
            logger.warning("error getting books inventory: %s", e)
            raise StoreError("error getting books inventory") from e
        body = _body(response)
        aggregation = (body.get("aggregations") or {}).get(UNIQUE_AUTHORS_AGGREGATION)
        if not aggregation or aggregation.get("value") is None:
            raise StoreError("failed to count unique authors")
        total = body["hits"]["total"]
        total_books = total.get("value", 0) if isinstance(total, dict) else int(total)
        return StoreInventory(total_books=total_books, authors=int(aggregation["value"]))
