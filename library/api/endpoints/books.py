"""
Book CRUD endpoints - RESTful resource (GET/POST/PUT/DELETE).
Design: Thin controller; service layer validates, calls the store and records activity.
"""

from typing import Annotated

from fastapi import APIRouter, Query, status

from library.core.dependencies import BookSvc
from library.schemas.book import BookCreate, BookQuery, BookResponse, BookTitleUpdate, MessageResponse

router = APIRouter()


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
async def create_book(svc: BookSvc, data: BookCreate):
    """Create a book. The id is assigned by Elasticsearch."""
    return await svc.create_book(data)


@router.get("", response_model=list[BookResponse])
async def get_books(svc: BookSvc, params: Annotated[BookQuery, Query()]):
    """Filtered list: GET /books?title=&author_name=&min_price=&max_price=&username=."""
    return await svc.get_books(params)


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(svc: BookSvc, book_id: str, username: str | None = None):
    return await svc.get_book_by_id(book_id, username)


@router.put("/{book_id}", response_model=MessageResponse)
async def update_book_title(svc: BookSvc, book_id: str, data: BookTitleUpdate):
    """Only the title can change."""
    await svc.update_book_title(book_id, data)
    return MessageResponse(message="book updated successfully")


@router.delete("/{book_id}", response_model=MessageResponse)
async def delete_book(svc: BookSvc, book_id: str, username: str | None = None):
    await svc.delete_book(book_id, username)
    return MessageResponse(message="book deleted successfully")
