"""
Request validators - run before any store call.
Challenge: Required fields and the paired min/max price invariant.
"""

import math

from library.core.exceptions import InvalidRangeError, ValidationError
from library.schemas.book import BookBase, BookCreate, BookQuery, BookTitleUpdate

CREATE_BOOK_REQUIRED = ("title", "author_name", "price", "ebook_available", "publish_date", "username")


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_username(username: str | None) -> str:
    if _is_blank(username):
        raise ValidationError("username is required")
    return username


def require_book_id(book_id: str | None) -> str:
    if _is_blank(book_id):
        raise ValidationError("book id is required")
    return book_id


def validate_create_book(req: BookCreate) -> BookBase:
    """Return the book document to store, or raise ValidationError naming the missing fields.

    Only absent or blank fields count as missing. ``price=0`` (a free book) and
    ``ebook_available=False`` are valid values, unlike a "non-zero" required rule.
    """
    missing = [name for name in CREATE_BOOK_REQUIRED if _is_blank(getattr(req, name))]
    if missing:
        raise ValidationError(f"missing required fields: {', '.join(missing)}")
    if not math.isfinite(req.price):
        raise ValidationError("price must be a finite number")
    if req.price < 0:
        raise ValidationError("price must be greater than or equal to 0")
    return BookBase(**req.model_dump(exclude={"username"}))


def validate_get_books(req: BookQuery) -> None:
    """Both bounds or neither; when both are given the range is applied as is, zeros included."""
    require_username(req.username)
    for name in ("min_price", "max_price"):
        value = getattr(req, name)
        if value is None:
            continue
        if not math.isfinite(value):
            raise InvalidRangeError(f"{name} must be a finite number")
        if value < 0:
            raise InvalidRangeError(f"{name} must be greater than or equal to 0")
    if (req.min_price is None) != (req.max_price is None):
        raise InvalidRangeError("both min_price and max_price must be provided")
    if req.min_price is not None and req.min_price > req.max_price:
        raise InvalidRangeError("min_price must be less than or equal to max_price")


def validate_book_ref(book_id: str | None, username: str | None) -> None:
    """GetBookById and DeleteBook."""
    require_book_id(book_id)
    require_username(username)


def validate_update_book_title(book_id: str | None, req: BookTitleUpdate) -> None:
    require_book_id(book_id)
    if _is_blank(req.title):
        raise ValidationError("title is required")
    require_username(req.username)
