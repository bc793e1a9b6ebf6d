"""
Error taxonomy and HTTP mapping.
Challenge: Services raise domain errors; the API turns them into consistent JSON bodies.
Design: One handler per error family, registered on the app in create_app().
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class LibraryError(Exception):
    """Base class for all errors raised by the service."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LibraryError):
    """Malformed or missing request input."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidRangeError(ValidationError):
    """min_price/max_price pair violates the range invariant."""


class NotFoundError(LibraryError):
    """Target book does not exist in the store."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(LibraryError):
    """Transport or write failure against Elasticsearch or Redis."""


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def library_error_handler(request: Request, exc: LibraryError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc.status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Binding errors (bad JSON, wrong types) are reported as 400 like our own validation."""
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path"))
        messages.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return _error_response(status.HTTP_400_BAD_REQUEST, "; ".join(messages) or "invalid request")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LibraryError, library_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
