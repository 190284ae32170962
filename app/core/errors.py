# app/core/errors.py
import logging
from contextlib import contextmanager

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class OrderingError(Exception):
    """Base for every error that maps to an HTTP status and a short message."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(OrderingError):
    status_code = 400
    default_message = "Invalid request"


class Unauthenticated(OrderingError):
    status_code = 401
    default_message = "No token provided"


class InvalidToken(OrderingError):
    status_code = 403
    default_message = "Invalid or expired token"


class NotFound(OrderingError):
    status_code = 404
    default_message = "Not found"


class MenuItemNotFound(NotFound):
    default_message = "Menu not found"


class OrderNotFound(NotFound):
    default_message = "Order not found"


class UserNotFound(NotFound):
    default_message = "User not found"


class Conflict(OrderingError):
    status_code = 409
    default_message = "Already exists"


class StoreError(OrderingError):
    status_code = 500
    default_message = "Database error"


DUPLICATE_KEY_ERRNO = 1062  # MySQL ER_DUP_ENTRY
DUPLICATE_KEY_MARKERS = ("duplicate entry", "unique constraint failed", "duplicate key value")


def is_duplicate_key(exc) -> bool:
    """True when an IntegrityError came from a unique index, not NOT NULL or a foreign key."""
    orig = getattr(exc, "orig", exc)
    if getattr(orig, "errno", None) == DUPLICATE_KEY_ERRNO:
        return True
    text = str(orig).lower()
    return any(marker in text for marker in DUPLICATE_KEY_MARKERS)


@contextmanager
def store_errors(message: str):
    """Turn any SQLAlchemy failure inside the block into a StoreError.

    The driver detail only goes to the log; the client sees `message`.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("%s: %s", message, exc)
        raise StoreError(message) from exc


async def ordering_error_handler(request: Request, exc: OrderingError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request body"
    return JSONResponse(status_code=400, content={"error": message})


def register_error_handlers(app):
    app.add_exception_handler(OrderingError, ordering_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
