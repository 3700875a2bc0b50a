"""Pydantic schemas used by the FastAPI application."""

from .book import (
    BookCreate,
    BookCreated,
    BookFields,
    BookFilters,
    BookRead,
    BookReplace,
    MessageResponse,
    StatusUpdate,
)
from .stats import LibraryStats

__all__ = [
    # Book schemas
    "BookCreate",
    "BookCreated",
    "BookFields",
    "BookFilters",
    "BookRead",
    "BookReplace",
    "MessageResponse",
    "StatusUpdate",
    # Stats schemas
    "LibraryStats",
]
