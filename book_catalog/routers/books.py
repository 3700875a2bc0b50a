"""CRUD endpoints for catalog books."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from book_catalog.db import get_db
from book_catalog.models.book import Book
from book_catalog.repositories.book import BookRepository
from book_catalog.schemas.book import (
    BookCreate,
    BookCreated,
    BookFilters,
    BookRead,
    BookReplace,
    MessageResponse,
    StatusUpdate,
)

router = APIRouter(prefix="/api/books", tags=["Books"])
_book_repository = BookRepository()
logger = logging.getLogger(__name__)


def _get_book_or_404(db: Session, book_id: int) -> Book:
    book = _book_repository.get_by_id(db, book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return book


@router.get("", response_model=list[BookRead])
def list_books(
    filters: Annotated[BookFilters, Query()],
    db: Session = Depends(get_db),
) -> list[BookRead]:
    """Return books matching the optional filters, newest first."""

    books = _book_repository.list_filtered(db, filters)
    return [BookRead.model_validate(book) for book in books]


@router.get("/{book_id}", response_model=BookRead)
def get_book(book_id: int, db: Session = Depends(get_db)) -> BookRead:
    """Retrieve a single book by identifier."""

    return BookRead.model_validate(_get_book_or_404(db, book_id))


@router.post("", response_model=BookCreated, status_code=status.HTTP_201_CREATED)
def create_book(payload: BookCreate, db: Session = Depends(get_db)) -> BookCreated:
    """Add a book; the store assigns its id and date_added."""

    book = _book_repository.create(db, data=payload.model_dump())
    logger.info("Added book id=%s title=%r", book.id, book.title)
    return BookCreated(id=book.id)


@router.patch("/{book_id}/status", response_model=MessageResponse)
def update_book_status(
    book_id: int,
    payload: StatusUpdate,
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Change only the reading status of a book."""

    book = _get_book_or_404(db, book_id)
    _book_repository.update_status(db, book, payload.reading_status)
    logger.info("Book id=%s reading_status=%s", book_id, payload.reading_status.value)
    return MessageResponse(message="Reading status updated successfully")


@router.put("/{book_id}", response_model=MessageResponse)
def replace_book(
    book_id: int,
    payload: BookReplace,
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Overwrite every mutable field of an existing book."""

    book = _get_book_or_404(db, book_id)
    _book_repository.replace(db, book, data=payload.model_dump())
    logger.info("Updated book id=%s", book_id)
    return MessageResponse(message="Book updated successfully")


@router.delete("/{book_id}", response_model=MessageResponse)
def delete_book(book_id: int, db: Session = Depends(get_db)) -> MessageResponse:
    """Permanently remove a book."""

    book = _get_book_or_404(db, book_id)
    _book_repository.delete(db, book)
    logger.info("Deleted book id=%s", book_id)
    return MessageResponse(message="Book deleted successfully")
