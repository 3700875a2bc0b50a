"""Database access helpers for catalog books."""

from __future__ import annotations

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.orm import Session

from book_catalog.models.book import Book, ReadingStatusEnum
from book_catalog.repositories.base import BaseRepository
from book_catalog.schemas.book import BookFilters

LIKE_ESCAPE = "\\"

# Fields overwritten by a full replace. id and date_added are never written.
REPLACEABLE_FIELDS = ("title", "author", "description", "category", "language", "pages", "notes")


def _contains_pattern(term: str) -> str:
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


def search_clause(term: str) -> ColumnElement[bool]:
    """Case-insensitive substring match over title, author and description."""

    pattern = _contains_pattern(term)
    return or_(
        Book.title.ilike(pattern, escape=LIKE_ESCAPE),
        Book.author.ilike(pattern, escape=LIKE_ESCAPE),
        Book.description.ilike(pattern, escape=LIKE_ESCAPE),
    )


def filter_clauses(filters: BookFilters) -> list[ColumnElement[bool]]:
    """Translate the optional list filters into bound SQL predicates."""

    clauses: list[ColumnElement[bool]] = []
    if filters.search:
        clauses.append(search_clause(filters.search))
    if filters.category:
        clauses.append(Book.category == filters.category)
    if filters.status:
        clauses.append(Book.reading_status == filters.status)
    if filters.language:
        clauses.append(Book.language == filters.language)
    return clauses


class BookRepository(BaseRepository[Book]):
    """Repository for interacting with catalog book records."""

    def __init__(self) -> None:
        super().__init__(model=Book)

    def create(self, session: Session, *, data: dict[str, object]) -> Book:
        book = Book(**data)
        created = self.add(session, book)
        session.commit()
        return created

    def list_filtered(self, session: Session, filters: BookFilters | None = None) -> list[Book]:
        """Return books matching every supplied filter, newest first."""

        statement = select(Book)
        if filters is not None:
            statement = statement.where(*filter_clauses(filters))
        statement = statement.order_by(Book.date_added.desc(), Book.id.desc())
        return list(session.scalars(statement).all())

    def get_by_id(self, session: Session, identifier: int) -> Book | None:
        return self.get(session, identifier)

    def replace(self, session: Session, book: Book, *, data: dict[str, object]) -> Book:
        """Overwrite the mutable fields of ``book``; status only when present."""

        for field in REPLACEABLE_FIELDS:
            setattr(book, field, data.get(field))
        status = data.get("reading_status")
        if status is not None:
            book.reading_status = ReadingStatusEnum(status)
        session.flush()
        session.refresh(book)
        session.commit()
        return book

    def update_status(self, session: Session, book: Book, status: ReadingStatusEnum) -> Book:
        book.reading_status = status
        session.flush()
        session.refresh(book)
        session.commit()
        return book

    def delete(self, session: Session, book: Book) -> None:
        """Permanently remove a book record from the database."""

        session.delete(book)
        session.commit()

    def count(self, session: Session, *, status: ReadingStatusEnum | None = None) -> int:
        """Count all books, or only those in the given reading status."""

        statement = select(func.count()).select_from(Book)
        if status is not None:
            statement = statement.where(Book.reading_status == status)
        return session.scalar(statement) or 0
