"""Tests for the book repository and its filter predicates."""

from __future__ import annotations

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from book_catalog.models.book import ReadingStatusEnum
from book_catalog.repositories.book import BookRepository, filter_clauses
from book_catalog.schemas.book import BookFilters

repository = BookRepository()


def _create(session, **data):
    data.setdefault("author", "Author")
    return repository.create(session, data=data)


def test_create_assigns_id_and_date_added(db_session) -> None:
    book = _create(db_session, title="Al-Adab al-Mufrad")

    assert book.id is not None
    assert book.date_added is not None
    assert book.reading_status is ReadingStatusEnum.NOT_STARTED
    assert book.language == "Arabic"


def test_status_is_stored_as_enum_value(db_session) -> None:
    book = _create(db_session, title="Fortress of the Muslim")
    repository.update_status(db_session, book, ReadingStatusEnum.IN_PROGRESS)

    stored = db_session.execute(
        text("SELECT reading_status FROM books WHERE id = :id"), {"id": book.id}
    ).scalar_one()
    assert stored == "in_progress"


def test_store_rejects_status_outside_enum(db_session) -> None:
    with pytest.raises(IntegrityError):
        db_session.execute(
            text("INSERT INTO books (title, author, reading_status) VALUES ('T', 'A', 'lost')")
        )
    db_session.rollback()


def test_filter_clauses_only_include_supplied_filters() -> None:
    assert filter_clauses(BookFilters()) == []
    assert len(filter_clauses(BookFilters(search="x", category="Fiqh"))) == 2
    assert len(filter_clauses(BookFilters(status="completed", language="Urdu"))) == 2


def test_filters_are_bound_parameters() -> None:
    (clause,) = filter_clauses(BookFilters(category="Fiqh'; DROP TABLE books; --"))
    compiled = clause.compile()
    assert "DROP TABLE" not in str(compiled)
    assert "Fiqh'; DROP TABLE books; --" in compiled.params.values()


def test_list_filtered_without_filters_returns_everything(db_session) -> None:
    _create(db_session, title="One")
    _create(db_session, title="Two")

    assert {book.title for book in repository.list_filtered(db_session)} == {"One", "Two"}


def test_replace_keeps_identity_and_date_added(db_session) -> None:
    book = _create(db_session, title="Old", category="Fiqh", pages=10)
    original_id, original_date = book.id, book.date_added

    repository.replace(db_session, book, data={"title": "New", "author": "Someone"})

    assert book.id == original_id
    assert book.date_added == original_date
    assert book.title == "New"
    assert book.category is None
    assert book.pages is None
    assert book.reading_status is ReadingStatusEnum.NOT_STARTED


def test_count_by_status(db_session) -> None:
    first = _create(db_session, title="One")
    _create(db_session, title="Two")
    repository.update_status(db_session, first, ReadingStatusEnum.COMPLETED)

    assert repository.count(db_session) == 2
    assert repository.count(db_session, status=ReadingStatusEnum.COMPLETED) == 1
    assert repository.count(db_session, status=ReadingStatusEnum.NOT_STARTED) == 1
    assert repository.count(db_session, status=ReadingStatusEnum.IN_PROGRESS) == 0


def test_delete_removes_row(db_session) -> None:
    book = _create(db_session, title="Gone")
    repository.delete(db_session, book)

    assert repository.get_by_id(db_session, book.id) is None
