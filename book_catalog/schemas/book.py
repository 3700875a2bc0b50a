"""Pydantic schemas for book payloads."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from book_catalog.models.book import DEFAULT_LANGUAGE, ReadingStatusEnum


def _strip_required(value: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValueError("must not be empty")
    return stripped


class BookFields(BaseModel):
    """Mutable attributes shared by create and replace payloads."""

    title: str = Field(...)
    author: str = Field(...)
    description: str | None = Field(default=None)
    category: str | None = Field(default=None)
    language: str | None = Field(default=None)
    pages: int | None = Field(default=None, gt=0)
    notes: str | None = Field(default=None)

    @field_validator("title", "author")
    @classmethod
    def _require_text(cls, value: str) -> str:
        return _strip_required(value)


class BookCreate(BookFields):
    """Payload for adding a book; language falls back to Arabic."""

    language: str | None = Field(default=DEFAULT_LANGUAGE)

    @field_validator("language")
    @classmethod
    def _default_language(cls, value: str | None) -> str:
        if value is None or not value.strip():
            return DEFAULT_LANGUAGE
        return value


class BookReplace(BookFields):
    """Payload for overwriting every mutable field of an existing book.

    Omitted optional fields are stored as null. ``reading_status`` is only
    changed when supplied.
    """

    reading_status: ReadingStatusEnum | None = Field(default=None)


class StatusUpdate(BaseModel):
    """Payload for changing only the reading status."""

    reading_status: ReadingStatusEnum


class BookFilters(BaseModel):
    """Optional list filters; blank values are treated as unset."""

    search: str | None = Field(default=None, description="Substring of title, author or description")
    category: str | None = Field(default=None, description="Exact category")
    status: ReadingStatusEnum | None = Field(default=None, description="Exact reading status")
    language: str | None = Field(default=None, description="Exact language")

    @field_validator("search", "category", "status", "language", mode="before")
    @classmethod
    def _blank_as_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class BookRead(BaseModel):
    """Representation returned by the API for persisted books."""

    id: int
    title: str
    author: str
    description: str | None = None
    category: str | None = None
    language: str | None = None
    pages: int | None = None
    reading_status: ReadingStatusEnum
    date_added: datetime
    notes: str | None = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("date_added")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite CURRENT_TIMESTAMP is UTC without an offset.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class BookCreated(BaseModel):
    id: int
    message: str = "Book added successfully"


class MessageResponse(BaseModel):
    message: str
