"""ORM model for catalog books."""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from book_catalog.db.base import Base

DEFAULT_LANGUAGE = "Arabic"


class ReadingStatusEnum(str, enum.Enum):
    """Reading progress of a book."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Book(Base):
    """Represents a single catalog entry persisted in the relational store."""

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(Text, nullable=True)
    language: Mapped[str | None] = mapped_column(
        Text, nullable=True, default=DEFAULT_LANGUAGE, server_default=DEFAULT_LANGUAGE
    )
    pages: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reading_status: Mapped[ReadingStatusEnum] = mapped_column(
        Enum(
            ReadingStatusEnum,
            name="reading_status",
            native_enum=False,
            create_constraint=True,
            length=32,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
        default=ReadingStatusEnum.NOT_STARTED,
        server_default=ReadingStatusEnum.NOT_STARTED.value,
    )
    date_added: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
