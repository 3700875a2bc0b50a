"""Database models package."""

from .book import Book, ReadingStatusEnum

__all__ = ["Book", "ReadingStatusEnum"]
