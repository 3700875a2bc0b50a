"""Repository exports."""

from .book import BookRepository

__all__ = ["BookRepository"]
