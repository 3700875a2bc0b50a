from . import books, health, stats  # noqa: F401

__all__ = ["books", "health", "stats"]
