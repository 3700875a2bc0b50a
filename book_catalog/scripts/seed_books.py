"""Utility script for inserting the sample books into an empty catalog."""

from __future__ import annotations

import argparse
import logging
from typing import Any

from sqlalchemy.orm import Session

from book_catalog.models.book import Book
from book_catalog.repositories.book import BookRepository

logger = logging.getLogger(__name__)

SAMPLE_BOOKS: tuple[dict[str, Any], ...] = (
    {
        "title": "Sahih al-Bukhari",
        "author": "Imam al-Bukhari",
        "description": "The most authentic collection of hadith compiled by Imam Muhammad al-Bukhari",
        "category": "Hadith",
        "language": "Arabic",
        "pages": 2000,
    },
    {
        "title": "Sahih Muslim",
        "author": "Imam Muslim",
        "description": "One of the six major hadith collections in Sunni Islam",
        "category": "Hadith",
        "language": "Arabic",
        "pages": 1500,
    },
    {
        "title": "Tafsir Ibn Kathir",
        "author": "Ibn Kathir",
        "description": "A classical Sunni tafsir (commentary) of the Quran",
        "category": "Tafsir",
        "language": "Arabic",
        "pages": 3000,
    },
    {
        "title": "The Sealed Nectar",
        "author": "Safi-ur-Rahman al-Mubarakpuri",
        "description": "Biography of Prophet Muhammad (PBUH)",
        "category": "Seerah",
        "language": "English",
        "pages": 600,
    },
    {
        "title": "Riyadh as-Salihin",
        "author": "Imam an-Nawawi",
        "description": "Collection of hadith for the training of beginners",
        "category": "Hadith",
        "language": "Arabic",
        "pages": 400,
    },
)


def seed_sample_books(session: Session) -> int:
    """Insert the sample books when the table is empty.

    Returns the number of rows inserted, which is zero whenever the catalog
    already holds at least one book.
    """

    repository = BookRepository()
    if repository.count(session) > 0:
        return 0

    session.add_all(Book(**data) for data in SAMPLE_BOOKS)
    session.commit()
    logger.info("Sample books inserted successfully (%d)", len(SAMPLE_BOOKS))
    return len(SAMPLE_BOOKS)


def _resolve_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the catalog with sample books")
    parser.add_argument(
        "--skip-create",
        action="store_true",
        help="Do not create missing tables before seeding",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _resolve_cli_args(argv)

    from book_catalog.db import SessionLocal, init_db

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    if not args.skip_create:
        init_db()

    with SessionLocal() as session:
        inserted = seed_sample_books(session)

    if inserted:
        print(f"Inserted {inserted} sample books")
    else:
        print("Catalog already contains books; nothing inserted")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(main())
