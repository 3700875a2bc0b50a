from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from book_catalog.db import get_db
from book_catalog.models.book import ReadingStatusEnum
from book_catalog.repositories.book import BookRepository
from book_catalog.schemas.stats import LibraryStats

router = APIRouter(prefix="/api", tags=["Stats"])
_book_repository = BookRepository()


@router.get("/stats", response_model=LibraryStats)
def read_stats(db: Session = Depends(get_db)) -> LibraryStats:
    """Count books overall and per reading status.

    The four counts are separate reads on the request session.
    """

    return LibraryStats(
        total=_book_repository.count(db),
        completed=_book_repository.count(db, status=ReadingStatusEnum.COMPLETED),
        in_progress=_book_repository.count(db, status=ReadingStatusEnum.IN_PROGRESS),
        not_started=_book_repository.count(db, status=ReadingStatusEnum.NOT_STARTED),
    )
