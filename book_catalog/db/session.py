import logging
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from book_catalog.core.config import get_settings
from book_catalog.db.base import Base


logger = logging.getLogger(__name__)
settings = get_settings()

_connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(
    settings.database_url,
    echo=settings.database_echo,
    future=True,
    connect_args=_connect_args,
)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db() -> Generator:
    """Provide a SQLAlchemy session scoped to the request lifecycle."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create the catalog tables when they do not exist yet."""

    # Registers the models on Base.metadata.
    from book_catalog import models  # noqa: F401

    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info("Database schema ready at %s", target.url.render_as_string(hide_password=True))
