import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from book_catalog.core.config import get_settings
from book_catalog.core.errors import register_exception_handlers
from book_catalog.db import SessionLocal, init_db
from book_catalog.monitoring import MetricsMiddleware, router as monitoring_router
from book_catalog.routers import books, health, stats
from book_catalog.scripts.seed_books import seed_sample_books


logger = logging.getLogger(__name__)
settings = get_settings()


def prepare_store() -> None:
    """Create the schema and, when enabled, insert the sample books."""

    init_db()
    if not settings.seed_sample_data:
        return
    with SessionLocal() as session:
        inserted = seed_sample_books(session)
    if not inserted:
        logger.info("Catalog already populated; skipping sample data")


@asynccontextmanager
async def lifespan(app: FastAPI):
    prepare_store()
    yield


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

app.add_middleware(MetricsMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.resolved_cors_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(books.router)
app.include_router(stats.router)
app.include_router(health.router)
app.include_router(monitoring_router)

app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")


@app.get("/", include_in_schema=False)
def index() -> FileResponse:
    """Serve the browser client."""
    return FileResponse(settings.static_dir / "index.html")


def run() -> None:
    """Run the API with uvicorn using the configured host and port."""

    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting %s on port %d", settings.app_name, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
