from fastapi import APIRouter

from book_catalog.core.config import get_settings


router = APIRouter()


@router.get("/health", tags=["Health"])
def read_health() -> dict[str, str]:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
    }
