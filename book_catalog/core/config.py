from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from book_catalog import __version__

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = "Islamic Books Catalog API"
    app_version: str = __version__

    database_url: str = "sqlite+pysqlite:///./islamic_books.db"
    database_echo: bool = False

    cors_allowed_origins: str | list[str] = "*"

    seed_sample_data: bool = True
    static_dir: Path = PACKAGE_DIR / "static"

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CATALOG_",
        extra="ignore",
    )

    @property
    def is_sqlite(self) -> bool:
        """Return True when the configured database is SQLite."""

        return self.database_url.startswith("sqlite")

    @property
    def resolved_cors_allowed_origins(self) -> list[str]:
        """Return the configured CORS origins as a normalized list."""

        if isinstance(self.cors_allowed_origins, str):
            return [
                origin.strip()
                for origin in self.cors_allowed_origins.split(",")
                if origin.strip()
            ]

        return list(self.cors_allowed_origins)


@lru_cache
def get_settings() -> Settings:
    """Cache settings to avoid re-parsing environment files."""
    return Settings()
