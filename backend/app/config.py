from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Project Dashboard API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:8080"]

    # Sample data loaded into the in-memory store at startup
    seed_sample_data: bool = True
    seed_data_file: str | None = None  # None → packaged seed_data.yaml

    # File attachments
    max_upload_size_mb: int = 50
    default_uploader_name: str = "Usuário atual"

    # Cosmetic upload progress animation (seconds)
    upload_progress_min_seconds: float = 1.2
    upload_progress_max_seconds: float = 2.0
    upload_progress_tick_seconds: float = 0.1
    upload_progress_linger_seconds: float = 0.4

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_store: str = "INFO"            # In-memory entity store mutations
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_uploads: str = "INFO"          # File attachments and progress feedback

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
