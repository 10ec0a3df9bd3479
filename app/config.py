from pathlib import Path
from typing import List, Optional

from loguru import logger
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Checked in order when FRONTEND_DIR is not set.
DEFAULT_FRONTEND_DIRS = (Path("../frontend/build"), Path("./frontend/build"))


class Settings(BaseSettings):
    """Application-level settings loaded from environment variables."""

    app_name: str = "Toronto Tehran Clock"
    app_description: str = "Current time in Toronto and Tehran, and conversion between the two."
    host: str = "0.0.0.0"
    port: int = 8080
    frontend_dir: Optional[Path] = None
    cors_allow_origins: List[str] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("port", mode="before")
    @classmethod
    def _blank_port(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return 8080
        return value

    @field_validator("frontend_dir", mode="before")
    @classmethod
    def _blank_frontend_dir(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def resolve_frontend_dir(self) -> Optional[Path]:
        """Return the frontend build directory, or None when there is none."""
        candidates = (self.frontend_dir,) if self.frontend_dir else DEFAULT_FRONTEND_DIRS
        for candidate in candidates:
            if candidate.is_dir():
                return candidate.resolve()

        logger.warning(
            "Frontend build directory not found; static files will not be served",
            searched=[str(candidate) for candidate in candidates],
        )
        return None


settings = Settings()
