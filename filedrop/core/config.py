"""Application configuration loaded from the environment."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Settings read from environment variables (and an optional .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # Storage
    upload_dir: Path = Field(default=Path("uploads"), description="Directory holding uploaded files")
    static_dir: Path = Field(default=PACKAGE_DIR / "static", description="Directory of the web UI")

    # Upload limits
    max_upload_files: int = Field(default=10, ge=1)
    max_file_size: int = Field(default=100 * 1024 * 1024, ge=1, description="Per-file ceiling in bytes")

    # CORS
    cors_origins: str = Field(default="*")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["plain", "json"] = Field(default="plain")

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
