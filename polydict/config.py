"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from polydict.models import GroupingType, OrderType

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Path("data")

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/polydict.log if not set."""
        return self.log_file_path or self.data_dir / "polydict.log"

    # Languages
    preload_default_languages: bool = True

    # Bundled glossary engine
    glossary_enabled: bool = True
    glossary_path: Path | None = None  # None uses the bundled sample

    # Queries
    engine_timeout_seconds: float = 10.0
    default_grouping: GroupingType = GroupingType.NONE
    default_order: OrderType = OrderType.RELEVANCE

    # Server
    host: str = "127.0.0.1"
    port: int = 8000


settings = Settings()
