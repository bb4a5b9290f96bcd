import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "bizdesk"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Durable key-value store backing every collection slot
    storage_backend: Literal["memory", "json", "sqlite"] = "json"
    data_dir: str = "data"
    database_url: str = "sqlite:///data/bizdesk.db"

    # Artificial latency awaited by every repository call (0 disables it)
    simulated_latency_ms: int = 0

    # When true, a failed slot write raises PersistenceError instead of
    # being logged and ignored.
    raise_on_persistence_error: bool = False

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL queries
    log_level_storage: str = "INFO"          # key-value stores and record store
    log_level_services: str = "INFO"         # entity services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Clamp a negative latency to 0."""
        if self.simulated_latency_ms < 0:
            _config_logger.warning(
                "simulated_latency_ms=%d is negative, using 0", self.simulated_latency_ms
            )
            object.__setattr__(self, "simulated_latency_ms", 0)

    @property
    def simulated_latency(self) -> float:
        """Latency in seconds, ready for asyncio.sleep()."""
        return self.simulated_latency_ms / 1000


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
