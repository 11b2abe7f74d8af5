"""
Configuration management for the PasteMyst client.
"""

import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .endpoints import USER_AGENT


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="PASTEMYST_", extra="ignore"
    )

    base_url: str = "https://paste.myst.rs"
    api_version: str = "v2"
    timeout_seconds: Optional[float] = None
    user_agent: str = USER_AGENT

    log_level: str = "INFO"
    debug: bool = False

    @property
    def api_root(self) -> str:
        """Versioned API root, always ending with a slash."""
        return f"{self.base_url.rstrip('/')}/api/{self.api_version}/"


def get_settings() -> Settings:
    return Settings()


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure logging for the client."""
    settings = settings or get_settings()
    level_name = "DEBUG" if settings.debug else settings.log_level.upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger("pastemyst")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"pastemyst.{name}")
