"""Environment-driven settings.

Reads LIFTOUT_* variables. Entry points call ``load_dotenv()`` first so a
``.env`` file in the project root is honoured.
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EngineSettings(BaseModel):
    """Runtime settings for the repository and the demo dashboard."""

    data_dir: str = Field(default="data", min_length=1)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings() -> EngineSettings:
    """Build settings from LIFTOUT_DATA_DIR and LIFTOUT_LOG_LEVEL.

    Raises:
        ValueError: If LIFTOUT_LOG_LEVEL is not a known logging level.
    """
    data_dir = os.getenv("LIFTOUT_DATA_DIR", "") or "data"
    log_level = os.getenv("LIFTOUT_LOG_LEVEL", "") or "INFO"

    try:
        settings = EngineSettings(data_dir=data_dir, log_level=log_level)
    except ValueError as e:
        raise ValueError(f"Invalid liftout settings: {e}") from e

    logger.info("Settings: data_dir=%s log_level=%s", settings.data_dir, settings.log_level)
    return settings


def configure_logging(settings: EngineSettings) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(level=getattr(logging, settings.log_level))
