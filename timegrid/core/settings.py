from __future__ import annotations
import os
import sys
import logging
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _b(s, default=False) -> bool:
    if s is None:
        return default
    return str(s).strip().lower() in {"1", "true", "yes", "y", "on"}


class Settings(BaseSettings):
    # read .env with case-insensitive keys
    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE", ".env"),
        case_sensitive=False,
        extra="ignore",
    )

    # IANA key used when a caller passes no timezone
    DEFAULT_TIMEZONE: str = Field("UTC")

    # 0=Sunday .. 6=Saturday
    DEFAULT_WEEK_START: int = Field(0, ge=0, le=6)

    # lenient (invalid moment) vs strict (raise) parsing of typed date+time
    STRICT_DATETIME_PARSING: bool = Field(False)

    LOG_LEVEL: str = Field("INFO")

    @field_validator("STRICT_DATETIME_PARSING", mode="before")
    @classmethod
    def _parse_flag(cls, v):
        if isinstance(v, bool):
            return v
        return _b(v)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v):
        s = str(v or "INFO").strip().upper()
        return s or "INFO"


settings = Settings()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure root logging to stdout for applications and scripts.

    The library itself only attaches a NullHandler; call this from an entry point.
    """
    lvl = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, lvl, logging.INFO),
        stream=sys.stdout,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        force=True,
    )
    return logging.getLogger("timegrid")
