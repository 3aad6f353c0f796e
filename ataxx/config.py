import logging
import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from ataxx.ai.constants import MAX_DEPTH

load_dotenv()

LOG_FORMAT = '%(asctime)s %(message)s'
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Runtime settings, read from the environment (and a .env file)."""
    search_depth: int = Field(MAX_DEPTH, ge=1)
    seed: Optional[int] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None
    cors_origins: List[str] = ["*"]

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value


def _env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def load_settings() -> Settings:
    """Build Settings from ATAXX_* environment variables."""
    values = {}
    if _env("ATAXX_SEARCH_DEPTH") is not None:
        values["search_depth"] = _env("ATAXX_SEARCH_DEPTH")
    if _env("ATAXX_SEED") is not None:
        values["seed"] = _env("ATAXX_SEED")
    if _env("ATAXX_LOG_LEVEL") is not None:
        values["log_level"] = _env("ATAXX_LOG_LEVEL")
    if _env("ATAXX_LOG_FILE") is not None:
        values["log_file"] = _env("ATAXX_LOG_FILE")
    if _env("ATAXX_CORS_ORIGINS") is not None:
        values["cors_origins"] = [o.strip() for o in _env("ATAXX_CORS_ORIGINS").split(",") if o.strip()]
    return Settings(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def configure_logging(level: str = "INFO", filename: Optional[str] = None) -> None:
    """Set up root logging, to FILENAME if given and to stderr otherwise."""
    kwargs = {"level": getattr(logging, level.upper()), "format": LOG_FORMAT}
    if filename:
        kwargs.update(filename=filename, filemode='w')
    logging.basicConfig(**kwargs)
