"""Application configuration helpers."""

from dataclasses import dataclass
import logging
import os
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()

DISPATCH_STRATEGIES = ("switch", "visitor")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Holds runtime configuration loaded from the environment."""

    dispatch: str = "visitor"
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings so every module shares the same values."""

    dispatch = os.getenv("VACATION_DISPATCH", "visitor").strip().lower()
    if dispatch not in DISPATCH_STRATEGIES:
        raise ValueError(
            f"VACATION_DISPATCH must be one of {', '.join(DISPATCH_STRATEGIES)} (got {dispatch!r})."
        )

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)} (got {log_level!r}).")

    return Settings(dispatch=dispatch, log_level=log_level)
