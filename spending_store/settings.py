import logging
import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_RECENT_LIMIT = 5
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    templates_dir: Path
    recent_limit: int = DEFAULT_RECENT_LIMIT
    log_level: str = DEFAULT_LOG_LEVEL


def _recent_limit_from_env(raw: str | None) -> int:
    try:
        limit = int(raw) if raw else DEFAULT_RECENT_LIMIT
    except ValueError:
        return DEFAULT_RECENT_LIMIT
    return limit if limit >= 0 else DEFAULT_RECENT_LIMIT


def _log_level_from_env(raw: str | None) -> str:
    name = (raw or "").strip().upper()
    # getLevelName maps known names to ints and echoes "Level X" otherwise.
    if name and isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    return Settings(
        templates_dir=Path(__file__).resolve().parent / "templates",
        recent_limit=_recent_limit_from_env(
            os.getenv("SPENDING_STORE_RECENT_LIMIT")
        ),
        log_level=_log_level_from_env(os.getenv("SPENDING_STORE_LOG_LEVEL")),
    )
