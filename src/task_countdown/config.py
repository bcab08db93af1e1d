# src/task_countdown/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a usable default; a bad value falls back to it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "COUNTDOWN"

MIN_REFRESH_INTERVAL_SECONDS = 0.05

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Refresh loop ----
    refresh_interval_seconds: float

    # ---- Console ----
    use_color: bool
    date_format: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-countdown").strip() or "task-countdown"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/countdown"))

        refresh_interval_seconds = max(
            MIN_REFRESH_INTERVAL_SECONDS,
            _env_float(_k("REFRESH_INTERVAL"), 1.0),
        )

        use_color = _env_bool(_k("COLOR"), True)
        date_format = _env(_k("DATE_FORMAT"), "%Y-%m-%d %H:%M") or "%Y-%m-%d %H:%M"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            refresh_interval_seconds=refresh_interval_seconds,
            use_color=use_color,
            date_format=date_format,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
