# src/todo_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Bad values fall back to defaults instead of crashing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"


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


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
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
    log_dir: Path
    log_file_enabled: bool

    # ---- Storage ----
    store_path: Path

    # ---- Views ----
    due_soon_days: int

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/todo"))
        log_file_enabled = _env_bool(_k("LOG_FILE"), False)

        # Relative to the working directory: one task file per directory.
        store_path = _env_path(_k("STORE_PATH"), Path("todos.json"))

        due_soon_days = _env_int(_k("DUE_SOON_DAYS"), 7)
        if due_soon_days < 0:
            due_soon_days = 7

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            log_file_enabled=log_file_enabled,
            store_path=store_path,
            due_soon_days=due_soon_days,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
