# src/tasktracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default, so the tool runs with an empty environment.
- Malformed numbers fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKTRACKER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env from the working directory (existing env vars win)."""
    from dotenv import load_dotenv

    load_dotenv(override=False)


_load_dotenv_if_available()


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

    # ---- Local paths ----
    data_dir: Path
    tasks_path: Path

    # ---- Metrics ----
    monitor_interval: float
    cpu_sample_seconds: float
    disk_path: str

    # ---- Presentation ----
    bar_width: int
    clear_screen: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasktracker") or "tasktracker"
        # Console log level. The menus own the terminal, so keep INFO chatter in the file.
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasktracker"))
        tasks_path = _env_path(_k("TASKS_PATH"), Path("tasks.json"))

        monitor_interval = max(0.0, _env_float(_k("MONITOR_INTERVAL"), 2.0))
        cpu_sample_seconds = max(0.0, _env_float(_k("CPU_SAMPLE_SECONDS"), 1.0))
        disk_path = _env(_k("DISK_PATH"), "/").strip() or "/"

        bar_width = _env_int(_k("BAR_WIDTH"), 20)
        if bar_width <= 0:
            bar_width = 20
        clear_screen = _env_bool(_k("CLEAR_SCREEN"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_path=tasks_path,
            monitor_interval=monitor_interval,
            cpu_sample_seconds=cpu_sample_seconds,
            disk_path=disk_path,
            bar_width=bar_width,
            clear_screen=clear_screen,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
