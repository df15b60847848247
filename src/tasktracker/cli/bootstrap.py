# src/tasktracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (task store, metrics collector),
- loads the task file (a ParseError here is fatal and propagates).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import MetricsProvider
from ..core.state import AppState
from ..metrics.collector import MetricsCollector
from ..metrics.provider import PsutilMetricsProvider
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, provider: MetricsProvider | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the metrics provider injectable makes the app easy
    to test. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    task_store = TaskStore(settings.tasks_path)
    task_store.load()

    collector = MetricsCollector(
        provider or PsutilMetricsProvider(),
        cpu_sample_seconds=settings.cpu_sample_seconds,
        disk_path=settings.disk_path,
    )

    logger.info("TaskStore ready path=%s total=%d", task_store.path, task_store.count())
    return AppState(settings=settings, task_store=task_store, collector=collector)
