# src/tasktracker/metrics/monitor.py

from __future__ import annotations

"""
Continuous monitoring.

A small sleep-poll loop that:
- collects a snapshot,
- hands it to the caller for rendering,
- on CollectionError logs it and keeps polling,
- stops at an optional deadline or when the stop event is set.
"""

import logging
import threading
import time
from collections.abc import Callable

from ..core.ports import SnapshotSource
from ..errors import CollectionError
from .metrics_models import MetricsSnapshot

logger = logging.getLogger(__name__)


def run_monitor(
        collector: SnapshotSource,
        *,
        on_snapshot: Callable[[MetricsSnapshot], None],
        on_error: Callable[[CollectionError], None] | None = None,
        interval_seconds: float = 2.0,
        duration_seconds: float = 0.0,
        stop: threading.Event | None = None,
        clock: Callable[[], float] = time.monotonic,
) -> int:
    """
    Poll until the deadline passes or `stop` is set.

    duration_seconds <= 0 means run until stopped (or interrupted).
    The wait between polls is stop.wait(), so setting the event wakes the
    loop immediately. Returns the number of snapshots delivered.
    """
    stop = stop or threading.Event()
    interval = max(0.0, float(interval_seconds))
    deadline = clock() + duration_seconds if duration_seconds > 0 else None

    logger.info("Monitor started interval=%.1fs duration=%s", interval, duration_seconds or "inf")
    frames = 0

    while not stop.is_set():
        if deadline is not None and clock() > deadline:
            break

        try:
            snapshot = collector.collect()
        except CollectionError as e:
            logger.warning("Metrics collection failed (%s): %s", e.source.value, e)
            if on_error is not None:
                on_error(e)
        else:
            on_snapshot(snapshot)
            frames += 1

        stop.wait(interval)

    logger.info("Monitor finished after %d snapshots", frames)
    return frames
