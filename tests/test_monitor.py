# tests/test_monitor.py

from __future__ import annotations

import threading

from tasktracker.errors import CollectionError
from tasktracker.metrics.collector import MetricsCollector
from tasktracker.metrics.metrics_models import MetricSource, MetricsSnapshot
from tasktracker.metrics.monitor import run_monitor

from .fakes import FakeMetricsProvider


class ScriptedCollector:
    """Returns (or raises) the scripted results in order, repeating the last one."""

    def __init__(self, results: list[MetricsSnapshot | CollectionError]) -> None:
        self.results = results
        self.calls = 0

    def collect(self) -> MetricsSnapshot:
        result = self.results[min(self.calls, len(self.results) - 1)]
        self.calls += 1
        if isinstance(result, CollectionError):
            raise result
        return result


def _snapshot() -> MetricsSnapshot:
    return MetricsCollector(FakeMetricsProvider(), cpu_sample_seconds=0).collect()


def test_monitor_stops_at_deadline() -> None:
    times = iter([0.0, 0.0, 1.0, 2.0, 3.5])
    collector = ScriptedCollector([_snapshot()])
    seen: list[MetricsSnapshot] = []

    frames = run_monitor(
        collector,
        on_snapshot=seen.append,
        interval_seconds=0,
        duration_seconds=3,
        clock=lambda: next(times),
    )

    assert frames == 3
    assert len(seen) == 3
    assert collector.calls == 3


def test_monitor_keeps_polling_after_collection_error() -> None:
    snap = _snapshot()
    err = CollectionError(MetricSource.NETWORK, "no counters")
    collector = ScriptedCollector([err, snap, err, snap])
    stop = threading.Event()
    seen: list[MetricsSnapshot] = []
    errors: list[CollectionError] = []

    def on_snapshot(s: MetricsSnapshot) -> None:
        seen.append(s)
        if len(seen) == 2:
            stop.set()

    frames = run_monitor(
        collector,
        on_snapshot=on_snapshot,
        on_error=errors.append,
        interval_seconds=0,
        stop=stop,
    )

    assert frames == 2
    assert errors == [err, err]
    assert collector.calls == 4


def test_monitor_with_stop_already_set_does_nothing() -> None:
    stop = threading.Event()
    stop.set()
    collector = ScriptedCollector([_snapshot()])

    assert run_monitor(collector, on_snapshot=lambda s: None, stop=stop) == 0
    assert collector.calls == 0


def test_stop_interrupts_wait_between_polls() -> None:
    stop = threading.Event()
    collector = ScriptedCollector([_snapshot()])

    # A long interval would hang the test if the wait ignored the stop signal.
    timer = threading.Timer(0.05, stop.set)
    timer.start()
    try:
        frames = run_monitor(
            collector,
            on_snapshot=lambda s: None,
            interval_seconds=60,
            stop=stop,
        )
    finally:
        timer.cancel()

    assert frames == 1
