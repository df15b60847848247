# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasktracker.cli.bootstrap import create_initial_state
from tasktracker.core.state import AppState

from .fakes import FakeMetricsProvider


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasktracker",
        log_level="WARNING",
        # Paths (tmp per test run)
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "tasks.json",
        # Metrics: no blocking CPU window, no sleeping between polls
        monitor_interval=0.0,
        cpu_sample_seconds=0.0,
        disk_path="/",
        # Presentation
        bar_width=20,
        clear_screen=False,
    )


@pytest.fixture()
def provider() -> FakeMetricsProvider:
    return FakeMetricsProvider()


@pytest.fixture()
def state(settings: SimpleNamespace, provider: FakeMetricsProvider) -> AppState:
    """
    AppState wired through the real composition root with a fake provider.

    NOTE: the TaskStore is real (JSON file under tmp_path) because its
    persistence is part of what we want to test.
    """
    return create_initial_state(settings=settings, provider=provider)
