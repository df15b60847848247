# tests/test_bootstrap.py

from __future__ import annotations

import json

import pytest

from tasktracker.cli.bootstrap import create_initial_state
from tasktracker.errors import ParseError
from tasktracker.metrics.collector import MetricsCollector

from .fakes import FakeMetricsProvider


def test_state_loads_existing_tasks(settings) -> None:
    settings.tasks_path.write_text(
        json.dumps(
            [
                {
                    "id": 1,
                    "title": "from disk",
                    "description": "",
                    "status": "completed",
                    "created_at": "2024-05-01T10:00:00+00:00",
                    "updated_at": "2024-05-01T11:00:00+00:00",
                }
            ]
        ),
        "utf-8",
    )

    state = create_initial_state(settings=settings, provider=FakeMetricsProvider())

    assert [t.title for t in state.task_store.list()] == ["from disk"]
    assert state.task_store.path == settings.tasks_path
    assert isinstance(state.collector, MetricsCollector)
    assert settings.data_dir.is_dir()


def test_malformed_task_file_aborts_startup(settings) -> None:
    settings.tasks_path.write_text("[{]", "utf-8")

    with pytest.raises(ParseError):
        create_initial_state(settings=settings, provider=FakeMetricsProvider())


def test_collector_uses_settings(settings) -> None:
    settings.cpu_sample_seconds = 0.25
    settings.disk_path = "/var"
    provider = FakeMetricsProvider()

    state = create_initial_state(settings=settings, provider=provider)
    state.collector.collect()

    assert ("cpu", 0.25) in provider.calls
    assert ("disk", "/var") in provider.calls
