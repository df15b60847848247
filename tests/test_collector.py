# tests/test_collector.py

from __future__ import annotations

import dataclasses
from datetime import datetime, timezone

import pytest

from tasktracker.errors import CollectionError
from tasktracker.metrics.collector import MetricsCollector, aggregate_network
from tasktracker.metrics.metrics_models import InterfaceCounters, MetricSource

from .fakes import FakeMetricsProvider

CAPTURED = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _collector(provider: FakeMetricsProvider, **kwargs) -> MetricsCollector:
    kwargs.setdefault("clock", lambda: CAPTURED)
    return MetricsCollector(provider, **kwargs)


def test_collect_builds_full_snapshot(provider: FakeMetricsProvider) -> None:
    snapshot = _collector(provider, cpu_sample_seconds=1.0, disk_path="/").collect()

    assert snapshot.cpu_usage_percent == 12.5
    assert snapshot.memory == provider.memory
    assert snapshot.disk == provider.disk
    assert snapshot.system == provider.host
    assert snapshot.captured_at == CAPTURED

    assert snapshot.network.interface_count == 2
    assert snapshot.network.bytes_sent == 1024 + 2048
    assert snapshot.network.bytes_received == 1024 + 4096

    assert provider.calls == [
        ("cpu", 1.0),
        ("memory", None),
        ("disk", "/"),
        ("network", None),
        ("host", None),
    ]


def test_snapshot_is_immutable(provider: FakeMetricsProvider) -> None:
    snapshot = _collector(provider).collect()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.cpu_usage_percent = 99.0  # type: ignore[misc]


def test_collect_uses_configured_disk_path(provider: FakeMetricsProvider) -> None:
    _collector(provider, disk_path="/srv").collect()
    assert ("disk", "/srv") in provider.calls


@pytest.mark.parametrize("source", list(MetricSource))
def test_single_failing_subquery_aborts_collect(
    provider: FakeMetricsProvider, source: MetricSource
) -> None:
    boom = RuntimeError(f"{source.value} unavailable")
    provider.fail[source.value] = boom

    with pytest.raises(CollectionError) as exc:
        _collector(provider).collect()

    assert exc.value.source is source
    assert exc.value.__cause__ is boom
    assert source.label in str(exc.value)

    # Nothing after the failing sub-query runs.
    called = [name for name, _ in provider.calls]
    assert called[-1] == source.value


def test_failure_message_falls_back_to_exception_type(provider: FakeMetricsProvider) -> None:
    provider.fail["disk"] = PermissionError()
    with pytest.raises(CollectionError) as exc:
        _collector(provider).collect()
    assert str(exc.value) == "failed to get disk stats: PermissionError"


def test_no_interfaces_gives_zero_counters(provider: FakeMetricsProvider) -> None:
    provider.interfaces = {}
    network = _collector(provider).collect().network
    assert (network.bytes_sent, network.bytes_received, network.interface_count) == (0, 0, 0)


def test_aggregate_network_sums_all_interfaces() -> None:
    counters = {
        f"eth{i}": InterfaceCounters(bytes_sent=i * 10, bytes_received=i * 100) for i in range(1, 5)
    }
    net = aggregate_network(counters)
    assert net.bytes_sent == 100
    assert net.bytes_received == 1000
    assert net.interface_count == 4
