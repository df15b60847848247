# src/tasktracker/metrics/collector.py

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import TypeVar

from ..core.ports import MetricsProvider
from ..errors import CollectionError
from .metrics_models import InterfaceCounters, MetricSource, MetricsSnapshot, NetworkInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _now_local() -> datetime:
    return datetime.now().astimezone()


def aggregate_network(counters: Mapping[str, InterfaceCounters]) -> NetworkInfo:
    """Sum counters over all interfaces; no interfaces means all zeros."""
    return NetworkInfo(
        bytes_sent=sum(c.bytes_sent for c in counters.values()),
        bytes_received=sum(c.bytes_received for c in counters.values()),
        interface_count=len(counters),
    )


class MetricsCollector:
    """
    Assembles one MetricsSnapshot per collect() call.

    The five sub-queries run in order (cpu, memory, disk, network, host).
    The first failure aborts the call with CollectionError; no partial
    snapshot is ever returned.
    """

    def __init__(
        self,
        provider: MetricsProvider,
        *,
        cpu_sample_seconds: float = 1.0,
        disk_path: str = "/",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._provider = provider
        self._cpu_sample_seconds = max(0.0, float(cpu_sample_seconds))
        self._disk_path = disk_path
        self._clock = clock or _now_local

    @staticmethod
    def _query(source: MetricSource, fn: Callable[[], T]) -> T:
        try:
            return fn()
        except Exception as e:
            logger.debug("Metrics sub-query %s failed", source.value, exc_info=True)
            raise CollectionError(source, str(e) or type(e).__name__) from e

    def collect(self) -> MetricsSnapshot:
        p = self._provider

        cpu = self._query(MetricSource.CPU, lambda: p.cpu_percent(self._cpu_sample_seconds))
        memory = self._query(MetricSource.MEMORY, p.virtual_memory)
        disk = self._query(MetricSource.DISK, lambda: p.disk_usage(self._disk_path))
        network = self._query(
            MetricSource.NETWORK, lambda: aggregate_network(p.net_io_counters())
        )
        system = self._query(MetricSource.HOST, p.host_info)

        snapshot = MetricsSnapshot(
            cpu_usage_percent=float(cpu),
            memory=memory,
            disk=disk,
            network=network,
            system=system,
            captured_at=self._clock(),
        )
        logger.debug(
            "Snapshot cpu=%.2f mem=%.2f disk=%.2f nics=%d",
            snapshot.cpu_usage_percent,
            memory.used_percent,
            disk.used_percent,
            network.interface_count,
        )
        return snapshot
