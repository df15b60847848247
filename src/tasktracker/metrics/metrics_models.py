# src/tasktracker/metrics/metrics_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum


class MetricSource(StrEnum):
    """The independent sub-queries that make up one snapshot."""

    CPU = "cpu"
    MEMORY = "memory"
    DISK = "disk"
    NETWORK = "network"
    HOST = "host"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    MetricSource.CPU: "CPU usage",
    MetricSource.MEMORY: "memory stats",
    MetricSource.DISK: "disk stats",
    MetricSource.NETWORK: "network stats",
    MetricSource.HOST: "host info",
}


@dataclass(slots=True, frozen=True)
class MemoryInfo:
    used_percent: float
    used_bytes: int
    total_bytes: int


@dataclass(slots=True, frozen=True)
class DiskInfo:
    used_percent: float
    used_bytes: int
    total_bytes: int


@dataclass(slots=True, frozen=True)
class InterfaceCounters:
    """Raw per-interface I/O counters as reported by the provider."""

    bytes_sent: int
    bytes_received: int


@dataclass(slots=True, frozen=True)
class NetworkInfo:
    """Counters summed over all interfaces."""

    bytes_sent: int
    bytes_received: int
    interface_count: int


@dataclass(slots=True, frozen=True)
class SystemInfo:
    os_name: str
    platform_name: str
    architecture: str
    core_count: int
    uptime: timedelta


@dataclass(slots=True, frozen=True)
class MetricsSnapshot:
    """One fully-populated read of all metrics. Never partially filled."""

    cpu_usage_percent: float
    memory: MemoryInfo
    disk: DiskInfo
    network: NetworkInfo
    system: SystemInfo
    captured_at: datetime
