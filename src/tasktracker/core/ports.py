# src/tasktracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The collector and the menus depend on Protocols instead of concrete
implementations, so the OS-facing provider and the terminal can be faked
in tests.
"""

from collections.abc import Mapping
from typing import Protocol

from ..metrics.metrics_models import (
    DiskInfo,
    InterfaceCounters,
    MemoryInfo,
    MetricsSnapshot,
    SystemInfo,
)


class MetricsProvider(Protocol):
    """Read-only OS metrics source. Each method may raise on failure."""

    def cpu_percent(self, interval: float) -> float:
        """Overall CPU utilization (0-100) measured over `interval` seconds (blocking)."""
        ...

    def virtual_memory(self) -> MemoryInfo: ...

    def disk_usage(self, path: str) -> DiskInfo: ...

    def net_io_counters(self) -> Mapping[str, InterfaceCounters]:
        """Counters keyed by interface name."""
        ...

    def host_info(self) -> SystemInfo: ...


class SnapshotSource(Protocol):
    def collect(self) -> MetricsSnapshot: ...


class Console(Protocol):
    """Terminal port used by the interactive menus."""

    def ask(self, prompt: str) -> str:
        """Show prompt, return one input line. Raises EOFError at end of input."""
        ...

    def say(self, text: str) -> None: ...

    def clear(self) -> None: ...
