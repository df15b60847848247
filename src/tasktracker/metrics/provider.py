# src/tasktracker/metrics/provider.py

"""psutil-backed MetricsProvider (the only module that talks to the OS)."""

from __future__ import annotations

import logging
import platform
import time
from datetime import timedelta

import psutil

from .metrics_models import DiskInfo, InterfaceCounters, MemoryInfo, SystemInfo

logger = logging.getLogger(__name__)


def _platform_name() -> str:
    """Distribution id on Linux (e.g. 'ubuntu'), generic platform string elsewhere."""
    try:
        release = platform.freedesktop_os_release()
    except OSError:
        return platform.platform(terse=True)
    return release.get("ID") or platform.platform(terse=True)


class PsutilMetricsProvider:
    def cpu_percent(self, interval: float) -> float:
        return float(psutil.cpu_percent(interval=interval, percpu=False))

    def virtual_memory(self) -> MemoryInfo:
        vm = psutil.virtual_memory()
        return MemoryInfo(
            used_percent=float(vm.percent),
            used_bytes=int(vm.used),
            total_bytes=int(vm.total),
        )

    def disk_usage(self, path: str) -> DiskInfo:
        du = psutil.disk_usage(path)
        return DiskInfo(
            used_percent=float(du.percent),
            used_bytes=int(du.used),
            total_bytes=int(du.total),
        )

    def net_io_counters(self) -> dict[str, InterfaceCounters]:
        per_nic = psutil.net_io_counters(pernic=True) or {}
        return {
            name: InterfaceCounters(
                bytes_sent=int(c.bytes_sent),
                bytes_received=int(c.bytes_recv),
            )
            for name, c in per_nic.items()
        }

    def host_info(self) -> SystemInfo:
        boot_ts = psutil.boot_time()
        uptime_s = max(0, int(time.time() - boot_ts))
        cores = psutil.cpu_count(logical=True) or 0
        return SystemInfo(
            os_name=platform.system().lower(),
            platform_name=_platform_name(),
            architecture=platform.machine(),
            core_count=int(cores),
            uptime=timedelta(seconds=uptime_s),
        )
