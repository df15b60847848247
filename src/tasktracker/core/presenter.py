# src/tasktracker/core/presenter.py

"""
Plain-text rendering for the terminal.

Pure functions only: they take models and return strings, the caller
decides where to print them.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import timedelta

from ..metrics.metrics_models import MetricsSnapshot
from ..tasks.task_models import Task, TaskStatus

_UNIT = 1024
_PREFIXES = "KMGTPE"

_STATUS_SYMBOLS = {
    TaskStatus.PENDING: "○",
    TaskStatus.IN_PROGRESS: "→",
    TaskStatus.COMPLETED: "✓",
}

TASK_TS_FORMAT = "%Y-%m-%d %H:%M"
SNAPSHOT_TS_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_bytes(n: int) -> str:
    """Humanize a byte count with 1024-based units: 512 B, 1.5 KB, 1.0 GB, ..."""
    if n < _UNIT:
        return f"{n} B"

    div, exp = _UNIT, 0
    rest = n // _UNIT
    while rest >= _UNIT and exp < len(_PREFIXES) - 1:
        div *= _UNIT
        exp += 1
        rest //= _UNIT

    return f"{n / div:.1f} {_PREFIXES[exp]}B"


def clamp_percent(percent: float) -> float:
    if math.isnan(percent):
        return 0.0
    return max(0.0, min(100.0, percent))


def render_bar(percent: float, width: int = 20) -> str:
    """
    Fixed-width gauge, e.g. "[==========----------] 50.00%".

    The caller clamps percent to [0, 100] (see clamp_percent).
    """
    filled = math.floor(percent / 100 * width)
    bar = "=" * filled + "-" * (width - filled)
    return f"[{bar}] {percent:.2f}%"


def status_symbol(status: str) -> str:
    try:
        return _STATUS_SYMBOLS[TaskStatus(status)]
    except ValueError:
        return _STATUS_SYMBOLS[TaskStatus.PENDING]


def format_duration(d: timedelta) -> str:
    """Compact duration: 3s, 2m3s, 52h3m10s."""
    total = int(d.total_seconds())
    if total <= 0:
        return "0s"
    hours, rem = divmod(total, 3600)
    minutes, seconds = divmod(rem, 60)
    if hours:
        return f"{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{minutes}m{seconds}s"
    return f"{seconds}s"


def render_snapshot(snapshot: MetricsSnapshot, *, bar_width: int = 20) -> str:
    mem = snapshot.memory
    disk = snapshot.disk
    net = snapshot.network
    host = snapshot.system

    lines = [
        "=== System Metrics ===",
        f"Last Updated: {snapshot.captured_at.strftime(SNAPSHOT_TS_FORMAT)}",
        "",
        f"CPU Usage: {snapshot.cpu_usage_percent:.2f}%",
        f"RAM Usage: {mem.used_percent:.2f}% "
        f"({format_bytes(mem.used_bytes)} / {format_bytes(mem.total_bytes)})",
        f"Disk Usage: {disk.used_percent:.2f}% "
        f"({format_bytes(disk.used_bytes)} / {format_bytes(disk.total_bytes)})",
        f"Network: {net.interface_count} interfaces, "
        f"{format_bytes(net.bytes_sent)} sent, {format_bytes(net.bytes_received)} received",
        f"OS: {host.os_name} ({host.platform_name})",
        f"Architecture: {host.architecture}",
        f"CPU Cores: {host.core_count}",
        f"Uptime: {format_duration(host.uptime)}",
        "",
        f"CPU: {render_bar(clamp_percent(snapshot.cpu_usage_percent), bar_width)}",
        f"RAM: {render_bar(clamp_percent(mem.used_percent), bar_width)}",
        f"DISK: {render_bar(clamp_percent(disk.used_percent), bar_width)}",
    ]
    return "\n".join(lines)


def render_task(task: Task) -> str:
    return "\n".join(
        [
            f"[{task.id}] {status_symbol(task.status)} {task.title}",
            f"    Status: {task.status.value}",
            f"    Description: {task.description}",
            f"    Created: {task.created_at.strftime(TASK_TS_FORMAT)}",
            f"    Updated: {task.updated_at.strftime(TASK_TS_FORMAT)}",
        ]
    )


def render_task_list(tasks: Iterable[Task]) -> str:
    blocks = [render_task(t) for t in tasks]
    if not blocks:
        return "No tasks available"
    return "Your Tasks:\n" + "\n\n".join(blocks)
