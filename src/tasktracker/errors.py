# src/tasktracker/errors.py

"""
Error taxonomy.

Stores and collectors raise these; the interactive layer catches them and
prints a message. Only a ParseError at startup is fatal.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .metrics.metrics_models import MetricSource


class TaskTrackerError(Exception):
    """Base class for all tasktracker errors."""


class ParseError(TaskTrackerError):
    """The persisted task file exists but cannot be read back."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot parse task file {self.path}: {reason}")


class NotFoundError(TaskTrackerError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class InvalidStatusError(TaskTrackerError):
    def __init__(self, status: object) -> None:
        self.status = status
        super().__init__(
            f"Invalid status {status!r} (expected pending, in-progress or completed)"
        )


class WriteError(TaskTrackerError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot write task file {self.path}: {reason}")


class CollectionError(TaskTrackerError):
    """A metrics sub-query failed; `source` names which one."""

    def __init__(self, source: MetricSource, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"failed to get {source.label}: {reason}")
