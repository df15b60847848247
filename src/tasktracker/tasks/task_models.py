# src/tasktracker/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from ..errors import InvalidStatusError

# datetime.fromisoformat() stops at microseconds; other writers emit nanoseconds.
_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")


class TaskStatus(StrEnum):
    """Task lifecycle status (values are what gets written to disk)."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: object) -> TaskStatus:
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise InvalidStatusError(raw)
        try:
            return cls(raw)
        except ValueError:
            raise InvalidStatusError(raw) from None


def parse_timestamp(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as local time."""
    value = _EXTRA_FRACTION.sub(r"\1", raw.strip())
    ts = datetime.fromisoformat(value)
    if ts.tzinfo is None:
        ts = ts.astimezone()
    return ts


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """
        Build a Task from one decoded JSON record.

        Raises ValueError/TypeError/InvalidStatusError on bad structure;
        the store turns those into ParseError.
        """
        if not isinstance(data, dict):
            raise TypeError(f"task record must be an object, got {type(data).__name__}")

        task_id = data.get("id")
        # bool is an int subclass; reject it explicitly.
        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id <= 0:
            raise ValueError(f"id must be a positive integer, got {task_id!r}")

        title = data.get("title")
        if not isinstance(title, str):
            raise TypeError(f"task {task_id}: title must be a string")

        description = data.get("description", "")
        if not isinstance(description, str):
            raise TypeError(f"task {task_id}: description must be a string")

        created_raw = data.get("created_at")
        updated_raw = data.get("updated_at")
        if not isinstance(created_raw, str) or not isinstance(updated_raw, str):
            raise TypeError(f"task {task_id}: created_at/updated_at must be strings")

        created_at = parse_timestamp(created_raw)
        updated_at = parse_timestamp(updated_raw)
        if updated_at < created_at:
            raise ValueError(f"task {task_id}: updated_at is earlier than created_at")

        return cls(
            id=task_id,
            title=title,
            description=description,
            status=TaskStatus.parse(data.get("status")),
            created_at=created_at,
            updated_at=updated_at,
        )
