# src/tasktracker/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from ..errors import InvalidStatusError, NotFoundError, ParseError, WriteError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


def _now_local() -> datetime:
    return datetime.now().astimezone()


class TaskStore:
    """
    JSON-file task store.

    The whole collection lives in memory for the lifetime of the process:
    - load() reads the file once at startup
    - add/update/delete mutate the in-memory list only
    - save() writes the full list back (temp file + os.replace)

    Not thread-safe: one process, one owner.
    """

    def __init__(
        self,
        path: str | Path = "tasks.json",
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._path = Path(path)
        self._clock = clock or _now_local
        self._tasks: list[Task] = []

    @property
    def path(self) -> Path:
        return self._path

    # ---- persistence ----

    def load(self, path: str | Path | None = None) -> list[Task]:
        """
        Replace the in-memory collection with the file contents.

        A missing file is an empty collection. Anything present but
        unreadable raises ParseError.
        """
        src = Path(path) if path is not None else self._path
        try:
            raw = src.read_text("utf-8")
        except FileNotFoundError:
            logger.info("No task file at %s; starting empty.", src)
            self._tasks = []
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(src, f"cannot read file ({e})") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(src, f"invalid JSON ({e})") from e

        # A nil collection serializes as `null`.
        if data is None:
            data = []
        if not isinstance(data, list):
            raise ParseError(src, f"expected a JSON array, got {type(data).__name__}")

        tasks: list[Task] = []
        for idx, record in enumerate(data):
            try:
                tasks.append(Task.from_dict(record))
            except (TypeError, ValueError, InvalidStatusError) as e:
                raise ParseError(src, f"record #{idx}: {e}") from e

        self._tasks = tasks
        logger.info("Loaded %d tasks from %s", len(tasks), src)
        return list(tasks)

    def save(self, path: str | Path | None = None) -> None:
        """Write the whole collection as an indented JSON array."""
        dst = Path(path) if path is not None else self._path
        payload = json.dumps([t.to_dict() for t in self._tasks], ensure_ascii=False, indent=2)

        tmp = dst.with_name(dst.name + ".tmp")
        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.write("\n")
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, dst)
        except OSError as e:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove temp file %s", tmp, exc_info=True)
            raise WriteError(dst, str(e)) from e

        logger.info("Saved %d tasks to %s", len(self._tasks), dst)

    # ---- public API ----

    def count(self) -> int:
        return len(self._tasks)

    def _next_id(self) -> int:
        # max+1 rather than len+1: ids are never reused by a live task after a delete.
        return max((t.id for t in self._tasks), default=0) + 1

    def add(self, title: str, description: str = "") -> Task:
        """Append a pending task. Title and description are stored verbatim."""
        now = self._clock()
        task = Task(
            id=self._next_id(),
            title=title,
            description=description,
            status=TaskStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        self._tasks.append(task)
        logger.debug("Task added id=%s title=%r", task.id, task.title)
        return task

    def list(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)

    def update(self, task_id: int, new_status: str | TaskStatus) -> Task:
        task = self.get(task_id)
        status = TaskStatus.parse(new_status)

        now = self._clock()
        task.status = status
        # Keep updated_at >= created_at even if the wall clock stepped back.
        task.updated_at = max(now, task.created_at)
        logger.debug("Task %s -> %s", task_id, status.value)
        return task

    def delete(self, task_id: int) -> Task:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[idx]
                logger.debug("Task deleted id=%s", task_id)
                return task
        raise NotFoundError(task_id)
