# src/tasktracker/cli/menus.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.ports import Console
from ..core.presenter import render_snapshot, render_task_list
from ..core.state import AppState
from ..errors import CollectionError, InvalidStatusError, NotFoundError
from ..metrics.monitor import run_monitor

MenuHandler = Callable[[AppState, Console], str | None]

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class MenuEntry:
    key: str
    label: str
    handler: MenuHandler | None
    leave: bool


class Menu:
    """Numbered menu; entries are numbered in registration order (1, 2, ...)."""

    def __init__(self, title: str) -> None:
        self.title = title
        self._entries: dict[str, MenuEntry] = {}

    def register(
        self,
        label: str,
        handler: MenuHandler | None = None,
        *,
        leave: bool = False,
    ) -> str:
        key = str(len(self._entries) + 1)
        self._entries[key] = MenuEntry(key=key, label=label, handler=handler, leave=leave)
        return key

    def render(self) -> str:
        lines = [f"\n=== {self.title} ==="]
        for entry in self._entries.values():
            lines.append(f"{entry.key}. {entry.label}")
        return "\n".join(lines)

    def prompt(self) -> str:
        return f"Choose option (1-{len(self._entries)}): "

    def handle(self, state: AppState, console: Console, choice: str) -> bool:
        """
        Run the entry for `choice`.
        Returns True when the menu should be left.
        """
        entry = self._entries.get(choice.strip())
        if entry is None:
            console.say("Invalid choice")
            return False

        if entry.handler is not None:
            try:
                reply = entry.handler(state, console)
            except (EOFError, KeyboardInterrupt):
                raise
            except Exception:
                logger.exception("Menu handler crashed (%s / %s).", self.title, entry.label)
                reply = "Internal error while handling this option."
            if reply is not None:
                console.say(reply)

        return entry.leave


def run_menu(menu: Menu, state: AppState, console: Console) -> None:
    """Loop over one menu until an entry with leave=True is chosen."""
    while True:
        console.say(menu.render())
        choice = console.ask(menu.prompt())
        if menu.handle(state, console, choice):
            return


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


# ---- task handlers ----


def task_add(state: AppState, console: Console) -> str:
    title = console.ask("Task title: ")
    if not title.strip():
        return "Task not added: title is required"
    description = console.ask("Description: ")
    task = state.task_store.add(title, description)
    logger.info("Task %s added via menu", task.id)
    return "Task added successfully!"


def task_list(state: AppState, console: Console) -> str:
    return render_task_list(state.task_store.list())


def task_update(state: AppState, console: Console) -> str:
    task_id = _parse_int(console.ask("Enter task ID to update: "))
    if task_id is None:
        return "Invalid task ID"

    # Check existence first so a missing id never prompts for a status.
    try:
        state.task_store.get(task_id)
    except NotFoundError:
        return "Task not found"

    status = console.ask("New status (pending/in-progress/completed): ").strip()
    try:
        state.task_store.update(task_id, status)
    except InvalidStatusError:
        return "Invalid status"
    return "Task updated successfully!"


def task_delete(state: AppState, console: Console) -> str:
    task_id = _parse_int(console.ask("Enter task ID to delete: "))
    if task_id is None:
        return "Invalid task ID"
    try:
        state.task_store.delete(task_id)
    except NotFoundError:
        return "Task not found"
    return "Task deleted!"


# ---- metrics handlers ----


def _bar_width(state: AppState) -> int:
    return int(getattr(state.settings, "bar_width", 20))


def metrics_view(state: AppState, console: Console) -> str:
    try:
        snapshot = state.collector.collect()
    except CollectionError as e:
        return f"Error getting metrics: {e}"
    return render_snapshot(snapshot, bar_width=_bar_width(state))


def metrics_monitor(state: AppState, console: Console) -> str:
    duration = _parse_int(console.ask("Enter monitoring duration in seconds (0 for infinite): "))
    if duration is None or duration < 0:
        return "Invalid duration"

    bar_width = _bar_width(state)

    def show(snapshot) -> None:
        console.clear()
        console.say(render_snapshot(snapshot, bar_width=bar_width))

    def show_error(e: CollectionError) -> None:
        console.say(f"Error getting metrics: {e}")

    try:
        frames = run_monitor(
            state.collector,
            on_snapshot=show,
            on_error=show_error,
            interval_seconds=float(getattr(state.settings, "monitor_interval", 2.0)),
            duration_seconds=duration,
        )
    except KeyboardInterrupt:
        logger.info("Monitoring interrupted by user.")
        return "\nMonitoring stopped."
    return f"Monitoring finished ({frames} updates)."


TASK_MENU = Menu("Task Management")
TASK_MENU.register("Add Task", task_add)
TASK_MENU.register("List Tasks", task_list)
TASK_MENU.register("Update Task", task_update)
TASK_MENU.register("Delete Task", task_delete)
TASK_MENU.register("Back to Main Menu", leave=True)

METRICS_MENU = Menu("System Metrics")
METRICS_MENU.register("View Current Metrics", metrics_view)
METRICS_MENU.register("Monitor Continuously", metrics_monitor)
METRICS_MENU.register("Back to Main Menu", leave=True)

MAIN_MENU = Menu("Main Menu")
MAIN_MENU.register("Task Management", lambda state, console: run_menu(TASK_MENU, state, console))
MAIN_MENU.register("System Metrics", lambda state, console: run_menu(METRICS_MENU, state, console))
MAIN_MENU.register("Exit", leave=True)
