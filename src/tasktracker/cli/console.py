# src/tasktracker/cli/console.py

from __future__ import annotations

import sys

CLEAR_SEQUENCE = "\033[H\033[2J"


class TerminalConsole:
    """Console port over stdin/stdout."""

    def __init__(self, *, clear_screen: bool = True) -> None:
        self._clear_screen = clear_screen

    def ask(self, prompt: str) -> str:
        return input(prompt)

    def say(self, text: str) -> None:
        print(text, flush=True)

    def clear(self) -> None:
        # Only clear real terminals; piped output keeps every frame.
        if self._clear_screen and sys.stdout.isatty():
            sys.stdout.write(CLEAR_SEQUENCE)
            sys.stdout.flush()
