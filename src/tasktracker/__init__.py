"""Terminal task list with host system metrics."""

__version__ = "0.1.0"
