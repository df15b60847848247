"""
Core pieces shared by the CLI and the subsystems.

- ports.py: Protocols (MetricsProvider, SnapshotSource, Console)
- state.py: AppState, the one object passed to every menu handler
- presenter.py: text rendering of tasks and snapshots
"""
