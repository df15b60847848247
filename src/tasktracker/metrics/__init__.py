"""
Metrics subsystem.

Components:
- metrics_models.py: immutable snapshot types
- provider.py: psutil-backed MetricsProvider
- collector.py: builds one MetricsSnapshot from the five provider queries
- monitor.py: sleep-poll loop for continuous display
"""
