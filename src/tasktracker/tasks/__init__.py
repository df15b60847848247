"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus) and JSON record mapping
- task_store.py: in-memory task list persisted to a single JSON file
"""
