"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskView, MarkOutcome)
- task_store.py: bounded in-memory storage + mark-complete
- task_api.py: helpers that turn raw input lines into store operations
- errors.py: user-facing error taxonomy
"""
