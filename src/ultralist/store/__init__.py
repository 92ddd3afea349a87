"""
Storage subsystem.

Components:
- models.py: data structures (Task, Subtask, Project, Folder, TaskWithDetails, Priority)
- errors.py: StoreError and its subclasses
- task_store.py: SQLite-backed storage for tasks, subtasks, tags, projects, folders, settings
"""

from .errors import NotFoundError, StoreError, StoreLockError
from .models import NEW_ID, Folder, Priority, Project, Subtask, Task, TaskWithDetails
from .task_store import TaskStore

__all__ = [
    "NEW_ID",
    "Folder",
    "NotFoundError",
    "Priority",
    "Project",
    "StoreError",
    "StoreLockError",
    "Subtask",
    "Task",
    "TaskStore",
    "TaskWithDetails",
]
