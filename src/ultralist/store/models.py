# src/ultralist/store/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

# Folder/Project id meaning "assign me a new id".
NEW_ID = 0

SETTING_THEME = "theme"
SETTING_SEARCHBAR_MODE = "searchbar_mode"
SETTING_MOBILE_MODE = "mobile_mode"

DEFAULT_THEME = "light"
DEFAULT_SEARCHBAR_MODE = "search"


class Priority(StrEnum):
    """
    Known task priorities.

    The store does not validate priority; any string is persisted as-is.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(slots=True)
class Folder:
    id: int
    name: str
    color: str
    description: str | None = None


@dataclass(slots=True)
class Project:
    id: int
    name: str
    color: str
    description: str | None = None
    folder_id: int | None = None


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str
    due_date: str | None
    priority: str
    completed: bool
    project_id: int | None
    created_at: str
    updated_at: str


@dataclass(slots=True)
class Subtask:
    id: str
    task_id: str
    text: str
    completed: bool = False


@dataclass(slots=True)
class TaskWithDetails:
    """A task bundled with its full subtask list and tag list."""

    task: Task
    subtasks: list[Subtask] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
