# src/ultralist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task API and the console.

The API layer depends on this Protocol instead of TaskStore directly,
so an in-memory fake can stand in for SQLite in tests.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from ..store.models import Folder, Project, Subtask, Task, TaskWithDetails


class TaskRepo(Protocol):
    def close(self) -> None: ...

    # Tasks
    def count_tasks(self) -> int: ...
    def save_task(self, task: Task) -> None: ...
    def get_task(self, task_id: str) -> TaskWithDetails | None: ...
    def list_tasks_with_details(self) -> list[TaskWithDetails]: ...
    def delete_task(self, task_id: str) -> bool: ...
    def set_task_completion(
        self, task_id: str, completed: bool, *, now: str | None = None
    ) -> bool: ...
    def update_task_fields(
        self,
        task_id: str,
        changes: Mapping[str, Any],
        *,
        subtasks: Iterable[Subtask] | None = None,
        tags: Iterable[str] | None = None,
        now: str | None = None,
    ) -> TaskWithDetails | None: ...

    # Subtasks / tags
    def save_subtask(self, subtask: Subtask) -> None: ...
    def get_subtask(self, subtask_id: str) -> Subtask | None: ...
    def set_subtask_completion(self, subtask_id: str, completed: bool) -> Subtask | None: ...
    def list_subtasks(self, task_id: str) -> list[Subtask]: ...
    def replace_subtasks(self, task_id: str, subtasks: Iterable[Subtask]) -> None: ...
    def delete_subtask(self, subtask_id: str) -> bool: ...
    def replace_tags(self, task_id: str, tags: Iterable[str]) -> None: ...
    def list_tags(self, task_id: str) -> list[str]: ...
    def list_all_tags(self) -> list[str]: ...

    # Projects / folders
    def save_project(self, project: Project) -> int: ...
    def get_project(self, project_id: int) -> Project | None: ...
    def find_project_by_name(self, name: str) -> Project | None: ...
    def list_projects(self) -> list[Project]: ...
    def delete_project(self, project_id: int, *, now: str | None = None) -> bool: ...
    def save_folder(self, folder: Folder) -> int: ...
    def get_folder(self, folder_id: int) -> Folder | None: ...
    def list_folders(self) -> list[Folder]: ...
    def delete_folder(self, folder_id: int) -> bool: ...

    # Settings
    def get_setting(self, key: str) -> str | None: ...
    def set_setting(self, key: str, value: str) -> None: ...
    def get_theme(self) -> str: ...
    def set_theme(self, theme: str) -> None: ...
    def get_searchbar_mode(self) -> str: ...
    def set_searchbar_mode(self, mode: str) -> None: ...
    def get_mobile_mode(self) -> bool: ...
    def set_mobile_mode(self, enabled: bool) -> None: ...
