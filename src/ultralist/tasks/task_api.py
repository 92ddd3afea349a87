# src/ultralist/tasks/task_api.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from datetime import date
from typing import Any

from ..core.state import AppState
from ..nlp.task_parser import parse_task_text
from ..store.errors import NotFoundError, StoreError
from ..store.models import NEW_ID, Folder, Priority, Project, Subtask, Task, TaskWithDetails
from ..store.task_store import now_rfc3339

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def new_id() -> str:
    return str(uuid.uuid4())


def _new_subtasks(task_id: str, texts: Iterable[str]) -> list[Subtask]:
    return [Subtask(id=new_id(), task_id=task_id, text=t, completed=False) for t in texts]


def create_task(
    state: AppState,
    *,
    title: str,
    description: str = "",
    due_date: str | None = None,
    priority: str = Priority.MEDIUM.value,
    project_id: int | None = None,
    subtasks: Iterable[str] = (),
    tags: Iterable[str] = (),
) -> str:
    """
    Create a task with its subtasks and tags; returns the new task id.

    created_at == updated_at on creation. If writing subtasks or tags fails,
    the half-written task is removed before the error propagates.
    """
    task_id = new_id()
    now = now_rfc3339()
    task = Task(
        id=task_id,
        title=title,
        description=description,
        due_date=due_date,
        priority=priority,
        completed=False,
        project_id=project_id,
        created_at=now,
        updated_at=now,
    )

    state.store.save_task(task)
    try:
        for subtask in _new_subtasks(task_id, subtasks):
            state.store.save_subtask(subtask)
        state.store.replace_tags(task_id, tags)
    except StoreError:
        logger.exception("create_task: details failed, removing task_id=%s", task_id)
        state.store.delete_task(task_id)
        raise

    logger.info("Task created id=%s priority=%s due=%s", task_id, priority, due_date)
    return task_id


def update_task(
    state: AppState,
    task_id: str,
    *,
    title: str = _UNSET,
    description: str = _UNSET,
    due_date: str | None = _UNSET,
    priority: str = _UNSET,
    project_id: int | None = _UNSET,
    completed: bool = _UNSET,
    subtasks: Iterable[str] | None = None,
    tags: Iterable[str] | None = None,
) -> TaskWithDetails:
    """
    Partial update of a task.

    - Omitted fields keep their value; due_date/project_id accept None to clear.
    - updated_at is refreshed, created_at is kept.
    - subtasks (texts) replace the whole subtask list when given.
    - tags replace the whole tag set when given.

    The merge runs as one store transaction, so fields that are not passed
    (e.g. a completion toggled meanwhile) are never overwritten.

    Raises NotFoundError if the task does not exist.
    """
    fields = {
        "title": title,
        "description": description,
        "due_date": due_date,
        "priority": priority,
        "project_id": project_id,
        "completed": completed,
    }
    changes = {name: value for name, value in fields.items() if value is not _UNSET}
    for name in ("title", "description", "priority", "completed"):
        if name in changes and changes[name] is None:
            raise ValueError(f"{name} cannot be None")

    updated = state.store.update_task_fields(
        task_id,
        changes,
        subtasks=None if subtasks is None else _new_subtasks(task_id, subtasks),
        tags=tags,
    )
    if updated is None:
        raise NotFoundError("Task", task_id)
    logger.debug("Task updated id=%s", task_id)
    return updated


def toggle_task_completion(state: AppState, task_id: str, completed: bool) -> None:
    """Set the completed flag; raises NotFoundError if no row was affected."""
    if not state.store.set_task_completion(task_id, completed):
        raise NotFoundError("Task", task_id)
    logger.debug("Task completion id=%s completed=%s", task_id, completed)


def delete_task(state: AppState, task_id: str) -> bool:
    """Idempotent delete; returns True if the task existed."""
    deleted = state.store.delete_task(task_id)
    if deleted:
        logger.info("Task deleted id=%s", task_id)
    return deleted


def toggle_subtask_completion(state: AppState, subtask_id: str, completed: bool) -> Subtask:
    subtask = state.store.set_subtask_completion(subtask_id, completed)
    if subtask is None:
        raise NotFoundError("Subtask", subtask_id)
    return subtask


def create_project(
    state: AppState,
    *,
    name: str,
    color: str,
    description: str | None = None,
    folder_id: int | None = None,
) -> int:
    if not name or not name.strip():
        raise ValueError("name is required")
    project_id = state.store.save_project(
        Project(
            id=NEW_ID,
            name=name.strip(),
            color=color,
            description=description,
            folder_id=folder_id,
        )
    )
    logger.info("Project created id=%s name=%s", project_id, name)
    return project_id


def create_folder(
    state: AppState,
    *,
    name: str,
    color: str,
    description: str | None = None,
) -> int:
    if not name or not name.strip():
        raise ValueError("name is required")
    folder_id = state.store.save_folder(
        Folder(id=NEW_ID, name=name.strip(), color=color, description=description)
    )
    logger.info("Folder created id=%s name=%s", folder_id, name)
    return folder_id


def quick_add_task(state: AppState, text: str, *, today: date | None = None) -> str:
    """
    Parse free text and create the task.

    A project hint that matches no existing project (by name, case-insensitive)
    leaves the task without a project.
    """
    draft = parse_task_text(text, today=today)

    project_id: int | None = None
    if draft.project_name:
        project = state.store.find_project_by_name(draft.project_name)
        if project is not None:
            project_id = project.id
        else:
            logger.debug("quick_add: no project named %r", draft.project_name)

    return create_task(
        state,
        title=draft.title,
        description=draft.description,
        due_date=draft.due_date,
        priority=draft.priority,
        project_id=project_id,
        tags=draft.tags,
    )


def add_subtask(state: AppState, task_id: str, text: str) -> Subtask:
    """Append one subtask to an existing task; the task's updated_at is not touched."""
    if not text or not text.strip():
        raise ValueError("subtask text is required")
    if state.store.get_task(task_id) is None:
        raise NotFoundError("Task", task_id)
    subtask = Subtask(id=new_id(), task_id=task_id, text=text.strip(), completed=False)
    state.store.save_subtask(subtask)
    return subtask
