# tests/test_task_api.py

from __future__ import annotations

from datetime import date

import pytest

from ultralist.core.state import AppState
from ultralist.store.errors import NotFoundError, StoreError
from ultralist.tasks import task_api

from .fakes import FailingTagsStore, InterleavingStore


def test_create_task_with_subtasks_and_tags(state: AppState) -> None:
    task_id = task_api.create_task(
        state,
        title="Plan party",
        description="Saturday",
        due_date="2026-11-01",
        priority="high",
        project_id=2,
        subtasks=["invite friends", "buy cake"],
        tags=["home", "fun", "home"],
    )

    d = state.store.get_task(task_id)
    assert d is not None
    assert d.task.title == "Plan party"
    assert d.task.project_id == 2
    assert d.task.completed is False
    assert d.task.created_at == d.task.updated_at
    assert [s.text for s in d.subtasks] == ["invite friends", "buy cake"]
    assert all(s.task_id == task_id and not s.completed for s in d.subtasks)
    assert len({s.id for s in d.subtasks}) == 2
    assert d.tags == ["home", "fun"]


def test_create_task_defaults_list_empty_collections(state: AppState) -> None:
    task_id = task_api.create_task(state, title="Bare")

    [d] = [x for x in state.store.list_tasks_with_details() if x.task.id == task_id]
    assert d.subtasks == []
    assert d.tags == []
    assert d.task.priority == "medium"
    assert d.task.created_at == d.task.updated_at


def test_create_task_unknown_project_fails(state: AppState) -> None:
    with pytest.raises(StoreError):
        task_api.create_task(state, title="x", project_id=12345)
    assert state.store.count_tasks() == 0


def test_create_task_removes_task_when_details_fail(state: AppState) -> None:
    failing = FailingTagsStore(state.store)  # type: ignore[arg-type]
    broken = AppState(settings=state.settings, store=failing)

    with pytest.raises(StoreError, match="save tags"):
        task_api.create_task(broken, title="half", subtasks=["a"], tags=["t"])

    assert failing.tag_calls == 1
    assert state.store.count_tasks() == 0
    assert state.store.list_tasks_with_details() == []


def test_update_task_partial_merge(state: AppState) -> None:
    task_id = task_api.create_task(
        state,
        title="Draft",
        description="keep me",
        due_date="2026-10-20",
        project_id=1,
        subtasks=["old sub"],
        tags=["a"],
    )
    before = state.store.get_task(task_id)
    assert before is not None

    after = task_api.update_task(state, task_id, title="Final", priority="low")

    assert after.task.title == "Final"
    assert after.task.priority == "low"
    assert after.task.description == "keep me"
    assert after.task.due_date == "2026-10-20"
    assert after.task.project_id == 1
    assert after.task.created_at == before.task.created_at
    assert after.task.updated_at >= before.task.updated_at
    assert [s.text for s in after.subtasks] == ["old sub"]
    assert after.tags == ["a"]


def test_update_task_replaces_subtasks_and_tags_and_clears_fields(state: AppState) -> None:
    task_id = task_api.create_task(
        state, title="T", due_date="2026-10-20", project_id=1, subtasks=["x"], tags=["a", "b"]
    )

    after = task_api.update_task(
        state,
        task_id,
        due_date=None,
        project_id=None,
        completed=True,
        subtasks=["one", "two"],
        tags=["b", "c"],
    )

    assert after.task.due_date is None
    assert after.task.project_id is None
    assert after.task.completed is True
    assert [s.text for s in after.subtasks] == ["one", "two"]
    assert after.tags == ["b", "c"]


def test_update_task_rejects_none_for_required_fields(state: AppState) -> None:
    task_id = task_api.create_task(state, title="T")
    with pytest.raises(ValueError):
        task_api.update_task(state, task_id, title=None)


def test_update_missing_task_is_not_found(state: AppState) -> None:
    with pytest.raises(NotFoundError) as exc:
        task_api.update_task(state, "nope", title="x")
    assert exc.value.kind == "Task"
    assert "not found" in str(exc.value)


def test_toggle_task_completion(state: AppState) -> None:
    task_id = task_api.create_task(state, title="T")

    task_api.toggle_task_completion(state, task_id, True)
    d = state.store.get_task(task_id)
    assert d is not None and d.task.completed is True

    task_api.toggle_task_completion(state, task_id, False)
    d = state.store.get_task(task_id)
    assert d is not None and d.task.completed is False

    with pytest.raises(NotFoundError):
        task_api.toggle_task_completion(state, "missing", True)


def test_delete_task_is_idempotent(state: AppState) -> None:
    task_id = task_api.create_task(state, title="T", subtasks=["s"], tags=["x"])

    assert task_api.delete_task(state, task_id) is True
    assert task_api.delete_task(state, task_id) is False
    assert state.store.list_subtasks(task_id) == []
    assert state.store.list_tags(task_id) == []


def test_subtask_add_and_toggle(state: AppState) -> None:
    task_id = task_api.create_task(state, title="T")
    before = state.store.get_task(task_id)
    assert before is not None

    sub = task_api.add_subtask(state, task_id, "  step one ")
    assert sub.text == "step one"

    toggled = task_api.toggle_subtask_completion(state, sub.id, True)
    assert toggled.completed is True
    stored = state.store.get_subtask(sub.id)
    assert stored is not None and stored.completed is True

    after = state.store.get_task(task_id)
    assert after is not None
    assert after.task.updated_at == before.task.updated_at

    with pytest.raises(NotFoundError):
        task_api.toggle_subtask_completion(state, "missing", True)
    with pytest.raises(NotFoundError):
        task_api.add_subtask(state, "missing", "x")
    with pytest.raises(ValueError):
        task_api.add_subtask(state, task_id, "   ")


def test_create_project_and_folder(state: AppState) -> None:
    folder_id = task_api.create_folder(state, name=" Hobbies ", color="bg-yellow-500")
    project_id = task_api.create_project(
        state, name="Guitar", color="bg-yellow-400", folder_id=folder_id
    )

    p = state.store.get_project(project_id)
    assert p is not None
    assert p.folder_id == folder_id
    f = state.store.get_folder(folder_id)
    assert f is not None and f.name == "Hobbies"

    with pytest.raises(ValueError):
        task_api.create_project(state, name=" ", color="c")
    with pytest.raises(StoreError):
        task_api.create_project(state, name="Orphan", color="c", folder_id=999)


def test_quick_add_resolves_known_project(state: AppState) -> None:
    task_id = task_api.quick_add_task(
        state, "Book dentist tomorrow #health for health project", today=date(2026, 10, 18)
    )

    d = state.store.get_task(task_id)
    assert d is not None
    assert d.task.title == "Book dentist"
    assert d.task.due_date == "2026-10-19"
    assert d.task.project_id == 3
    assert d.tags == ["health"]


def test_quick_add_unknown_project_and_time(state: AppState) -> None:
    task_id = task_api.quick_add_task(
        state, "Submit report urgent at 5pm for finance project", today=date(2026, 10, 18)
    )

    d = state.store.get_task(task_id)
    assert d is not None
    assert d.task.title == "Submit report"
    assert d.task.priority == "high"
    assert d.task.project_id is None
    assert d.task.description == "Due time: at 5pm"


def test_update_task_keeps_completion_set_meanwhile(state: AppState) -> None:
    task_id = task_api.create_task(state, title="x")
    racing = InterleavingStore(
        state.store,  # type: ignore[arg-type]
        between=lambda inner: inner.set_task_completion(task_id, True),
    )
    busy = AppState(settings=state.settings, store=racing)

    after = task_api.update_task(busy, task_id, title="y")

    assert after.task.title == "y"
    final = state.store.get_task(task_id)
    assert final is not None
    assert final.task.title == "y"
    assert final.task.completed is True


def test_toggle_subtask_keeps_text_edited_meanwhile(state: AppState) -> None:
    task_id = task_api.create_task(state, title="x", subtasks=["old text"])
    [sub] = state.store.list_subtasks(task_id)

    def rename(inner) -> None:
        current = inner.get_subtask(sub.id)
        current.text = "new text"
        inner.save_subtask(current)

    racing = InterleavingStore(state.store, rename)  # type: ignore[arg-type]
    busy = AppState(settings=state.settings, store=racing)

    task_api.toggle_subtask_completion(busy, sub.id, True)

    stored = state.store.get_subtask(sub.id)
    assert stored is not None
    assert stored.completed is True
    assert stored.text == "new text"
