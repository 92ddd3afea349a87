# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable, Iterable

from ultralist.store.errors import StoreError
from ultralist.store.task_store import TaskStore


class FailingTagsStore:
    """
    Delegates to a real TaskStore but fails every replace_tags call.

    Used to check that create_task does not leave a half-written task behind.
    """

    def __init__(self, inner: TaskStore) -> None:
        self.inner = inner
        self.tag_calls = 0

    def replace_tags(self, task_id: str, tags: Iterable[str]) -> None:
        self.tag_calls += 1
        raise StoreError("Failed to save tags: disk I/O error")

    def __getattr__(self, name: str):
        return getattr(self.inner, name)


class InterleavingStore:
    """
    Delegates to a real TaskStore and runs `between` right after the first
    delegated call returns.

    Simulates another caller writing while an API operation is in progress.
    """

    def __init__(self, inner: TaskStore, between: Callable[[TaskStore], None]) -> None:
        self.inner = inner
        self.between = between
        self.calls: list[str] = []

    def __getattr__(self, name: str):
        target = getattr(self.inner, name)
        if not callable(target):
            return target

        def wrapper(*args, **kwargs):
            result = target(*args, **kwargs)
            self.calls.append(name)
            if len(self.calls) == 1:
                self.between(self.inner)
            return result

        return wrapper
