# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from ultralist.core.state import AppState
from ultralist.store.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="ultralist-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        db_path=tmp_path / "ultralist.db",
        log_dir=tmp_path / "logs",
        lock_timeout=1.0,
        seed_defaults=True,
    )


@pytest.fixture()
def store(settings: SimpleNamespace):
    s = TaskStore(settings.db_path, lock_timeout=settings.lock_timeout)
    yield s
    s.close()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with a real SQLite store in tmp_path."""
    return AppState(settings=settings, store=store)
