# tests/test_main.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from ultralist.cli import bootstrap, main as cli_main
from ultralist.config import Settings
from ultralist.logging_setup import setup_logging
from ultralist.store.task_store import TaskStore


def _settings(tmp_path: Path, **overrides) -> Settings:
    values = dict(
        app_name="ultralist-test",
        log_level="INFO",
        data_dir=tmp_path / "data",
        db_path=tmp_path / "data" / "ultralist.db",
        log_dir=tmp_path / "logs",
        lock_timeout=1.0,
        seed_defaults=True,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def app_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Settings:
    s = _settings(tmp_path)
    monkeypatch.setattr(cli_main, "get_settings", lambda: s)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: tmp_path / "x.log")
    return s


def test_create_initial_state_creates_dirs_and_seeds(tmp_path: Path) -> None:
    s = _settings(tmp_path)
    state = bootstrap.create_initial_state(settings=s)
    try:
        assert s.db_path.exists()
        assert len(state.store.list_folders()) == 2
    finally:
        state.close()


def test_create_initial_state_without_seed(tmp_path: Path) -> None:
    s = _settings(tmp_path, seed_defaults=False)
    state = bootstrap.create_initial_state(settings=s)
    try:
        assert state.store.list_folders() == []
        assert state.store.list_projects() == []
    finally:
        state.close()


def test_main_one_shot_adds_task(app_settings: Settings, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main.main(["Buy", "milk", "#shopping"]) == 0

    out = capsys.readouterr().out
    assert "Added:" in out and "Buy milk" in out

    store = TaskStore(app_settings.db_path)
    try:
        [d] = store.list_tasks_with_details()
        assert d.tags == ["shopping"]
    finally:
        store.close()


def test_main_one_shot_slash_command(app_settings: Settings, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main.main(["/theme"]) == 0
    assert "Theme: light" in capsys.readouterr().out


def test_main_reports_unopenable_store(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    # a directory where the database file should be
    bad_db = tmp_path / "data" / "ultralist.db"
    bad_db.mkdir(parents=True)
    s = _settings(tmp_path)
    monkeypatch.setattr(cli_main, "get_settings", lambda: s)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: tmp_path / "x.log")

    assert cli_main.main(["/list"]) == 1
    assert "Failed to initialize database" in capsys.readouterr().err


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs")
        logging.getLogger("ultralist.test").info("hello file")
        for h in root.handlers:
            h.flush()
        assert log_file.name == "ultralist.log"
        assert "hello file" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
