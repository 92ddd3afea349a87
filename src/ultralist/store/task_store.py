# src/ultralist/store/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import threading
from collections.abc import Iterable, Iterator, Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .errors import StoreError, StoreLockError
from .models import (
    DEFAULT_SEARCHBAR_MODE,
    DEFAULT_THEME,
    NEW_ID,
    SETTING_MOBILE_MODE,
    SETTING_SEARCHBAR_MODE,
    SETTING_THEME,
    Folder,
    Project,
    Subtask,
    Task,
    TaskWithDetails,
)

logger = logging.getLogger(__name__)

_SEED_FOLDERS: tuple[tuple[int, str, str, str], ...] = (
    (1, "Work & Career", "bg-blue-600", "Professional projects and development"),
    (2, "Life & Wellness", "bg-green-600", "Personal growth and health"),
)

_SEED_PROJECTS: tuple[tuple[int, str, str, str, int], ...] = (
    (1, "Work", "bg-blue-500", "Work-related tasks", 1),
    (2, "Personal", "bg-green-500", "Personal tasks and errands", 2),
    (3, "Health", "bg-purple-500", "Health and fitness goals", 2),
)

_SEED_SETTINGS: tuple[tuple[str, str], ...] = (
    (SETTING_THEME, DEFAULT_THEME),
    (SETTING_SEARCHBAR_MODE, DEFAULT_SEARCHBAR_MODE),
)

_TASK_COLUMNS = (
    "id, title, description, due_date, priority, completed, project_id, created_at, updated_at"
)

_UPDATABLE_TASK_COLUMNS = frozenset(
    {"title", "description", "due_date", "priority", "completed", "project_id"}
)


def now_rfc3339() -> str:
    """
    Current UTC instant as RFC3339 text.

    Fixed microsecond precision and a fixed offset keep string order equal to
    chronological order.
    """
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


class TaskStore:
    """
    SQLite store for tasks, subtasks, tags, projects, folders and settings.

    Consistency:
    - foreign keys are enforced (PRAGMA foreign_keys=ON)
    - subtasks and tags are deleted together with their task
    - deleting a folder/project clears the reference on dependent rows
    - multi-statement writes run in a single transaction

    Thread-safety:
    - one connection, guarded by one lock
    - lock acquisition is bounded by lock_timeout and fails with StoreLockError
    """

    def __init__(
        self,
        db_path: str | Path = "ultralist.db",
        *,
        lock_timeout: float = 5.0,
        seed: bool = True,
    ) -> None:
        self._db_path = Path(db_path)
        self._lock = threading.Lock()
        self._lock_timeout = float(lock_timeout)
        self._seed = bool(seed)

        if str(db_path) != ":memory:":
            self._db_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            conn = sqlite3.connect(str(db_path), timeout=30.0, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            self._configure_conn(conn)
        except sqlite3.Error as e:
            raise StoreError(f"Failed to open database {self._db_path}: {e}") from e
        self._conn: sqlite3.Connection | None = conn

        self.initialize()
        try:
            total = self.count_tasks()
        except StoreError:
            total = -1
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        with self._acquire():
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
        logger.debug("TaskStore closed db=%s", self._db_path)

    # ---- low-level helpers ----

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        conn.execute("PRAGMA foreign_keys=ON")
        with contextlib.suppress(Exception):
            conn.execute("PRAGMA journal_mode=WAL")

    @contextlib.contextmanager
    def _acquire(self) -> Iterator[None]:
        if self._lock_timeout > 0:
            acquired = self._lock.acquire(timeout=self._lock_timeout)
        else:
            acquired = self._lock.acquire(blocking=False)
        if not acquired:
            raise StoreLockError(
                f"Database lock error: could not acquire store lock within {self._lock_timeout:g}s"
            )
        try:
            yield
        finally:
            self._lock.release()

    @contextlib.contextmanager
    def _locked(self, action: str) -> Iterator[sqlite3.Connection]:
        """
        Run one operation under the store lock.

        Engine errors are re-raised as StoreError("Failed to <action>: ...").
        """
        with self._acquire():
            if self._conn is None:
                raise StoreError("store is closed")
            try:
                yield self._conn
            except sqlite3.Error as e:
                logger.warning("TaskStore: failed to %s: %s", action, e)
                raise StoreError(f"Failed to {action}: {e}") from e

    def _ensure_schema(self, conn: sqlite3.Connection) -> None:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS folders (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                color TEXT NOT NULL,
                description TEXT
            );

            CREATE TABLE IF NOT EXISTS projects (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                color TEXT NOT NULL,
                description TEXT,
                folder_id INTEGER REFERENCES folders (id) ON DELETE SET NULL
            );

            CREATE TABLE IF NOT EXISTS tasks (
                id TEXT PRIMARY KEY,
                title TEXT NOT NULL,
                description TEXT,
                due_date TEXT,
                priority TEXT NOT NULL DEFAULT 'medium',
                completed INTEGER NOT NULL DEFAULT 0,
                project_id INTEGER REFERENCES projects (id) ON DELETE SET NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS subtasks (
                id TEXT PRIMARY KEY,
                task_id TEXT NOT NULL REFERENCES tasks (id) ON DELETE CASCADE,
                text TEXT NOT NULL,
                completed INTEGER NOT NULL DEFAULT 0
            );

            CREATE TABLE IF NOT EXISTS tags (
                task_id TEXT NOT NULL REFERENCES tasks (id) ON DELETE CASCADE,
                tag TEXT NOT NULL,
                PRIMARY KEY (task_id, tag)
            );

            CREATE TABLE IF NOT EXISTS settings (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );

            CREATE INDEX IF NOT EXISTS idx_tasks_project_id ON tasks(project_id);
            CREATE INDEX IF NOT EXISTS idx_tasks_completed ON tasks(completed);
            CREATE INDEX IF NOT EXISTS idx_tasks_due_date ON tasks(due_date);
            CREATE INDEX IF NOT EXISTS idx_tasks_created_at ON tasks(created_at);
            CREATE INDEX IF NOT EXISTS idx_subtasks_task_id ON subtasks(task_id);
            CREATE INDEX IF NOT EXISTS idx_tags_task_id ON tags(task_id);
            CREATE INDEX IF NOT EXISTS idx_projects_folder_id ON projects(folder_id);
            """
        )

    def _seed_defaults(self, conn: sqlite3.Connection) -> None:
        # Starter folders/projects only go into a database with neither;
        # deleted seed rows are not brought back.
        with conn:
            (n_folders,) = conn.execute("SELECT COUNT(*) FROM folders").fetchone()
            (n_projects,) = conn.execute("SELECT COUNT(*) FROM projects").fetchone()
            if int(n_folders) == 0 and int(n_projects) == 0:
                conn.executemany(
                    "INSERT INTO folders (id, name, color, description) VALUES (?, ?, ?, ?)",
                    _SEED_FOLDERS,
                )
                conn.executemany(
                    """
                    INSERT INTO projects (id, name, color, description, folder_id)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    _SEED_PROJECTS,
                )
                logger.info(
                    "TaskStore seeded %d folders, %d projects",
                    len(_SEED_FOLDERS),
                    len(_SEED_PROJECTS),
                )
            conn.executemany(
                "INSERT OR IGNORE INTO settings (key, value) VALUES (?, ?)",
                _SEED_SETTINGS,
            )

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=str(row["id"]),
            title=str(row["title"]),
            description=str(row["description"] or ""),
            due_date=row["due_date"],
            priority=str(row["priority"]),
            completed=bool(row["completed"]),
            project_id=int(row["project_id"]) if row["project_id"] is not None else None,
            created_at=str(row["created_at"]),
            updated_at=str(row["updated_at"]),
        )

    @staticmethod
    def _row_to_subtask(row: sqlite3.Row) -> Subtask:
        return Subtask(
            id=str(row["id"]),
            task_id=str(row["task_id"]),
            text=str(row["text"]),
            completed=bool(row["completed"]),
        )

    @staticmethod
    def _row_to_project(row: sqlite3.Row) -> Project:
        return Project(
            id=int(row["id"]),
            name=str(row["name"]),
            color=str(row["color"]),
            description=row["description"],
            folder_id=int(row["folder_id"]) if row["folder_id"] is not None else None,
        )

    @staticmethod
    def _row_to_folder(row: sqlite3.Row) -> Folder:
        return Folder(
            id=int(row["id"]),
            name=str(row["name"]),
            color=str(row["color"]),
            description=row["description"],
        )

    def _subtasks_for(self, conn: sqlite3.Connection, task_id: str) -> list[Subtask]:
        cur = conn.execute(
            "SELECT id, task_id, text, completed FROM subtasks WHERE task_id = ? ORDER BY rowid",
            (task_id,),
        )
        return [self._row_to_subtask(r) for r in cur.fetchall()]

    @staticmethod
    def _tags_for(conn: sqlite3.Connection, task_id: str) -> list[str]:
        cur = conn.execute("SELECT tag FROM tags WHERE task_id = ? ORDER BY rowid", (task_id,))
        return [str(r["tag"]) for r in cur.fetchall()]

    # ---- initialization ----

    def initialize(self) -> None:
        """
        Create tables if missing and seed defaults.

        Safe to call repeatedly: folders/projects are seeded only when both tables
        are empty, default settings are inserted only when absent.
        """
        with self._locked("initialize database") as conn:
            self._ensure_schema(conn)
            if self._seed:
                self._seed_defaults(conn)

    # ---- tasks ----

    def count_tasks(self) -> int:
        with self._locked("count tasks") as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)

    def save_task(self, task: Task) -> None:
        """Insert or update a task by id, writing exactly the given fields."""
        with self._locked("save task") as conn, conn:
            conn.execute(
                f"""
                INSERT INTO tasks ({_TASK_COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    title = excluded.title,
                    description = excluded.description,
                    due_date = excluded.due_date,
                    priority = excluded.priority,
                    completed = excluded.completed,
                    project_id = excluded.project_id,
                    created_at = excluded.created_at,
                    updated_at = excluded.updated_at
                """,
                (
                    task.id,
                    task.title,
                    task.description,
                    task.due_date,
                    task.priority,
                    int(bool(task.completed)),
                    task.project_id,
                    task.created_at,
                    task.updated_at,
                ),
            )
        logger.debug("Task saved id=%s priority=%s due=%s", task.id, task.priority, task.due_date)

    def get_task(self, task_id: str) -> TaskWithDetails | None:
        with self._locked("get task") as conn:
            row = conn.execute(
                f"SELECT {_TASK_COLUMNS} FROM tasks WHERE id = ?", (task_id,)
            ).fetchone()
            if row is None:
                return None
            return TaskWithDetails(
                task=self._row_to_task(row),
                subtasks=self._subtasks_for(conn, task_id),
                tags=self._tags_for(conn, task_id),
            )

    def list_tasks_with_details(self) -> list[TaskWithDetails]:
        """
        All tasks, newest first, each with its subtasks and tags.

        One lock acquisition covers the whole aggregate so the result is a
        consistent snapshot.
        """
        with self._locked("get tasks") as conn:
            rows = conn.execute(
                f"SELECT {_TASK_COLUMNS} FROM tasks ORDER BY created_at DESC, rowid DESC"
            ).fetchall()
            out: list[TaskWithDetails] = []
            for row in rows:
                task = self._row_to_task(row)
                out.append(
                    TaskWithDetails(
                        task=task,
                        subtasks=self._subtasks_for(conn, task.id),
                        tags=self._tags_for(conn, task.id),
                    )
                )
            return out

    def delete_task(self, task_id: str) -> bool:
        """
        Delete a task with its subtasks and tags.

        Returns True if a task row was removed; a missing id is a no-op.
        """
        with self._locked("delete task") as conn, conn:
            conn.execute("DELETE FROM subtasks WHERE task_id = ?", (task_id,))
            conn.execute("DELETE FROM tags WHERE task_id = ?", (task_id,))
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
            deleted = cur.rowcount == 1
        logger.debug("Task delete id=%s deleted=%s", task_id, deleted)
        return deleted

    def set_task_completion(
        self, task_id: str, completed: bool, *, now: str | None = None
    ) -> bool:
        """
        Update only the completed flag and updated_at.

        Returns True if the task exists (one row affected).
        """
        if now is None:
            now = now_rfc3339()
        with self._locked("update task completion") as conn, conn:
            cur = conn.execute(
                "UPDATE tasks SET completed = ?, updated_at = ? WHERE id = ?",
                (int(bool(completed)), now, task_id),
            )
            return cur.rowcount == 1

    def update_task_fields(
        self,
        task_id: str,
        changes: Mapping[str, Any],
        *,
        subtasks: Iterable[Subtask] | None = None,
        tags: Iterable[str] | None = None,
        now: str | None = None,
    ) -> TaskWithDetails | None:
        """
        Merge `changes` into a task and return the result, all in one transaction.

        Only the named columns are written (plus updated_at), so a concurrent
        change to another column is kept. `subtasks` / `tags`, when given,
        replace the full list. Returns None if the task does not exist.
        """
        unknown = set(changes) - _UPDATABLE_TASK_COLUMNS
        if unknown:
            raise ValueError(f"unknown task fields: {', '.join(sorted(unknown))}")
        new_subtasks = None if subtasks is None else list(subtasks)
        for s in new_subtasks or ():
            if s.task_id != task_id:
                raise ValueError(f"subtask {s.id} belongs to task {s.task_id}, not {task_id}")
        new_tags = None if tags is None else list(dict.fromkeys(tags))
        if now is None:
            now = now_rfc3339()

        values = {
            k: int(bool(v)) if k == "completed" else v for k, v in changes.items()
        }
        values["updated_at"] = now
        assignments = ", ".join(f"{k} = ?" for k in values)

        with self._locked("update task") as conn, conn:
            cur = conn.execute(
                f"UPDATE tasks SET {assignments} WHERE id = ?",
                (*values.values(), task_id),
            )
            if cur.rowcount != 1:
                return None
            if new_subtasks is not None:
                conn.execute("DELETE FROM subtasks WHERE task_id = ?", (task_id,))
                conn.executemany(
                    "INSERT INTO subtasks (id, task_id, text, completed) VALUES (?, ?, ?, ?)",
                    [(s.id, s.task_id, s.text, int(bool(s.completed))) for s in new_subtasks],
                )
            if new_tags is not None:
                conn.execute("DELETE FROM tags WHERE task_id = ?", (task_id,))
                conn.executemany(
                    "INSERT INTO tags (task_id, tag) VALUES (?, ?)",
                    [(task_id, t) for t in new_tags],
                )
            row = conn.execute(
                f"SELECT {_TASK_COLUMNS} FROM tasks WHERE id = ?", (task_id,)
            ).fetchone()
            details = TaskWithDetails(
                task=self._row_to_task(row),
                subtasks=self._subtasks_for(conn, task_id),
                tags=self._tags_for(conn, task_id),
            )
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(changes))
        return details

    # ---- subtasks ----

    def save_subtask(self, subtask: Subtask) -> None:
        with self._locked("save subtask") as conn, conn:
            conn.execute(
                """
                INSERT INTO subtasks (id, task_id, text, completed)
                VALUES (?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    task_id = excluded.task_id,
                    text = excluded.text,
                    completed = excluded.completed
                """,
                (subtask.id, subtask.task_id, subtask.text, int(bool(subtask.completed))),
            )

    def get_subtask(self, subtask_id: str) -> Subtask | None:
        with self._locked("get subtask") as conn:
            row = conn.execute(
                "SELECT id, task_id, text, completed FROM subtasks WHERE id = ?", (subtask_id,)
            ).fetchone()
            return self._row_to_subtask(row) if row else None

    def set_subtask_completion(self, subtask_id: str, completed: bool) -> Subtask | None:
        """Update only the completed flag; returns the updated subtask, or None if missing."""
        with self._locked("update subtask completion") as conn, conn:
            cur = conn.execute(
                "UPDATE subtasks SET completed = ? WHERE id = ?",
                (int(bool(completed)), subtask_id),
            )
            if cur.rowcount != 1:
                return None
            row = conn.execute(
                "SELECT id, task_id, text, completed FROM subtasks WHERE id = ?", (subtask_id,)
            ).fetchone()
            return self._row_to_subtask(row)

    def list_subtasks(self, task_id: str) -> list[Subtask]:
        with self._locked("get subtasks") as conn:
            return self._subtasks_for(conn, task_id)

    def replace_subtasks(self, task_id: str, subtasks: Iterable[Subtask]) -> None:
        """Replace the full subtask list of a task in one transaction."""
        items = list(subtasks)
        for s in items:
            if s.task_id != task_id:
                raise ValueError(f"subtask {s.id} belongs to task {s.task_id}, not {task_id}")
        with self._locked("replace subtasks") as conn, conn:
            conn.execute("DELETE FROM subtasks WHERE task_id = ?", (task_id,))
            conn.executemany(
                "INSERT INTO subtasks (id, task_id, text, completed) VALUES (?, ?, ?, ?)",
                [(s.id, s.task_id, s.text, int(bool(s.completed))) for s in items],
            )

    def delete_subtask(self, subtask_id: str) -> bool:
        with self._locked("delete subtask") as conn, conn:
            cur = conn.execute("DELETE FROM subtasks WHERE id = ?", (subtask_id,))
            return cur.rowcount == 1

    # ---- tags ----

    def replace_tags(self, task_id: str, tags: Iterable[str]) -> None:
        """
        Replace the full tag set of a task.

        Duplicate tags collapse into one membership; order of first appearance is kept.
        """
        unique = list(dict.fromkeys(tags))
        with self._locked("save tags") as conn, conn:
            conn.execute("DELETE FROM tags WHERE task_id = ?", (task_id,))
            conn.executemany(
                "INSERT OR IGNORE INTO tags (task_id, tag) VALUES (?, ?)",
                [(task_id, t) for t in unique],
            )
        logger.debug("Tags replaced task_id=%s n=%d", task_id, len(unique))

    def list_tags(self, task_id: str) -> list[str]:
        with self._locked("get tags") as conn:
            return self._tags_for(conn, task_id)

    def list_all_tags(self) -> list[str]:
        with self._locked("get all tags") as conn:
            cur = conn.execute("SELECT DISTINCT tag FROM tags ORDER BY tag")
            return [str(r["tag"]) for r in cur.fetchall()]

    # ---- projects ----

    def save_project(self, project: Project) -> int:
        """
        Insert (id == NEW_ID) or upsert by id.

        Returns the id of the stored row.
        """
        with self._locked("save project") as conn, conn:
            if project.id == NEW_ID:
                cur = conn.execute(
                    "INSERT INTO projects (name, color, description, folder_id) VALUES (?, ?, ?, ?)",
                    (project.name, project.color, project.description, project.folder_id),
                )
                rowid = cur.lastrowid
                if rowid is None:
                    raise StoreError("SQLite did not return lastrowid for projects insert")
                project_id = int(rowid)
            else:
                conn.execute(
                    """
                    INSERT INTO projects (id, name, color, description, folder_id)
                    VALUES (?, ?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        name = excluded.name,
                        color = excluded.color,
                        description = excluded.description,
                        folder_id = excluded.folder_id
                    """,
                    (
                        int(project.id),
                        project.name,
                        project.color,
                        project.description,
                        project.folder_id,
                    ),
                )
                project_id = int(project.id)
        logger.debug("Project saved id=%s name=%s", project_id, project.name)
        return project_id

    def get_project(self, project_id: int) -> Project | None:
        with self._locked("get project") as conn:
            row = conn.execute(
                "SELECT id, name, color, description, folder_id FROM projects WHERE id = ?",
                (int(project_id),),
            ).fetchone()
            return self._row_to_project(row) if row else None

    def find_project_by_name(self, name: str) -> Project | None:
        """Case-insensitive exact name lookup; lowest id wins on duplicates."""
        name = (name or "").strip()
        if not name:
            return None
        with self._locked("find project") as conn:
            row = conn.execute(
                """
                SELECT id, name, color, description, folder_id
                FROM projects
                WHERE lower(name) = lower(?)
                ORDER BY id
                LIMIT 1
                """,
                (name,),
            ).fetchone()
            return self._row_to_project(row) if row else None

    def list_projects(self) -> list[Project]:
        with self._locked("get projects") as conn:
            cur = conn.execute(
                "SELECT id, name, color, description, folder_id FROM projects ORDER BY name, id"
            )
            return [self._row_to_project(r) for r in cur.fetchall()]

    def delete_project(self, project_id: int, *, now: str | None = None) -> bool:
        """
        Delete a project; tasks that referenced it keep living with project_id = NULL.

        Returns True if a project row was removed.
        """
        if now is None:
            now = now_rfc3339()
        with self._locked("delete project") as conn, conn:
            conn.execute(
                "UPDATE tasks SET project_id = NULL, updated_at = ? WHERE project_id = ?",
                (now, int(project_id)),
            )
            cur = conn.execute("DELETE FROM projects WHERE id = ?", (int(project_id),))
            return cur.rowcount == 1

    # ---- folders ----

    def save_folder(self, folder: Folder) -> int:
        with self._locked("save folder") as conn, conn:
            if folder.id == NEW_ID:
                cur = conn.execute(
                    "INSERT INTO folders (name, color, description) VALUES (?, ?, ?)",
                    (folder.name, folder.color, folder.description),
                )
                rowid = cur.lastrowid
                if rowid is None:
                    raise StoreError("SQLite did not return lastrowid for folders insert")
                folder_id = int(rowid)
            else:
                conn.execute(
                    """
                    INSERT INTO folders (id, name, color, description)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        name = excluded.name,
                        color = excluded.color,
                        description = excluded.description
                    """,
                    (int(folder.id), folder.name, folder.color, folder.description),
                )
                folder_id = int(folder.id)
        logger.debug("Folder saved id=%s name=%s", folder_id, folder.name)
        return folder_id

    def get_folder(self, folder_id: int) -> Folder | None:
        with self._locked("get folder") as conn:
            row = conn.execute(
                "SELECT id, name, color, description FROM folders WHERE id = ?",
                (int(folder_id),),
            ).fetchone()
            return self._row_to_folder(row) if row else None

    def list_folders(self) -> list[Folder]:
        with self._locked("get folders") as conn:
            cur = conn.execute("SELECT id, name, color, description FROM folders ORDER BY name, id")
            return [self._row_to_folder(r) for r in cur.fetchall()]

    def delete_folder(self, folder_id: int) -> bool:
        """Delete a folder; its projects stay with folder_id = NULL."""
        with self._locked("delete folder") as conn, conn:
            conn.execute(
                "UPDATE projects SET folder_id = NULL WHERE folder_id = ?", (int(folder_id),)
            )
            cur = conn.execute("DELETE FROM folders WHERE id = ?", (int(folder_id),))
            return cur.rowcount == 1

    # ---- settings ----

    def get_setting(self, key: str) -> str | None:
        with self._locked("get setting") as conn:
            row = conn.execute("SELECT value FROM settings WHERE key = ?", (key,)).fetchone()
            return str(row["value"]) if row else None

    def set_setting(self, key: str, value: str) -> None:
        with self._locked("save setting") as conn, conn:
            conn.execute(
                """
                INSERT INTO settings (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )

    def get_theme(self) -> str:
        return self.get_setting(SETTING_THEME) or DEFAULT_THEME

    def set_theme(self, theme: str) -> None:
        self.set_setting(SETTING_THEME, theme)

    def get_searchbar_mode(self) -> str:
        return self.get_setting(SETTING_SEARCHBAR_MODE) or DEFAULT_SEARCHBAR_MODE

    def set_searchbar_mode(self, mode: str) -> None:
        self.set_setting(SETTING_SEARCHBAR_MODE, mode)

    def get_mobile_mode(self) -> bool:
        return self.get_setting(SETTING_MOBILE_MODE) == "true"

    def set_mobile_mode(self, enabled: bool) -> None:
        self.set_setting(SETTING_MOBILE_MODE, "true" if enabled else "false")
