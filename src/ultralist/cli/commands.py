# src/ultralist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..nlp.task_parser import parse_task_text
from ..store.errors import NotFoundError, StoreError
from ..store.models import Subtask, TaskWithDetails
from ..tasks import task_api

# (state, args, rest) -> reply; rest is the raw text after the command name.
CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)

_SHORT_ID = 8


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Store and validation errors come back as "Error: ..." replies.
        """
        if not line.startswith("/"):
            return None

        body = line[1:].strip()
        parts = body.split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        rest = body[len(parts[0]) :].strip()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args, rest)
        except (StoreError, ValueError) as e:
            logger.info("Command /%s failed: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def resolve_task_id(state: AppState, ref: str) -> str:
    """Accept a full task id or a unique prefix of one."""
    ref = (ref or "").strip()
    if not ref:
        raise ValueError("task id is required")
    if state.store.get_task(ref) is not None:
        return ref
    matches = [d.task.id for d in state.store.list_tasks_with_details() if d.task.id.startswith(ref)]
    if not matches:
        raise NotFoundError("Task", ref)
    if len(matches) > 1:
        raise ValueError(f"ambiguous task id prefix: {ref} ({len(matches)} matches)")
    return matches[0]


def resolve_subtask_id(state: AppState, ref: str) -> str:
    ref = (ref or "").strip()
    if not ref:
        raise ValueError("subtask id is required")
    matches: list[Subtask] = [
        s
        for d in state.store.list_tasks_with_details()
        for s in d.subtasks
        if s.id.startswith(ref)
    ]
    exact = [s for s in matches if s.id == ref]
    if exact:
        return exact[0].id
    if not matches:
        raise NotFoundError("Subtask", ref)
    if len(matches) > 1:
        raise ValueError(f"ambiguous subtask id prefix: {ref} ({len(matches)} matches)")
    return matches[0].id


def format_task(details: TaskWithDetails, project_names: dict[int, str] | None = None) -> str:
    t = details.task
    mark = "x" if t.completed else " "
    meta = [t.priority]
    if t.due_date:
        meta.append(f"due {t.due_date}")
    if t.project_id is not None:
        names = project_names or {}
        meta.append(f"@{names.get(t.project_id, t.project_id)}")
    line = f"[{mark}] {t.id[:_SHORT_ID]} {t.title} ({', '.join(meta)})"
    if details.tags:
        line += " " + " ".join(f"#{tag}" for tag in details.tags)
    out = [line]
    if t.description:
        out.extend(f"      {d}" for d in t.description.splitlines())
    for s in details.subtasks:
        out.append(f"    [{'x' if s.completed else ' '}] {s.id[:_SHORT_ID]} {s.text}")
    return "\n".join(out)


# ---- handlers ----


def cmd_help(state: AppState, args: list[str], rest: str) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    """/add <free text>  -> quick-add with date/priority/#tags/project parsing"""
    if not rest:
        return "Usage: /add <task text>"
    task_id = task_api.quick_add_task(state, rest)
    details = state.store.get_task(task_id)
    if details is None:
        raise NotFoundError("Task", task_id)
    return "Added:\n" + format_task(details, _project_names(state))


def cmd_parse(state: AppState, args: list[str], rest: str) -> str:
    """/parse <free text>  -> show what /add would create, without saving"""
    draft = parse_task_text(rest)
    lines = [
        f"title:       {draft.title}",
        f"priority:    {draft.priority}",
        f"due_date:    {draft.due_date or '-'}",
        f"tags:        {', '.join(draft.tags) or '-'}",
        f"project:     {draft.project_name or '-'}",
        f"description: {draft.description or '-'}",
    ]
    return "\n".join(lines)


def cmd_list(state: AppState, args: list[str], rest: str) -> str:
    """
    /list        -> open tasks
    /list all    -> every task
    /list done   -> completed tasks
    """
    mode = args[0].lower() if args else "open"
    if mode not in ("open", "all", "done"):
        return "Usage: /list [open|all|done]"

    items = state.store.list_tasks_with_details()
    if mode == "open":
        items = [d for d in items if not d.task.completed]
    elif mode == "done":
        items = [d for d in items if d.task.completed]

    if not items:
        return "No tasks."
    names = _project_names(state)
    return "\n".join(format_task(d, names) for d in items)


def _set_done(state: AppState, args: list[str], completed: bool) -> str:
    if not args:
        return "Usage: /done <task-id> | /undone <task-id>"
    task_id = resolve_task_id(state, args[0])
    task_api.toggle_task_completion(state, task_id, completed)
    return f"Task {task_id[:_SHORT_ID]} marked {'done' if completed else 'open'}."


def cmd_done(state: AppState, args: list[str], rest: str) -> str:
    return _set_done(state, args, True)


def cmd_undone(state: AppState, args: list[str], rest: str) -> str:
    return _set_done(state, args, False)


def cmd_rm(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        return "Usage: /rm <task-id>"
    task_id = resolve_task_id(state, args[0])
    task_api.delete_task(state, task_id)
    return f"Task {task_id[:_SHORT_ID]} deleted."


def cmd_sub(state: AppState, args: list[str], rest: str) -> str:
    """/sub <task-id> <text>  -> add a subtask"""
    if len(args) < 2:
        return "Usage: /sub <task-id> <text>"
    task_id = resolve_task_id(state, args[0])
    text = rest[len(args[0]) :].strip()
    subtask = task_api.add_subtask(state, task_id, text)
    return f"Subtask {subtask.id[:_SHORT_ID]} added to {task_id[:_SHORT_ID]}."


def cmd_subdone(state: AppState, args: list[str], rest: str) -> str:
    """/subdone <subtask-id> [off]"""
    if not args:
        return "Usage: /subdone <subtask-id> [off]"
    completed = not (len(args) > 1 and args[1].lower() in ("off", "0", "false", "no"))
    subtask_id = resolve_subtask_id(state, args[0])
    task_api.toggle_subtask_completion(state, subtask_id, completed)
    return f"Subtask {subtask_id[:_SHORT_ID]} marked {'done' if completed else 'open'}."


def cmd_tag(state: AppState, args: list[str], rest: str) -> str:
    """/tag <task-id> [tag ...]  -> replace the tag set (no tags clears it)"""
    if not args:
        return "Usage: /tag <task-id> [tag ...]"
    task_id = resolve_task_id(state, args[0])
    tags = [a.lstrip("#") for a in args[1:] if a.lstrip("#")]
    details = task_api.update_task(state, task_id, tags=tags)
    return f"Tags for {task_id[:_SHORT_ID]}: {', '.join(details.tags) or '-'}"


def cmd_tags(state: AppState, args: list[str], rest: str) -> str:
    tags = state.store.list_all_tags()
    return "Tags: " + (", ".join(tags) if tags else "-")


def _project_names(state: AppState) -> dict[int, str]:
    return {p.id: p.name for p in state.store.list_projects()}


def cmd_projects(state: AppState, args: list[str], rest: str) -> str:
    """
    /projects               -> list projects
    /projects add <name>    -> create a project
    """
    if args and args[0].lower() == "add":
        name = rest[len(args[0]) :].strip()
        project_id = task_api.create_project(state, name=name, color="bg-gray-500")
        return f"Project {project_id} created."

    folders = {f.id: f.name for f in state.store.list_folders()}
    projects = state.store.list_projects()
    if not projects:
        return "No projects."
    lines = ["Projects:"]
    for p in projects:
        folder = f" [{folders.get(p.folder_id, p.folder_id)}]" if p.folder_id is not None else ""
        lines.append(f"  {p.id}. {p.name}{folder}")
    return "\n".join(lines)


def cmd_folders(state: AppState, args: list[str], rest: str) -> str:
    """
    /folders               -> list folders
    /folders add <name>    -> create a folder
    """
    if args and args[0].lower() == "add":
        name = rest[len(args[0]) :].strip()
        folder_id = task_api.create_folder(state, name=name, color="bg-gray-600")
        return f"Folder {folder_id} created."

    folders = state.store.list_folders()
    if not folders:
        return "No folders."
    return "Folders:\n" + "\n".join(f"  {f.id}. {f.name}" for f in folders)


def cmd_theme(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        return f"Theme: {state.store.get_theme()}"
    state.store.set_theme(args[0].lower())
    return f"Theme set to {args[0].lower()}."


def cmd_mobile(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        return f"Mobile mode is {'ON' if state.store.get_mobile_mode() else 'OFF'}."
    arg = args[0].lower()
    if arg in ("on", "1", "true", "yes"):
        state.store.set_mobile_mode(True)
        return "Mobile mode ON."
    if arg in ("off", "0", "false", "no"):
        state.store.set_mobile_mode(False)
        return "Mobile mode OFF."
    return "Usage: /mobile on | /mobile off"


def cmd_searchbar(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        return f"Searchbar mode: {state.store.get_searchbar_mode()}"
    state.store.set_searchbar_mode(args[0].lower())
    return f"Searchbar mode set to {args[0].lower()}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Quick-add a task from free text.", aliases=["a"])
registry.register("parse", cmd_parse, help_text="Show how free text would be parsed.")
registry.register("list", cmd_list, help_text="List tasks: /list [open|all|done].", aliases=["ls"])
registry.register("done", cmd_done, help_text="Mark a task done: /done <id>.")
registry.register("undone", cmd_undone, help_text="Reopen a task: /undone <id>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["del"])
registry.register("sub", cmd_sub, help_text="Add a subtask: /sub <task-id> <text>.")
registry.register("subdone", cmd_subdone, help_text="Toggle a subtask: /subdone <id> [off].")
registry.register("tag", cmd_tag, help_text="Replace tags: /tag <task-id> [tag ...].")
registry.register("tags", cmd_tags, help_text="List all tags.")
registry.register("projects", cmd_projects, help_text="List or add projects.")
registry.register("folders", cmd_folders, help_text="List or add folders.")
registry.register("theme", cmd_theme, help_text="Show or set theme: /theme [light|dark].")
registry.register("mobile", cmd_mobile, help_text="Mobile mode: /mobile on | /mobile off.")
registry.register("searchbar", cmd_searchbar, help_text="Show or set searchbar mode.")
