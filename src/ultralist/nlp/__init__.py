"""Quick-add text interpreter (keyword/regex heuristics, no store access)."""

from .task_parser import DEFAULT_TITLE, DraftTask, parse_task_text

__all__ = ["DEFAULT_TITLE", "DraftTask", "parse_task_text"]
