# src/ultralist/nlp/task_parser.py

from __future__ import annotations

"""
Quick-add text interpreter.

Turns one line of free text into a DraftTask:
- priority keywords (urgent/asap/critical, low priority/later/someday),
- relative due dates (today, tomorrow, next week),
- a time-of-day phrase ("at 5pm", "by 3:30") kept in the description,
- #hashtags as tags,
- a project hint ("for work project", "in home renovation project").

Steps run in a fixed order. Each step matches against the lower-cased input and
strips what it consumed from the working title. Reordering the steps changes the
result, so PIPELINE is the single source of truth for the order.

This is keyword/regex matching, not language understanding: the parser never
fails, it only leaves fields at their defaults.
"""

import re
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from datetime import date, timedelta
from typing import Any

from ..store.models import Priority

DEFAULT_TITLE = "New task"

_HIGH_PRIORITY_KEYWORDS = ("urgent", "asap", "critical")
_LOW_PRIORITY_KEYWORDS = ("low priority", "later", "someday")

# (phrase, days from today); first match wins.
_RELATIVE_DATES = (
    ("today", 0),
    ("tomorrow", 1),
    ("next week", 7),
)

_TIME_PATTERN = r"\b(?:at|by)\s+(\d{1,2}):?(\d{2})?\s*(am|pm)?\b"
_PROJECT_PATTERN = r"\b(?:for|in)\s+(\w+(?:\s+\w+)?)\s+project\b"

_TIME_RE = re.compile(_TIME_PATTERN)
_TIME_RE_ANYCASE = re.compile(_TIME_PATTERN, re.IGNORECASE)
_HASHTAG_RE = re.compile(r"#(\w+)")
_PROJECT_RE = re.compile(_PROJECT_PATTERN)
_PROJECT_RE_ANYCASE = re.compile(_PROJECT_PATTERN, re.IGNORECASE)


@dataclass(slots=True)
class DraftTask:
    """Structured result of parse_task_text(); not persisted."""

    title: str
    description: str = ""
    due_date: str | None = None
    priority: str = Priority.MEDIUM.value
    tags: list[str] = field(default_factory=list)
    project_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class _ParseInput:
    raw: str
    lowered: str
    today: date


ParseStep = Callable[[_ParseInput, DraftTask], None]


def _remove_phrase(title: str, phrase: str) -> str:
    return re.sub(re.escape(phrase), "", title, flags=re.IGNORECASE)


def _append_description(draft: DraftTask, text: str) -> None:
    draft.description = f"{draft.description}\n{text}" if draft.description else text


def extract_priority(inp: _ParseInput, draft: DraftTask) -> None:
    if any(k in inp.lowered for k in _HIGH_PRIORITY_KEYWORDS):
        draft.priority = Priority.HIGH.value
        keywords = _HIGH_PRIORITY_KEYWORDS
    elif any(k in inp.lowered for k in _LOW_PRIORITY_KEYWORDS):
        draft.priority = Priority.LOW.value
        keywords = _LOW_PRIORITY_KEYWORDS
    else:
        return

    for k in keywords:
        draft.title = _remove_phrase(draft.title, k)


def extract_relative_date(inp: _ParseInput, draft: DraftTask) -> None:
    for phrase, days in _RELATIVE_DATES:
        if phrase in inp.lowered:
            draft.due_date = (inp.today + timedelta(days=days)).isoformat()
            draft.title = _remove_phrase(draft.title, phrase)
            return


def extract_time_of_day(inp: _ParseInput, draft: DraftTask) -> None:
    m = _TIME_RE.search(inp.lowered)
    if not m:
        return
    _append_description(draft, f"Due time: {m.group(0)}")
    draft.title = _TIME_RE_ANYCASE.sub("", draft.title, count=1)


def extract_hashtags(inp: _ParseInput, draft: DraftTask) -> None:
    draft.tags.extend(m.group(1) for m in _HASHTAG_RE.finditer(inp.lowered))
    draft.title = _HASHTAG_RE.sub("", draft.title)


def extract_project_hint(inp: _ParseInput, draft: DraftTask) -> None:
    m = _PROJECT_RE.search(inp.lowered)
    if not m:
        return
    draft.project_name = m.group(1)
    draft.title = _PROJECT_RE_ANYCASE.sub("", draft.title, count=1)


def finalize_title(inp: _ParseInput, draft: DraftTask) -> None:
    draft.title = draft.title.strip() or DEFAULT_TITLE


PIPELINE: tuple[ParseStep, ...] = (
    extract_priority,
    extract_relative_date,
    extract_time_of_day,
    extract_hashtags,
    extract_project_hint,
    finalize_title,
)


def parse_task_text(text: str, *, today: date | None = None) -> DraftTask:
    """
    Parse one line of quick-add text.

    `today` anchors relative dates; defaults to the local calendar date at call time.
    """
    raw = text or ""
    inp = _ParseInput(raw=raw, lowered=raw.lower(), today=today or date.today())
    draft = DraftTask(title=raw)
    for step in PIPELINE:
        step(inp, draft)
    return draft
