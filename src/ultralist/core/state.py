# src/ultralist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import TaskRepo


@dataclass
class AppState:
    """
    Explicit handle passed to every operation.

    There is no process-wide store: whoever builds the state owns the store and
    closes it on shutdown.
    """

    settings: Any
    store: TaskRepo

    def close(self) -> None:
        self.store.close()
