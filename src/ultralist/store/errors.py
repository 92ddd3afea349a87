# src/ultralist/store/errors.py

from __future__ import annotations


class StoreError(Exception):
    """Storage failure (engine error, constraint violation, closed store)."""


class StoreLockError(StoreError):
    """The store lock could not be acquired in time."""


class NotFoundError(StoreError):
    """An operation referenced an id that does not exist."""

    def __init__(self, kind: str, key: object) -> None:
        super().__init__(f"{kind} not found: {key}")
        self.kind = kind
        self.key = key
