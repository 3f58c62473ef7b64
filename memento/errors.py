"""Domain errors for memento."""

from __future__ import annotations

from typing import Any


class MementoError(Exception):
    """Base exception for memento precondition violations."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidSnapshotError(MementoError, TypeError):
    """restore() was given something other than a Snapshot."""


class SnapshotIndexError(MementoError, IndexError):
    """History.get() was asked for a position that does not exist."""
