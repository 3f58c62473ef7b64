"""StateHolder — the object whose state is saved to and restored from snapshots."""

from __future__ import annotations

import logging

from memento.core.snapshot import Snapshot
from memento.errors import InvalidSnapshotError

logger = logging.getLogger(__name__)


class StateHolder:
    """
    Owns a single mutable state value.

    Usage:
        holder = StateHolder()
        holder.set_state("draft")
        snap = holder.save()
        holder.set_state("edited")
        holder.restore(snap)   # back to "draft"
    """

    def __init__(self, state: str | None = None) -> None:
        self._state = state

    def set_state(self, value: str | None) -> None:
        logger.debug("set_state: %r", value)
        self._state = value

    def get_state(self) -> str | None:
        return self._state

    def save(self) -> Snapshot:
        """Capture the current state into a new Snapshot."""
        logger.debug("save: capturing %r", self._state)
        return Snapshot(self._state)

    def restore(self, snapshot: Snapshot) -> None:
        """
        Overwrite the current state with the value captured in *snapshot*.

        Raises InvalidSnapshotError if *snapshot* is missing or not a Snapshot;
        the current state is left untouched in that case.
        """
        if not isinstance(snapshot, Snapshot):
            raise InvalidSnapshotError(
                f"restore() expects a Snapshot, got {type(snapshot).__name__}",
                details={"received_type": type(snapshot).__name__},
            )
        self._state = snapshot.get_state()
        logger.debug("restore: state is now %r", self._state)
