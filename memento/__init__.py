from memento.core.history import History
from memento.core.originator import StateHolder
from memento.core.snapshot import Snapshot
from memento.errors import InvalidSnapshotError, MementoError, SnapshotIndexError

__all__ = [
    "History",
    "Snapshot",
    "StateHolder",
    # Errors
    "InvalidSnapshotError",
    "MementoError",
    "SnapshotIndexError",
]
