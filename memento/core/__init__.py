from memento.core.history import History
from memento.core.originator import StateHolder
from memento.core.snapshot import Snapshot

__all__ = ["History", "Snapshot", "StateHolder"]
