"""History — append-only store of snapshots, kept without looking inside them."""

from __future__ import annotations

import logging
import operator

from memento.core.snapshot import Snapshot
from memento.errors import SnapshotIndexError

logger = logging.getLogger(__name__)


class History:
    """
    Ordered list of Snapshot references.

    Insertion order is preserved and duplicates are allowed. There is no
    capacity bound and nothing is ever removed.
    """

    def __init__(self) -> None:
        self._snapshots: list[Snapshot] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    def add(self, snapshot: Snapshot) -> None:
        self._snapshots.append(snapshot)
        logger.debug("add: %d snapshot(s) stored", len(self._snapshots))

    def get(self, index: int) -> Snapshot:
        """
        Return the snapshot at zero-based *index*, the same object that was added.

        Negative indices are not counted from the end; anything outside
        [0, len) raises SnapshotIndexError. Non-integer indices raise TypeError.
        """
        index = operator.index(index)
        size = len(self._snapshots)
        if index < 0 or index >= size:
            raise SnapshotIndexError(
                f"History index {index} out of range for {size} snapshot(s)",
                details={"index": index, "length": size},
            )
        return self._snapshots[index]
