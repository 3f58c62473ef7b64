"""Snapshot — opaque, immutable capture of a StateHolder's state."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, eq=False)
class Snapshot:
    """
    Opaque handle produced by StateHolder.save().

    The captured value is only reachable through get_state(); it is hidden
    from repr() and cannot be reassigned. Equality is identity: two snapshots
    of the same text are still distinct handles.
    """

    _state: str | None = field(repr=False)

    def get_state(self) -> str | None:
        return self._state
