"""
Undo stack of schedule snapshots.

Records are frozen, so a fresh dict per snapshot is fully independent of
the live store: later writes to the store can't leak into history.
"""

from typing import Mapping, Optional

from .types import AssignmentRecord


Schedule = dict[str, AssignmentRecord]


class HistoryStack:

    def __init__(self):
        self._entries: list[Schedule] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, schedule: Mapping[str, AssignmentRecord]) -> None:
        self._entries.append(dict(schedule))

    def pop(self) -> Optional[Schedule]:
        if not self._entries:
            return None
        return self._entries.pop()
