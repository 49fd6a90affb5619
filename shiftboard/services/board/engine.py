"""
Shift board engine.

Owns the roster, the current selection, the schedule store and its undo
history. Every command runs to completion synchronously. Rejected commands
return a CommandResult and leave all state untouched; invalid input raises
a BoardError before anything is mutated.
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from shiftboard.core.config import Settings

from .addressing import cell_key, fusion_edges, parse_cell_key
from .errors import BoardError, SlotOutOfRangeError, UnknownWorkTypeError
from .history import HistoryStack, Schedule
from .metrics import compute_metrics
from .roster import Roster
from .selection import SelectionSet
from .types import (
    AssignmentRecord,
    BoardMetrics,
    CellView,
    CommandResult,
    Person,
    Rejection,
    StaffRow,
    WorkType,
)


logger = logging.getLogger(__name__)


class ScheduleBoard:
    """
    Selection and scheduling state for a single day's grid.
    """

    def __init__(
        self,
        rows: Optional[Iterable[StaffRow]] = None,
        work_types: Optional[Iterable[WorkType]] = None,
        people: Iterable[Person] = (),
        slot_count: int = 24,
        slot_revenue: int = 400,
    ):
        if slot_count <= 0:
            raise BoardError("slot_count must be positive")
        self.roster = Roster(rows)
        # None means any non-empty work type id is accepted
        self.work_types: Optional[dict[str, WorkType]] = (
            {w.id: w for w in work_types} if work_types is not None else None
        )
        self.people: tuple[Person, ...] = tuple(people)
        self.slot_count = slot_count
        self.slot_revenue = slot_revenue

        self._selection = SelectionSet()
        self._schedule: Schedule = {}
        self._history = HistoryStack()
        self._just_applied = False
        self._drag_active = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        rows: Optional[Iterable[StaffRow]] = None,
        work_types: Optional[Iterable[WorkType]] = None,
        people: Iterable[Person] = (),
    ) -> "ScheduleBoard":
        return cls(
            rows=rows,
            work_types=work_types,
            people=people,
            slot_count=settings.SLOT_COUNT,
            slot_revenue=settings.SLOT_REVENUE,
        )

    # ==================== Read-only snapshots ====================

    @property
    def rows(self) -> tuple[StaffRow, ...]:
        return self.roster.rows

    @property
    def selected_keys(self) -> tuple[str, ...]:
        return self._selection.keys()

    @property
    def schedule(self) -> dict[str, AssignmentRecord]:
        return dict(self._schedule)

    @property
    def history_depth(self) -> int:
        return len(self._history)

    @property
    def just_applied(self) -> bool:
        return self._just_applied

    @property
    def drag_active(self) -> bool:
        return self._drag_active

    def key_for(self, staff_id: str, time_index: int) -> str:
        """Cell key for a roster cell. Raises BoardError for unknown cells."""
        return self._resolve_cell(staff_id, time_index)[1]

    def record_at(self, staff_id: str, time_index: int) -> Optional[AssignmentRecord]:
        _, key = self._resolve_cell(staff_id, time_index)
        return self._schedule.get(key)

    def metrics(self) -> BoardMetrics:
        return compute_metrics(self.rows, self._schedule, self.slot_count, self.slot_revenue)

    def cell_view(self, staff_id: str, time_index: int) -> CellView:
        row, key = self._resolve_cell(staff_id, time_index)
        record = self._schedule.get(key)
        metrics = self.metrics()

        orphan = key in metrics.orphan_cell_keys
        needs_confirmation = record is not None and (
            orphan or row.id in metrics.unconfirmed_staff_ids
        )
        return CellView(
            key=key,
            work_type_id=record.work_type_id if record else None,
            confirmed=record.confirmed if record else False,
            selected=key in self._selection,
            orphan=orphan,
            needs_confirmation=needs_confirmation,
            fusion_edges=fusion_edges(key, self._selection, self.roster.order),
        )

    # ==================== Selection gestures ====================

    def toggle_cell(self, staff_id: str, time_index: int) -> CommandResult:
        row, key = self._resolve_cell(staff_id, time_index)
        if row.is_placeholder:
            return self._reject(Rejection.PLACEHOLDER_TARGET, key)

        if key in self._selection:
            self._selection.discard(key)
        elif self._just_applied:
            # first tap after a commit starts a new selection
            self._just_applied = False
            self._selection.replace(key)
        else:
            self._selection.add(key)
        return CommandResult.ok()

    def begin_drag(self, staff_id: str, time_index: int) -> CommandResult:
        row, key = self._resolve_cell(staff_id, time_index)
        if row.is_placeholder:
            return self._reject(Rejection.PLACEHOLDER_TARGET, key)

        self._drag_active = True
        if self._just_applied:
            self._just_applied = False
            self._selection.replace(key)
        else:
            self._selection.add(key)
        return CommandResult.ok()

    def extend_drag(self, staff_id: str, time_index: int) -> CommandResult:
        row, key = self._resolve_cell(staff_id, time_index)
        if not self._drag_active:
            return CommandResult.ok()
        if row.is_placeholder:
            return self._reject(Rejection.PLACEHOLDER_TARGET, key)

        self._selection.add(key)
        return CommandResult.ok()

    def end_drag(self) -> CommandResult:
        self._drag_active = False
        return CommandResult.ok()

    def cancel_selection(self) -> CommandResult:
        self._selection.clear()
        self._just_applied = False
        self._drag_active = False
        return CommandResult.ok()

    # ==================== Commits ====================

    def assign(self, work_type_id: Optional[str]) -> CommandResult:
        """
        Write work_type_id to every selected cell, or remove their records
        when work_type_id is None. The selection is kept; the next tap or
        drag starts a fresh one.
        """
        if work_type_id is not None:
            self._check_work_type(work_type_id)
        if not self._selection:
            return self._reject(Rejection.EMPTY_SELECTION_COMMIT)

        self._history.push(self._schedule)
        for key in self._selection:
            if work_type_id is None:
                self._schedule.pop(key, None)
            else:
                self._schedule[key] = AssignmentRecord(work_type_id=work_type_id)
        self._just_applied = True

        action = f"assigned {work_type_id}" if work_type_id else "cleared"
        logger.info(f"{action.capitalize()} on {len(self._selection)} cell(s)")
        return CommandResult.ok()

    def clear(self) -> CommandResult:
        return self.assign(None)

    def confirm_all(self) -> CommandResult:
        """Confirm every record on a staffed row. Orphan work stays pending."""
        self._history.push(self._schedule)

        confirmed = 0
        for key, record in self._schedule.items():
            staff_id, _ = parse_cell_key(key)
            if staff_id not in self.roster or self.roster.is_placeholder(staff_id):
                continue
            if not record.confirmed:
                self._schedule[key] = replace(record, confirmed=True)
                confirmed += 1

        self._selection.clear()
        self._just_applied = False
        logger.info(f"Confirmed {confirmed} record(s)")
        return CommandResult.ok()

    def undo(self) -> CommandResult:
        previous = self._history.pop()
        if previous is None:
            return self._reject(Rejection.EMPTY_HISTORY_UNDO)

        self._schedule = previous
        logger.info(f"Undo restored {len(previous)} record(s), {len(self._history)} step(s) left")
        return CommandResult.ok()

    # ==================== Roster ====================

    def add_placeholder_row(self) -> StaffRow:
        return self.roster.add_placeholder_row()

    def resolve_placeholder(self, staff_id: str, person: Person) -> StaffRow:
        return self.roster.resolve_placeholder(staff_id, person)

    def release_row(self, staff_id: str) -> StaffRow:
        """
        Return a staffed row to placeholder state. Its records are kept as
        orphan work; its cells leave the selection.
        """
        row = self.roster.release_row(staff_id)
        for key in self._selection.keys():
            if parse_cell_key(key)[0] == staff_id:
                self._selection.discard(key)
        return row

    # ==================== Helpers ====================

    def _resolve_cell(self, staff_id: str, time_index: int) -> tuple[StaffRow, str]:
        row = self.roster.get(staff_id)
        if not 0 <= time_index < self.slot_count:
            raise SlotOutOfRangeError(
                f"Slot {time_index} outside 0..{self.slot_count - 1}"
            )
        return row, cell_key(staff_id, time_index)

    def _check_work_type(self, work_type_id: str) -> None:
        if not work_type_id:
            raise UnknownWorkTypeError("Work type id must not be empty")
        if self.work_types is not None and work_type_id not in self.work_types:
            raise UnknownWorkTypeError(f"Unknown work type: {work_type_id}")

    def _reject(self, reason: Rejection, key: Optional[str] = None) -> CommandResult:
        logger.debug(f"Rejected command: {reason.value}" + (f" at {key}" if key else ""))
        return CommandResult.rejected(reason)
