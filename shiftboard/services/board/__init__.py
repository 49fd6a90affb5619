"""
Shift board engine package.

Usage:
    from shiftboard.services.board import ScheduleBoard, GestureMachine

    board = ScheduleBoard(rows=default_roster(), work_types=DEFAULT_WORK_TYPES)
    board.toggle_cell("s1", 9)
    board.toggle_cell("s1", 10)
    board.assign("iced-latte")
    board.confirm_all()

    metrics = board.metrics()  # recomputed on every call
"""

from .types import (
    Adjacency,
    AssignmentRecord,
    BoardMetrics,
    CellView,
    CommandResult,
    GestureState,
    Person,
    Rejection,
    StaffRow,
    WorkType,
)
from .errors import (
    BoardError,
    RowAlreadyStaffedError,
    SlotOutOfRangeError,
    UnknownStaffError,
    UnknownWorkTypeError,
)
from .addressing import adjacency, cell_key, fusion_edges, parse_cell_key, slot_label
from .catalog import DEFAULT_PEOPLE, DEFAULT_WORK_TYPES, default_roster
from .metrics import compute_metrics
from .engine import ScheduleBoard
from .gestures import GestureMachine

__all__ = [
    # Types
    "Adjacency",
    "AssignmentRecord",
    "BoardMetrics",
    "CellView",
    "CommandResult",
    "GestureState",
    "Person",
    "Rejection",
    "StaffRow",
    "WorkType",
    # Errors
    "BoardError",
    "RowAlreadyStaffedError",
    "SlotOutOfRangeError",
    "UnknownStaffError",
    "UnknownWorkTypeError",
    # Addressing
    "adjacency",
    "cell_key",
    "fusion_edges",
    "parse_cell_key",
    "slot_label",
    # Catalogs
    "DEFAULT_PEOPLE",
    "DEFAULT_WORK_TYPES",
    "default_roster",
    # Main entry points
    "ScheduleBoard",
    "GestureMachine",
    "compute_metrics",
]
