"""
Internal data types for the shift board engine.
Kept free of any web/framework types so the engine can be driven directly.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Adjacency(str, Enum):
    NONE = "NONE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    TOP = "TOP"
    BOTTOM = "BOTTOM"


class Rejection(str, Enum):
    PLACEHOLDER_TARGET = "PLACEHOLDER_TARGET"
    EMPTY_SELECTION_COMMIT = "EMPTY_SELECTION_COMMIT"
    EMPTY_HISTORY_UNDO = "EMPTY_HISTORY_UNDO"


class GestureState(str, Enum):
    IDLE = "IDLE"
    PRESSED_PENDING = "PRESSED_PENDING"
    DRAGGING = "DRAGGING"


@dataclass(frozen=True)
class StaffRow:
    id: str
    name: str = ""
    avatar: str = ""
    tag: str = ""

    @property
    def is_placeholder(self) -> bool:
        return not self.name or not self.name.strip()


@dataclass(frozen=True)
class Person:
    """An entry of the people catalog used to fill a placeholder row."""
    name: str
    avatar: str = ""
    tag: str = ""


@dataclass(frozen=True)
class WorkType:
    id: str
    label: str
    category: str


@dataclass(frozen=True)
class AssignmentRecord:
    work_type_id: str
    confirmed: bool = False


@dataclass(frozen=True)
class CommandResult:
    """Outcome of an engine command. Rejected commands leave state untouched."""
    accepted: bool
    rejection: Optional[Rejection] = None

    @classmethod
    def ok(cls) -> "CommandResult":
        return cls(accepted=True)

    @classmethod
    def rejected(cls, reason: Rejection) -> "CommandResult":
        return cls(accepted=False, rejection=reason)


@dataclass(frozen=True)
class BoardMetrics:
    """Aggregates derived from roster + schedule. Never stored."""
    active_staff_ids: frozenset[str]
    unconfirmed_staff_ids: frozenset[str]
    orphan_staff_ids: frozenset[str]
    orphan_cell_keys: frozenset[str]
    total_hours: int
    total_revenue: int
    efficiency: Optional[int]

    @property
    def active_staff_count(self) -> int:
        return len(self.active_staff_ids)

    @property
    def unconfirmed_staff_count(self) -> int:
        return len(self.unconfirmed_staff_ids)


@dataclass(frozen=True)
class CellView:
    """Everything a renderer needs to paint one grid cell."""
    key: str
    work_type_id: Optional[str]
    confirmed: bool
    selected: bool
    orphan: bool
    needs_confirmation: bool
    fusion_edges: frozenset[Adjacency] = field(default_factory=frozenset)
