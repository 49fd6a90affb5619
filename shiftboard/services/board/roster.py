"""
Ordered staff rows. Row order drives vertical adjacency on the grid.
"""

import itertools
import logging
from dataclasses import replace
from typing import Iterable, Optional

from .errors import BoardError, RowAlreadyStaffedError, UnknownStaffError
from .types import Person, StaffRow


logger = logging.getLogger(__name__)


class Roster:

    def __init__(self, rows: Optional[Iterable[StaffRow]] = None):
        self._rows: list[StaffRow] = list(rows or [])
        ids = [r.id for r in self._rows]
        if len(ids) != len(set(ids)):
            raise BoardError("Staff ids must be unique")
        self._new_ids = itertools.count(1)

    @property
    def rows(self) -> tuple[StaffRow, ...]:
        return tuple(self._rows)

    @property
    def order(self) -> list[str]:
        return [r.id for r in self._rows]

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, staff_id: str) -> bool:
        return any(r.id == staff_id for r in self._rows)

    def get(self, staff_id: str) -> StaffRow:
        for row in self._rows:
            if row.id == staff_id:
                return row
        raise UnknownStaffError(f"Unknown staff row: {staff_id}")

    def is_placeholder(self, staff_id: str) -> bool:
        return self.get(staff_id).is_placeholder

    def add_placeholder_row(self) -> StaffRow:
        existing = set(self.order)
        staff_id = next(f"new-{n}" for n in self._new_ids if f"new-{n}" not in existing)
        row = StaffRow(id=staff_id)
        self._rows.append(row)
        logger.info(f"Added placeholder row {staff_id}")
        return row

    def resolve_placeholder(self, staff_id: str, person: Person) -> StaffRow:
        """Fill a placeholder row with a person from the people catalog."""
        row = self.get(staff_id)
        if not row.is_placeholder:
            raise RowAlreadyStaffedError(f"Row {staff_id} already has a person assigned")
        if not person.name or not person.name.strip():
            raise BoardError("Person name must not be blank")

        row = self._swap(replace(row, name=person.name, avatar=person.avatar, tag=person.tag))
        logger.info(f"Assigned {person.name} to row {staff_id}")
        return row

    def release_row(self, staff_id: str) -> StaffRow:
        """Turn a staffed row back into a placeholder."""
        row = self.get(staff_id)
        if row.is_placeholder:
            raise BoardError(f"Row {staff_id} has no person to release")

        logger.info(f"Released {row.name} from row {staff_id}")
        return self._swap(StaffRow(id=staff_id))

    def _swap(self, row: StaffRow) -> StaffRow:
        # rows are frozen, so changing a row means replacing it in place
        index = self.order.index(row.id)
        self._rows[index] = row
        return row
