"""
Derived board metrics.
Pure functions of (roster rows, schedule); recomputed on every read.
"""

import math
from typing import Mapping, Optional, Sequence

from .addressing import parse_cell_key
from .types import AssignmentRecord, BoardMetrics, StaffRow


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_efficiency(total_revenue: int, total_hours: int) -> Optional[int]:
    """Revenue per scheduled hour, None when nothing is scheduled."""
    if total_hours <= 0:
        return None
    return round_half_up(total_revenue / total_hours)


def compute_metrics(
    rows: Sequence[StaffRow],
    schedule: Mapping[str, AssignmentRecord],
    slot_count: int,
    slot_revenue: int,
) -> BoardMetrics:
    rows_by_id = {r.id: r for r in rows}

    active: set[str] = set()
    unconfirmed: set[str] = set()
    orphans: set[str] = set()
    orphan_keys: set[str] = set()
    total_hours = 0

    for key, record in schedule.items():
        if not record or not record.work_type_id:
            continue
        staff_id, _ = parse_cell_key(key)
        row = rows_by_id.get(staff_id)
        if row is None:
            continue

        if row.is_placeholder:
            orphans.add(staff_id)
            orphan_keys.add(key)
            continue

        active.add(staff_id)
        total_hours += 1  # hourly slots
        if not record.confirmed:
            unconfirmed.add(staff_id)

    total_revenue = slot_count * slot_revenue
    return BoardMetrics(
        active_staff_ids=frozenset(active),
        unconfirmed_staff_ids=frozenset(unconfirmed),
        orphan_staff_ids=frozenset(orphans),
        orphan_cell_keys=frozenset(orphan_keys),
        total_hours=total_hours,
        total_revenue=total_revenue,
        efficiency=calculate_efficiency(total_revenue, total_hours),
    )
