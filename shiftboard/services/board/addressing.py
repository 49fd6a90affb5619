"""
Grid addressing: (staff, slot) <-> cell key, plus adjacency used by
renderers to fuse neighbouring selected cells into one shape.
"""

from typing import Collection, Sequence

from .types import Adjacency


KEY_SEPARATOR = "-"


def cell_key(staff_id: str, time_index: int) -> str:
    if time_index < 0:
        raise ValueError(f"Negative slot index: {time_index}")
    return f"{staff_id}{KEY_SEPARATOR}{time_index}"


def parse_cell_key(key: str) -> tuple[str, int]:
    """
    Inverse of cell_key.

    Splits on the last separator so staff ids that contain one
    (e.g. generated "new-3") still round-trip.
    """
    staff_id, sep, index = key.rpartition(KEY_SEPARATOR)
    if not sep or not index.isdigit():
        raise ValueError(f"Malformed cell key: {key!r}")
    return staff_id, int(index)


def slot_label(time_index: int) -> str:
    """Header label for an hourly slot, e.g. 9 -> '9~10'."""
    return f"{time_index}~{time_index + 1}"


def adjacency(key_a: str, key_b: str, roster_order: Sequence[str]) -> Adjacency:
    """Where key_b sits relative to key_a. Row order comes from the roster."""
    staff_a, t_a = parse_cell_key(key_a)
    staff_b, t_b = parse_cell_key(key_b)

    if staff_a == staff_b:
        if t_b == t_a - 1:
            return Adjacency.LEFT
        if t_b == t_a + 1:
            return Adjacency.RIGHT
        return Adjacency.NONE

    if t_a != t_b or staff_a not in roster_order or staff_b not in roster_order:
        return Adjacency.NONE

    row_gap = roster_order.index(staff_b) - roster_order.index(staff_a)
    if row_gap == -1:
        return Adjacency.TOP
    if row_gap == 1:
        return Adjacency.BOTTOM
    return Adjacency.NONE


def fusion_edges(
    key: str,
    selected: Collection[str],
    roster_order: Sequence[str],
) -> frozenset[Adjacency]:
    """Sides of a selected cell that touch another selected cell."""
    if key not in selected:
        return frozenset()

    staff_id, t = parse_cell_key(key)
    neighbours = {
        Adjacency.LEFT: cell_key(staff_id, t - 1) if t > 0 else None,
        Adjacency.RIGHT: cell_key(staff_id, t + 1),
    }
    if staff_id in roster_order:
        row = roster_order.index(staff_id)
        if row > 0:
            neighbours[Adjacency.TOP] = cell_key(roster_order[row - 1], t)
        if row < len(roster_order) - 1:
            neighbours[Adjacency.BOTTOM] = cell_key(roster_order[row + 1], t)

    return frozenset(
        side for side, other in neighbours.items()
        if other is not None and other in selected
    )
