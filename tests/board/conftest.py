import pytest

from shiftboard.services.board import (
    DEFAULT_WORK_TYPES,
    Person,
    ScheduleBoard,
    StaffRow,
)


SLOT_COUNT = 24
SLOT_REVENUE = 400


def make_rows() -> list[StaffRow]:
    # S1 and S3 staffed, S2 is a placeholder between them
    return [
        StaffRow(id="S1", name="Lin Mei", avatar="lin.jpg", tag="Store Manager"),
        StaffRow(id="S2"),
        StaffRow(id="S3", name="Chen Yu", avatar="chen.jpg", tag="Part-time"),
    ]


def select(board: ScheduleBoard, *cells: tuple[str, int]) -> None:
    for staff_id, t in cells:
        result = board.toggle_cell(staff_id, t)
        assert result.accepted


class FakeClock:
    """Manually advanced clock for gesture tests."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms / 1000


@pytest.fixture
def board() -> ScheduleBoard:
    return ScheduleBoard(
        rows=make_rows(),
        work_types=DEFAULT_WORK_TYPES,
        slot_count=SLOT_COUNT,
        slot_revenue=SLOT_REVENUE,
    )


@pytest.fixture
def person() -> Person:
    return Person(name="Jay Chou", avatar="jay.jpg", tag="Own Staff")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
