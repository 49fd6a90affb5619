import threading

from shiftboard.core.config import settings
from shiftboard.services.board import (
    DEFAULT_PEOPLE,
    DEFAULT_WORK_TYPES,
    ScheduleBoard,
    default_roster,
)

# single in-memory board, resets on restart
_board = ScheduleBoard.from_settings(
    settings,
    rows=default_roster(),
    work_types=DEFAULT_WORK_TYPES,
    people=DEFAULT_PEOPLE,
)

# taken inside route bodies, never across a dependency's yield
board_lock = threading.Lock()


def get_board() -> ScheduleBoard:
    return _board
