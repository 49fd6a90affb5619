"""
Pointer gesture state machine.

Turns raw pointer events into board commands, telling a tap apart from a
long-press drag:

    IDLE --press--> PRESSED_PENDING --(threshold elapsed)--> DRAGGING
      ^                    |                                    |
      +------release-------+-----------------release------------+

There are no background timers. The pending drag-start is a deadline
checked against an injectable clock whenever an event arrives (or when the
host calls poll() from its own timer), so a release before the deadline
always cancels it.
"""

import logging
import time
from typing import Callable, Optional

from shiftboard.core.config import Settings

from .engine import ScheduleBoard
from .types import CommandResult, GestureState


logger = logging.getLogger(__name__)


class GestureMachine:

    def __init__(
        self,
        board: ScheduleBoard,
        long_press_ms: int = 500,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.board = board
        self.long_press_s = long_press_ms / 1000
        self.clock = clock

        self.state = GestureState.IDLE
        self._pressed: Optional[tuple[str, int]] = None
        self._deadline: Optional[float] = None
        self._suppress_click = False

    @classmethod
    def from_settings(
        cls,
        board: ScheduleBoard,
        settings: Settings,
        clock: Callable[[], float] = time.monotonic,
    ) -> "GestureMachine":
        return cls(board, long_press_ms=settings.LONG_PRESS_MS, clock=clock)

    @property
    def click_suppressed(self) -> bool:
        return self._suppress_click

    def press(self, staff_id: str, time_index: int) -> None:
        """Pointer/touch down on a cell: arm the long-press drag-start."""
        self.board.key_for(staff_id, time_index)
        self._suppress_click = False
        self._pressed = (staff_id, time_index)
        self._deadline = self.clock() + self.long_press_s
        self.state = GestureState.PRESSED_PENDING

    def poll(self) -> Optional[CommandResult]:
        """Fire the pending drag-start if its deadline has passed."""
        if self.state is not GestureState.PRESSED_PENDING or self._deadline is None:
            return None
        if self.clock() < self._deadline:
            return None

        staff_id, time_index = self._pressed
        self._deadline = None
        result = self.board.begin_drag(staff_id, time_index)
        if result.accepted:
            self.state = GestureState.DRAGGING
            self._suppress_click = True
            logger.debug(f"Long press on {staff_id}:{time_index} started a drag")
        else:
            self.state = GestureState.IDLE
        return result

    def enter(self, staff_id: str, time_index: int) -> Optional[CommandResult]:
        """Pointer moved onto a cell."""
        self.poll()
        if self.state is not GestureState.DRAGGING:
            return None
        return self.board.extend_drag(staff_id, time_index)

    def release(self) -> None:
        """Pointer/touch up anywhere."""
        try:
            self.poll()
        finally:
            self._pressed = None
            self._deadline = None
            self.state = GestureState.IDLE
            self.board.end_drag()

    def click(self, staff_id: str, time_index: int) -> Optional[CommandResult]:
        """Click delivered after release. Swallowed once after a drag."""
        if self._suppress_click:
            self._suppress_click = False
            return None
        return self.board.toggle_cell(staff_id, time_index)
