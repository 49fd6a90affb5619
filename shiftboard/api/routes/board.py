from typing import Callable, List
from fastapi import APIRouter, Depends, HTTPException, status

from shiftboard.api.deps import board_lock, get_board
from shiftboard.schemas.board import (
    AssignRequest,
    AssignmentResponse,
    BoardResponse,
    CellRef,
    CommandResponse,
    MetricsResponse,
    PersonPayload,
    StaffRowResponse,
)
from shiftboard.services.board import (
    BoardError,
    CommandResult,
    Person,
    ScheduleBoard,
    StaffRow,
    UnknownStaffError,
    slot_label,
)

router = APIRouter(prefix="/board", tags=["board"])


def build_board_response(board: ScheduleBoard) -> BoardResponse:
    metrics = board.metrics()
    return BoardResponse(
        rows=[StaffRowResponse.model_validate(row) for row in board.rows],
        slots=[slot_label(i) for i in range(board.slot_count)],
        selected_keys=list(board.selected_keys),
        schedule={
            key: AssignmentResponse.model_validate(record)
            for key, record in board.schedule.items()
        },
        metrics=MetricsResponse(
            active_staff_ids=sorted(metrics.active_staff_ids),
            unconfirmed_staff_ids=sorted(metrics.unconfirmed_staff_ids),
            orphan_staff_ids=sorted(metrics.orphan_staff_ids),
            orphan_cell_keys=sorted(metrics.orphan_cell_keys),
            active_staff_count=metrics.active_staff_count,
            unconfirmed_staff_count=metrics.unconfirmed_staff_count,
            total_hours=metrics.total_hours,
            total_revenue=metrics.total_revenue,
            efficiency=metrics.efficiency,
        ),
        history_depth=board.history_depth,
        just_applied=board.just_applied,
        drag_active=board.drag_active,
    )


def _raise_http(e: BoardError):
    if isinstance(e, UnknownStaffError):
        raise HTTPException(status_code=404, detail=str(e))
    raise HTTPException(status_code=400, detail=str(e))


def _run_command(
    board: ScheduleBoard,
    command: Callable[[], CommandResult],
) -> CommandResponse:
    """Run one engine command and snapshot the board without interleaving."""
    with board_lock:
        try:
            result = command()
        except BoardError as e:
            _raise_http(e)
        return CommandResponse(
            accepted=result.accepted,
            rejection=result.rejection,
            board=build_board_response(board),
        )


def _run_row_command(command: Callable[[], StaffRow]) -> StaffRowResponse:
    with board_lock:
        try:
            row = command()
        except BoardError as e:
            _raise_http(e)
        return StaffRowResponse.model_validate(row)


@router.get("", response_model=BoardResponse)
def get_board_state(board: ScheduleBoard = Depends(get_board)):
    with board_lock:
        return build_board_response(board)


@router.get("/metrics", response_model=MetricsResponse)
def get_metrics(board: ScheduleBoard = Depends(get_board)):
    with board_lock:
        return build_board_response(board).metrics


# ==================== Selection ====================

@router.post("/cells/toggle", response_model=CommandResponse)
def toggle_cell(payload: CellRef, board: ScheduleBoard = Depends(get_board)):
    return _run_command(board, lambda: board.toggle_cell(payload.staff_id, payload.time_index))


@router.post("/drag/begin", response_model=CommandResponse)
def begin_drag(payload: CellRef, board: ScheduleBoard = Depends(get_board)):
    return _run_command(board, lambda: board.begin_drag(payload.staff_id, payload.time_index))


@router.post("/drag/extend", response_model=CommandResponse)
def extend_drag(payload: CellRef, board: ScheduleBoard = Depends(get_board)):
    return _run_command(board, lambda: board.extend_drag(payload.staff_id, payload.time_index))


@router.post("/drag/end", response_model=CommandResponse)
def end_drag(board: ScheduleBoard = Depends(get_board)):
    return _run_command(board, board.end_drag)


@router.delete("/selection", response_model=CommandResponse)
def cancel_selection(board: ScheduleBoard = Depends(get_board)):
    return _run_command(board, board.cancel_selection)


# ==================== Commits ====================

@router.post("/assign", response_model=CommandResponse)
def assign_work(payload: AssignRequest, board: ScheduleBoard = Depends(get_board)):
    return _run_command(board, lambda: board.assign(payload.work_type_id))


@router.post("/confirm", response_model=CommandResponse)
def confirm_all(board: ScheduleBoard = Depends(get_board)):
    return _run_command(board, board.confirm_all)


@router.post("/undo", response_model=CommandResponse)
def undo(board: ScheduleBoard = Depends(get_board)):
    return _run_command(board, board.undo)


# ==================== Rows ====================

@router.post("/rows", response_model=StaffRowResponse, status_code=status.HTTP_201_CREATED)
def add_placeholder_row(board: ScheduleBoard = Depends(get_board)):
    return _run_row_command(board.add_placeholder_row)


@router.put("/rows/{staff_id}/person", response_model=StaffRowResponse)
def resolve_placeholder(
    staff_id: str,
    payload: PersonPayload,
    board: ScheduleBoard = Depends(get_board),
):
    person = Person(**payload.model_dump())
    return _run_row_command(lambda: board.resolve_placeholder(staff_id, person))


@router.delete("/rows/{staff_id}/person", response_model=StaffRowResponse)
def release_row(staff_id: str, board: ScheduleBoard = Depends(get_board)):
    return _run_row_command(lambda: board.release_row(staff_id))


@router.get("/rows", response_model=List[StaffRowResponse])
def list_rows(board: ScheduleBoard = Depends(get_board)):
    with board_lock:
        return [StaffRowResponse.model_validate(row) for row in board.rows]
