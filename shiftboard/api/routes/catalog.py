from typing import List
from fastapi import APIRouter, Depends

from shiftboard.api.deps import get_board
from shiftboard.schemas.board import PersonResponse, WorkTypeResponse
from shiftboard.services.board import ScheduleBoard

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/work-types", response_model=List[WorkTypeResponse])
def list_work_types(board: ScheduleBoard = Depends(get_board)):
    """Work types that can be assigned to selected cells"""
    work_types = board.work_types.values() if board.work_types else []
    return [WorkTypeResponse.model_validate(w) for w in work_types]


@router.get("/people", response_model=List[PersonResponse])
def list_people(board: ScheduleBoard = Depends(get_board)):
    """People available to fill placeholder rows"""
    return [PersonResponse.model_validate(p) for p in board.people]
