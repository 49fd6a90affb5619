from pydantic import BaseModel, Field
from typing import Optional, List, Dict

from shiftboard.services.board import Rejection


class CellRef(BaseModel):
    staff_id: str
    time_index: int = Field(ge=0)


class AssignRequest(BaseModel):
    # null clears the selected cells
    work_type_id: Optional[str] = None


class PersonPayload(BaseModel):
    name: str = Field(min_length=1)
    avatar: str = ""
    tag: str = ""


class StaffRowResponse(BaseModel):
    id: str
    name: str
    avatar: str
    tag: str
    is_placeholder: bool

    class Config:
        from_attributes = True


class WorkTypeResponse(BaseModel):
    id: str
    label: str
    category: str

    class Config:
        from_attributes = True


class PersonResponse(BaseModel):
    name: str
    avatar: str
    tag: str

    class Config:
        from_attributes = True


class AssignmentResponse(BaseModel):
    work_type_id: str
    confirmed: bool

    class Config:
        from_attributes = True


class MetricsResponse(BaseModel):
    active_staff_ids: List[str]
    unconfirmed_staff_ids: List[str]
    orphan_staff_ids: List[str]
    orphan_cell_keys: List[str]
    active_staff_count: int
    unconfirmed_staff_count: int
    total_hours: int
    total_revenue: int
    efficiency: Optional[int]


class BoardResponse(BaseModel):
    rows: List[StaffRowResponse]
    slots: List[str]
    selected_keys: List[str]
    schedule: Dict[str, AssignmentResponse]
    metrics: MetricsResponse
    history_depth: int
    just_applied: bool
    drag_active: bool


class CommandResponse(BaseModel):
    accepted: bool
    rejection: Optional[Rejection] = None
    board: BoardResponse
