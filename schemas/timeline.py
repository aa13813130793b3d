from typing import Optional, List, Dict
from datetime import date
from pydantic import BaseModel

from schemas.habitacion import RoomSummary
from schemas.reservas import AccommodationRequestSummary


class TimelineAssignment(BaseModel):
    id: int
    room_id: int
    check_in_date: date
    check_out_date: date
    accommodation_request: AccommodationRequestSummary
    room: RoomSummary


class TimelineRoom(BaseModel):
    id: int
    room_name: str
    room_type: Optional[str] = None
    capacity: Optional[int] = None
    assignments: List[TimelineAssignment] = []


class TimelineResponse(BaseModel):
    start_date: date
    end_date: date
    days: int
    rooms: List[TimelineRoom]
    # fecha ISO -> room_id -> asignaciones que cubren ese día
    assignments_by_date: Dict[str, Dict[int, List[TimelineAssignment]]]
