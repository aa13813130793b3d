from typing import Optional, List
from datetime import date
from pydantic import BaseModel, Field, model_validator, ConfigDict

from schemas.habitacion import RoomSummary
from schemas.reservas import AccommodationRequestSummary


class RoomAssignmentCreate(BaseModel):
    room_id: int = Field(..., gt=0, description="ID de la habitación")
    accommodation_request_id: int = Field(..., gt=0, description="ID de la solicitud de alojamiento")
    check_in_date: date = Field(..., description="Primer día de la asignación")
    check_out_date: date = Field(..., description="Día de salida (libre para otro check-in)")


class RoomAssignmentUpdate(BaseModel):
    """Patch de fechas: solo se aplican los campos presentes"""
    check_in_date: Optional[date] = None
    check_out_date: Optional[date] = None

    @model_validator(mode="before")
    def validar_datos(cls, data):
        if isinstance(data, dict) and ("check_in_date" in data or "check_out_date" in data):
            return data
        raise ValueError("Se requiere check_in_date o check_out_date para actualizar")


class RoomAssignmentRead(BaseModel):
    id: int
    room_id: int
    accommodation_request_id: int
    check_in_date: date
    check_out_date: date
    room: Optional[RoomSummary] = None
    accommodation_request: Optional[AccommodationRequestSummary] = None

    model_config = ConfigDict(from_attributes=True)


class RoomAssignmentList(BaseModel):
    room_assignments: List[RoomAssignmentRead]
