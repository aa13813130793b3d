from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from schemas.habitacion import AssignedRoom


class AccommodationRequestSummary(BaseModel):
    id: int
    check_in: datetime
    check_out: datetime
    num_guests: Optional[int] = None
    num_rooms: Optional[int] = None
    contract_reference: Optional[str] = None
    establishment_code: str
    status: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class GuestRead(BaseModel):
    id: int
    role: Optional[str] = None
    first_name: Optional[str] = None
    last_name1: Optional[str] = None
    last_name2: Optional[str] = None
    document_type: Optional[str] = None
    document_number: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    main_guest: bool = False


class VehicleRead(BaseModel):
    id: int
    license_plate: str


class DailyReservation(AccommodationRequestSummary):
    """Solicitud enriquecida para la vista de operaciones del día"""
    payment_type: Optional[str] = None
    guests: List[GuestRead] = []
    vehicles: List[VehicleRead] = []
    link_email: Optional[str] = None
    assigned_rooms: List[AssignedRoom] = []
