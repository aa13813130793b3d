from typing import Optional
from pydantic import BaseModel, ConfigDict


class RoomSummary(BaseModel):
    """Resumen de habitación que viaja junto a cada asignación"""
    accommodation_code: str
    room_name: str
    room_type: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class AssignedRoom(BaseModel):
    room_name: str
    room_type: Optional[str] = None
