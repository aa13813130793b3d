"""
Endpoint del timeline de habitaciones (grilla día x habitación)
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from config import TIMELINE_DEFAULT_DAYS, TIMELINE_MAX_DAYS
from schemas.timeline import TimelineResponse
from services.errors import RoomAssignmentError
from services.repository import RoomAssignmentRepository
from services.timeline_service import TimelineService
from utils.dependencies import get_repository
from utils.http_errors import to_http_exception
from utils.timezone import get_operational_date


router = APIRouter(prefix="/api/room-timeline", tags=["Room Timeline"])


@router.get("", response_model=TimelineResponse)
def obtener_timeline(
    accommodation_code: str = Query(..., min_length=1, description="Código del alojamiento"),
    start_date: Optional[date] = Query(None, description="Primer día (default: hoy)"),
    days: int = Query(TIMELINE_DEFAULT_DAYS, ge=1, le=TIMELINE_MAX_DAYS, description="Cantidad de días"),
    min_capacity: Optional[int] = Query(None, ge=1, description="Capacidad mínima"),
    availability: Optional[str] = Query(None, pattern="^(occupied|free)$", description="occupied | free"),
    repo: RoomAssignmentRepository = Depends(get_repository)
):
    """
    Habitaciones del alojamiento (por capacidad) y asignaciones por día
    """
    if start_date is None:
        start_date = get_operational_date()

    try:
        return TimelineService.build(
            repo,
            accommodation_code=accommodation_code,
            start_date=start_date,
            num_days=days,
            min_capacity=min_capacity,
            availability=availability,
        )
    except RoomAssignmentError as e:
        raise to_http_exception(e)
