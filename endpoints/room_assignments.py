"""
Endpoints de asignaciones de habitación
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Body, Depends, Path, Query, status

from schemas.asignaciones import (
    RoomAssignmentCreate,
    RoomAssignmentList,
    RoomAssignmentRead,
    RoomAssignmentUpdate,
)
from services.errors import RoomAssignmentError
from services.repository import RoomAssignmentRepository
from services.room_assignment_service import RoomAssignmentService
from utils.dependencies import get_repository
from utils.http_errors import to_http_exception


router = APIRouter(prefix="/api/room-assignments", tags=["Room Assignments"])


@router.get("", response_model=RoomAssignmentList)
def listar_asignaciones(
    accommodation_code: Optional[str] = Query(None, description="Código del alojamiento"),
    accommodation_request_id: Optional[int] = Query(None, gt=0, description="ID de la solicitud"),
    start_date: Optional[date] = Query(None, description="Desde (el día de checkout no cuenta)"),
    end_date: Optional[date] = Query(None, description="Hasta (exclusivo)"),
    repo: RoomAssignmentRepository = Depends(get_repository)
):
    """
    Lista asignaciones con su habitación y solicitud, por fecha de check-in
    """
    try:
        assignments = RoomAssignmentService.list_assignments(
            repo,
            accommodation_code=accommodation_code,
            accommodation_request_id=accommodation_request_id,
            start_date=start_date,
            end_date=end_date,
        )
    except RoomAssignmentError as e:
        raise to_http_exception(e)

    return {"room_assignments": assignments}


@router.post("", response_model=RoomAssignmentRead, status_code=status.HTTP_201_CREATED)
def crear_asignacion(
    req: RoomAssignmentCreate,
    repo: RoomAssignmentRepository = Depends(get_repository)
):
    """
    Asigna una habitación a una solicitud de alojamiento.
    409 si la habitación ya está asignada en ese rango.
    """
    try:
        return RoomAssignmentService.create_assignment(
            repo,
            room_id=req.room_id,
            reservation_id=req.accommodation_request_id,
            check_in_date=req.check_in_date,
            check_out_date=req.check_out_date,
        )
    except RoomAssignmentError as e:
        raise to_http_exception(e)


@router.patch("/{assignment_id}", response_model=RoomAssignmentRead)
def actualizar_asignacion(
    assignment_id: int = Path(..., gt=0),
    req: RoomAssignmentUpdate = Body(...),
    repo: RoomAssignmentRepository = Depends(get_repository)
):
    """
    Cambia el rango de fechas de una asignación (no la habitación ni la solicitud)
    """
    cambios = req.model_dump(exclude_unset=True)
    try:
        return RoomAssignmentService.update_assignment(repo, assignment_id, **cambios)
    except RoomAssignmentError as e:
        raise to_http_exception(e)


@router.delete("/{assignment_id}")
def eliminar_asignacion(
    assignment_id: int = Path(..., gt=0),
    repo: RoomAssignmentRepository = Depends(get_repository)
):
    try:
        RoomAssignmentService.delete_assignment(repo, assignment_id)
    except RoomAssignmentError as e:
        raise to_http_exception(e)

    return {"success": True}
