"""
Endpoint de operaciones del día (llegadas, salidas, estadías)
"""
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from schemas.operaciones import DailyOperationsResponse
from services.daily_operations_service import DailyOperationsService
from services.errors import RoomAssignmentError
from services.repository import RoomAssignmentRepository
from utils.dependencies import get_repository
from utils.http_errors import to_http_exception


router = APIRouter(prefix="/api/daily-operations", tags=["Daily Operations"])


@router.get("", response_model=DailyOperationsResponse)
def obtener_operaciones_del_dia(
    fecha: str = Query(..., alias="date", pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD"),
    repo: RoomAssignmentRepository = Depends(get_repository)
):
    try:
        dia = date.fromisoformat(fecha)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Fecha inválida. Usar YYYY-MM-DD"
        )

    try:
        return DailyOperationsService.classify_day(repo, dia)
    except RoomAssignmentError as e:
        raise to_http_exception(e)
