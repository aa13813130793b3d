"""
Dependencias compartidas por los endpoints
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from database import conexion
from services.repository import RoomAssignmentRepository, SqlAlchemyRepository


def get_repository(db: Session = Depends(conexion.get_db)) -> RoomAssignmentRepository:
    """Un repositorio nuevo por request, sobre la sesión de ese request"""
    return SqlAlchemyRepository(db)
