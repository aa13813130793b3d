"""
Repositorio de habitaciones, solicitudes y asignaciones

El motor solo conoce la interfaz RoomAssignmentRepository. La implementación
SQLAlchemy envuelve la sesión de cada request (nunca un singleton global) y
traduce toda falla de SQLAlchemy a StorageError.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date
from functools import wraps
from typing import Callable, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from models.habitacion import Room
from models.reserva import AccommodationRequest, RoomAssignment
from models.cliente import Link
from services.errors import StorageError
from utils.date_range import DateRange
from utils.logging_utils import log_event


class RoomAssignmentRepository(ABC):
    """Operaciones de almacenamiento que consume el motor de disponibilidad"""

    @abstractmethod
    def list_rooms_by_property(self, accommodation_code: str, min_capacity: Optional[int] = None) -> List[Room]:
        """Habitaciones del alojamiento por capacidad ascendente (nulos al final)"""
        raise NotImplementedError

    @abstractmethod
    def list_assignments_by_room(self, room_id: int, exclude_id: Optional[int] = None) -> List[RoomAssignment]:
        raise NotImplementedError

    @abstractmethod
    def list_assignments_by_rooms(
        self, room_ids: Sequence[int], date_range_hint: Optional[DateRange] = None
    ) -> List[RoomAssignment]:
        """Asignaciones con su habitación y solicitud, ordenadas por check_in_date"""
        raise NotImplementedError

    @abstractmethod
    def list_assignments_by_reservation_ids(self, reservation_ids: Sequence[int]) -> List[RoomAssignment]:
        raise NotImplementedError

    @abstractmethod
    def list_assignments(
        self,
        room_ids: Optional[Sequence[int]] = None,
        accommodation_request_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[RoomAssignment]:
        """Filtro de fechas semiabierto: el día de checkout no cuenta como ocupado"""
        raise NotImplementedError

    @abstractmethod
    def get_room(self, room_id: int) -> Optional[Room]:
        raise NotImplementedError

    @abstractmethod
    def get_reservation(self, reservation_id: int) -> Optional[AccommodationRequest]:
        raise NotImplementedError

    @abstractmethod
    def get_assignment(self, assignment_id: int) -> Optional[RoomAssignment]:
        raise NotImplementedError

    @abstractmethod
    def insert_assignment(
        self, room_id: int, accommodation_request_id: int, check_in_date: date, check_out_date: date
    ) -> RoomAssignment:
        raise NotImplementedError

    @abstractmethod
    def update_assignment(self, assignment_id: int, date_range: DateRange) -> Optional[RoomAssignment]:
        """None si la asignación ya no existe"""
        raise NotImplementedError

    @abstractmethod
    def delete_assignment(self, assignment_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def list_all_reservations_with_guests_and_vehicles(self) -> List[AccommodationRequest]:
        raise NotImplementedError

    @abstractmethod
    def list_links_by_reservation_ids(self, reservation_ids: Sequence[int]) -> List[Link]:
        """Registros con accommodation_request_id y email"""
        raise NotImplementedError


def translate_storage_errors(func: Callable) -> Callable:
    """
    Convierte SQLAlchemyError en StorageError y hace rollback de la sesión.
    No reintenta: el error sube tal cual al llamador.
    """
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except SQLAlchemyError as e:
            self.db.rollback()
            if isinstance(e, IntegrityError):
                kind = StorageError.CONSTRAINT_VIOLATION
            elif isinstance(e, (OperationalError, InterfaceError)):
                kind = StorageError.CONNECTIVITY
            else:
                kind = StorageError.STORAGE
            log_event(
                "repositorio", "sistema", f"Error en {func.__name__}", f"kind={kind} error={str(e)}",
                nivel=logging.ERROR
            )
            raise StorageError(f"Error de almacenamiento en {func.__name__}", kind=kind) from e
    return wrapper


class SqlAlchemyRepository(RoomAssignmentRepository):

    def __init__(self, db: Session):
        self.db = db

    def _assignments_query(self):
        return self.db.query(RoomAssignment).options(
            joinedload(RoomAssignment.room),
            joinedload(RoomAssignment.accommodation_request),
        )

    @translate_storage_errors
    def list_rooms_by_property(self, accommodation_code, min_capacity=None):
        query = self.db.query(Room).filter(Room.accommodation_code == accommodation_code)
        if min_capacity:
            query = query.filter(Room.capacity >= min_capacity)
        return query.order_by(Room.capacity.asc().nulls_last(), Room.id.asc()).all()

    @translate_storage_errors
    def list_assignments_by_room(self, room_id, exclude_id=None):
        query = self.db.query(RoomAssignment).filter(RoomAssignment.room_id == room_id)
        if exclude_id is not None:
            query = query.filter(RoomAssignment.id != exclude_id)
        return query.all()

    @translate_storage_errors
    def list_assignments_by_rooms(self, room_ids, date_range_hint=None):
        if not room_ids:
            return []
        query = self._assignments_query().filter(RoomAssignment.room_id.in_(list(room_ids)))
        if date_range_hint is not None:
            # Prefiltro laxo; el recorte exacto al período se hace en memoria
            query = query.filter(
                (RoomAssignment.check_in_date <= date_range_hint.end)
                | (RoomAssignment.check_out_date >= date_range_hint.start)
            )
        return query.order_by(RoomAssignment.check_in_date.asc(), RoomAssignment.id.asc()).all()

    @translate_storage_errors
    def list_assignments_by_reservation_ids(self, reservation_ids):
        if not reservation_ids:
            return []
        return (
            self._assignments_query()
            .filter(RoomAssignment.accommodation_request_id.in_(list(reservation_ids)))
            .order_by(RoomAssignment.id.asc())
            .all()
        )

    @translate_storage_errors
    def list_assignments(self, room_ids=None, accommodation_request_id=None, start_date=None, end_date=None):
        query = self._assignments_query()
        if room_ids is not None:
            query = query.filter(RoomAssignment.room_id.in_(list(room_ids)))
        if accommodation_request_id is not None:
            query = query.filter(RoomAssignment.accommodation_request_id == accommodation_request_id)
        if start_date is not None:
            query = query.filter(RoomAssignment.check_out_date > start_date)
        if end_date is not None:
            query = query.filter(RoomAssignment.check_in_date < end_date)
        return query.order_by(RoomAssignment.check_in_date.asc(), RoomAssignment.id.asc()).all()

    @translate_storage_errors
    def get_room(self, room_id):
        return self.db.query(Room).filter(Room.id == room_id).first()

    @translate_storage_errors
    def get_reservation(self, reservation_id):
        return self.db.query(AccommodationRequest).filter(AccommodationRequest.id == reservation_id).first()

    @translate_storage_errors
    def get_assignment(self, assignment_id):
        return self._assignments_query().filter(RoomAssignment.id == assignment_id).first()

    @translate_storage_errors
    def insert_assignment(self, room_id, accommodation_request_id, check_in_date, check_out_date):
        assignment = RoomAssignment(
            room_id=room_id,
            accommodation_request_id=accommodation_request_id,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
        )
        self.db.add(assignment)
        self.db.commit()
        self.db.refresh(assignment)
        return assignment

    @translate_storage_errors
    def update_assignment(self, assignment_id, date_range):
        assignment = self.db.query(RoomAssignment).filter(RoomAssignment.id == assignment_id).first()
        if not assignment:
            return None
        assignment.check_in_date = date_range.start
        assignment.check_out_date = date_range.end
        self.db.commit()
        self.db.refresh(assignment)
        return assignment

    @translate_storage_errors
    def delete_assignment(self, assignment_id):
        assignment = self.db.query(RoomAssignment).filter(RoomAssignment.id == assignment_id).first()
        if not assignment:
            return False
        self.db.delete(assignment)
        self.db.commit()
        return True

    @translate_storage_errors
    def list_all_reservations_with_guests_and_vehicles(self):
        return (
            self.db.query(AccommodationRequest)
            .options(
                selectinload(AccommodationRequest.guests),
                selectinload(AccommodationRequest.vehicles),
            )
            .order_by(AccommodationRequest.check_in.asc(), AccommodationRequest.id.asc())
            .all()
        )

    @translate_storage_errors
    def list_links_by_reservation_ids(self, reservation_ids):
        if not reservation_ids:
            return []
        return (
            self.db.query(Link)
            .filter(Link.accommodation_request_id.in_(list(reservation_ids)))
            .order_by(Link.id.asc())
            .all()
        )
