"""
Services para asignaciones de habitación
Contiene lógica de negocio para:
- Alta de asignación (validación de rango, alojamiento, contención y disponibilidad)
- Edición del rango de fechas
- Baja
- Consulta con filtros
"""

from datetime import date
from typing import List, Optional

from models.reserva import RoomAssignment
from services.availability_service import AvailabilityService
from services.errors import (
    InvalidRangeError,
    NotFoundError,
    OutOfReservationRangeError,
    PropertyMismatchError,
    RoomConflictError,
)
from services.repository import RoomAssignmentRepository
from utils.date_range import DateRange
from utils.logging_utils import log_event, log_rechazo
from utils.room_locks import room_locks


def _validar_orden(candidate: DateRange, usuario: str) -> None:
    # Mismo día permitido (retención de cero noches)
    if candidate.is_reversed:
        log_rechazo("asignaciones", usuario, "Rango inválido", f"rango={candidate}")
        raise InvalidRangeError(
            "La fecha de checkout debe ser igual o posterior al check-in",
            check_in_date=candidate.start.isoformat(),
            check_out_date=candidate.end.isoformat(),
        )


def _conflict_error(conflict: RoomAssignment, room_id: int, candidate: DateRange) -> RoomConflictError:
    return RoomConflictError(
        "La habitación ya está asignada en ese rango de fechas",
        room_id=room_id,
        check_in_date=candidate.start.isoformat(),
        check_out_date=candidate.end.isoformat(),
        conflicting_assignment_id=conflict.id,
        conflicting_check_in_date=conflict.check_in_date.isoformat(),
        conflicting_check_out_date=conflict.check_out_date.isoformat(),
    )


class RoomAssignmentService:
    """Servicio para asignar habitaciones físicas a solicitudes de alojamiento"""

    @staticmethod
    def create_assignment(
        repo: RoomAssignmentRepository,
        room_id: int,
        reservation_id: int,
        check_in_date: date,
        check_out_date: date,
        usuario: str = "sistema"
    ) -> RoomAssignment:
        """
        Crea una asignación. Todas las validaciones ocurren antes de escribir.

        Raises:
            InvalidRangeError, NotFoundError, PropertyMismatchError,
            OutOfReservationRangeError, RoomConflictError, StorageError
        """
        candidate = DateRange.of(check_in_date, check_out_date)
        _validar_orden(candidate, usuario)

        room = repo.get_room(room_id)
        if not room:
            raise NotFoundError("Habitación no encontrada", entity="room", id=room_id)

        reservation = repo.get_reservation(reservation_id)
        if not reservation:
            raise NotFoundError("Solicitud de alojamiento no encontrada", entity="accommodation_request", id=reservation_id)

        if room.accommodation_code != reservation.establishment_code:
            log_rechazo(
                "asignaciones", usuario, "Alojamiento distinto",
                f"room={room.accommodation_code} request={reservation.establishment_code}"
            )
            raise PropertyMismatchError(
                "La habitación y la solicitud deben pertenecer al mismo alojamiento",
                room_accommodation_code=room.accommodation_code,
                request_establishment_code=reservation.establishment_code,
            )

        # Contención inclusiva: el día de checkout de la reserva es válido
        stay = DateRange.of(reservation.check_in, reservation.check_out)
        if not stay.contains(candidate):
            log_rechazo("asignaciones", usuario, "Fuera del rango de la reserva", f"asignacion={candidate} reserva={stay}")
            raise OutOfReservationRangeError(
                "Las fechas de la asignación deben estar dentro del rango de la reserva",
                check_in_date=candidate.start.isoformat(),
                check_out_date=candidate.end.isoformat(),
                reservation_check_in=stay.start.isoformat(),
                reservation_check_out=stay.end.isoformat(),
            )

        with room_locks.hold(room.id):
            conflict = AvailabilityService.find_conflict(repo, room.id, candidate)
            if conflict:
                log_rechazo("asignaciones", usuario, "Conflicto de habitación", f"room_id={room.id} conflicto_id={conflict.id}")
                raise _conflict_error(conflict, room.id, candidate)

            assignment = repo.insert_assignment(room.id, reservation.id, candidate.start, candidate.end)

        log_event(
            "asignaciones", usuario, "Crear asignación",
            f"id={assignment.id} room_id={room.id} request_id={reservation.id} rango={candidate}"
        )
        return assignment

    @staticmethod
    def update_assignment(
        repo: RoomAssignmentRepository,
        assignment_id: int,
        check_in_date: Optional[date] = None,
        check_out_date: Optional[date] = None,
        usuario: str = "sistema"
    ) -> RoomAssignment:
        """
        Edita solo el rango de fechas. Los campos ausentes (None) conservan el
        valor guardado. No vuelve a validar contención contra la reserva.
        """
        if check_in_date is not None and check_out_date is not None:
            # Con ambas fechas el rango se valida antes de buscar la asignación
            _validar_orden(DateRange.of(check_in_date, check_out_date), usuario)

        existing = repo.get_assignment(assignment_id)
        if not existing:
            raise NotFoundError("Asignación no encontrada", entity="room_assignment", id=assignment_id)

        candidate = DateRange.of(
            check_in_date if check_in_date is not None else existing.check_in_date,
            check_out_date if check_out_date is not None else existing.check_out_date,
        )
        _validar_orden(candidate, usuario)

        room_id = existing.room_id
        with room_locks.hold(room_id):
            conflict = AvailabilityService.find_conflict(
                repo, room_id, candidate, exclude_assignment_id=assignment_id
            )
            if conflict:
                log_rechazo("asignaciones", usuario, "Conflicto de habitación", f"room_id={room_id} conflicto_id={conflict.id}")
                raise _conflict_error(conflict, room_id, candidate)

            updated = repo.update_assignment(assignment_id, candidate)

        if not updated:
            raise NotFoundError("Asignación no encontrada", entity="room_assignment", id=assignment_id)

        log_event("asignaciones", usuario, "Actualizar asignación", f"id={assignment_id} rango={candidate}")
        return updated

    @staticmethod
    def delete_assignment(
        repo: RoomAssignmentRepository,
        assignment_id: int,
        usuario: str = "sistema"
    ) -> None:
        if not repo.get_assignment(assignment_id):
            raise NotFoundError("Asignación no encontrada", entity="room_assignment", id=assignment_id)

        if not repo.delete_assignment(assignment_id):
            raise NotFoundError("Asignación no encontrada", entity="room_assignment", id=assignment_id)

        log_event("asignaciones", usuario, "Eliminar asignación", f"id={assignment_id}")

    @staticmethod
    def list_assignments(
        repo: RoomAssignmentRepository,
        accommodation_code: Optional[str] = None,
        accommodation_request_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> List[RoomAssignment]:
        """
        Consulta de asignaciones. El filtro de fechas es semiabierto:
        una asignación que sale el día start_date no aparece.
        """
        room_ids = None
        if accommodation_code:
            rooms = repo.list_rooms_by_property(accommodation_code)
            if not rooms:
                return []
            room_ids = [room.id for room in rooms]

        return repo.list_assignments(
            room_ids=room_ids,
            accommodation_request_id=accommodation_request_id,
            start_date=start_date,
            end_date=end_date,
        )
