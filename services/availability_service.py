"""
Verificación de disponibilidad de una habitación para un rango de fechas
"""

from typing import Optional

from models.reserva import RoomAssignment
from services.repository import RoomAssignmentRepository
from utils.date_range import DateRange


class AvailabilityService:
    """Servicio sin efectos secundarios: solo lee asignaciones de la habitación"""

    @staticmethod
    def find_conflict(
        repo: RoomAssignmentRepository,
        room_id: int,
        candidate: DateRange,
        exclude_assignment_id: Optional[int] = None
    ) -> Optional[RoomAssignment]:
        """
        Primera asignación de la habitación que se solapa con candidate.

        Regla semiabierta: existing.check_in < candidate.end AND
        existing.check_out > candidate.start. Una reserva 1-5 y otra 5-10
        NO se solapan (el día 5 es checkout de una y check-in de la otra).
        """
        for existing in repo.list_assignments_by_room(room_id, exclude_id=exclude_assignment_id):
            existing_range = DateRange.of(existing.check_in_date, existing.check_out_date)
            if existing_range.overlaps(candidate):
                return existing
        return None

    @staticmethod
    def is_available(
        repo: RoomAssignmentRepository,
        room_id: int,
        candidate: DateRange,
        exclude_assignment_id: Optional[int] = None
    ) -> bool:
        return AvailabilityService.find_conflict(repo, room_id, candidate, exclude_assignment_id) is None
