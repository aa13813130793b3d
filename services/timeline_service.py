"""
Timeline de ocupación por habitación para un alojamiento
"""

from datetime import date
from typing import Any, Dict, Optional

from services.repository import RoomAssignmentRepository
from utils.date_range import window
from utils.logging_utils import log_event
from utils.timeline_engine import build_timeline, empty_timeline


class TimelineService:

    @staticmethod
    def build(
        repo: RoomAssignmentRepository,
        accommodation_code: str,
        start_date: date,
        num_days: int,
        min_capacity: Optional[int] = None,
        availability: Optional[str] = None,
        usuario: str = "sistema"
    ) -> Dict[str, Any]:
        """Solo lectura: dos llamadas sobre el mismo período dan el mismo resultado"""
        rooms = repo.list_rooms_by_property(accommodation_code, min_capacity=min_capacity)
        if not rooms:
            log_event("timeline", usuario, "Timeline sin habitaciones", f"accommodation_code={accommodation_code}")
            return empty_timeline(start_date, num_days)

        period = window(start_date, num_days)
        assignments = repo.list_assignments_by_rooms(
            [room.id for room in rooms], date_range_hint=period
        )

        timeline = build_timeline(rooms, assignments, start_date, num_days, availability=availability)

        log_event(
            "timeline", usuario, "Ver timeline",
            f"accommodation_code={accommodation_code} desde={period.start} hasta={period.end} "
            f"habitaciones={len(timeline['rooms'])}"
        )
        return timeline
