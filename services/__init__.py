"""
Servicios del motor de disponibilidad y timeline de habitaciones
"""

from .availability_service import AvailabilityService
from .room_assignment_service import RoomAssignmentService
from .timeline_service import TimelineService
from .daily_operations_service import DailyOperationsService

__all__ = [
    "AvailabilityService",
    "RoomAssignmentService",
    "TimelineService",
    "DailyOperationsService",
]
