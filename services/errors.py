"""
Errores tipados del motor de asignaciones

Cada error lleva un código estable, un mensaje para el usuario final y los
datos necesarios para construirlo (fechas en conflicto, códigos distintos).
"""

from typing import Any, Dict


class RoomAssignmentError(Exception):
    code = "room_assignment_error"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class InvalidRangeError(RoomAssignmentError):
    """check_out_date anterior a check_in_date"""
    code = "invalid_range"


class NotFoundError(RoomAssignmentError):
    code = "not_found"


class PropertyMismatchError(RoomAssignmentError):
    """Habitación y reserva de alojamientos distintos"""
    code = "property_mismatch"


class OutOfReservationRangeError(RoomAssignmentError):
    code = "out_of_reservation_range"


class RoomConflictError(RoomAssignmentError):
    code = "room_conflict"


class StorageError(RoomAssignmentError):
    """
    Falla del almacenamiento subyacente.
    kind: connectivity | constraint_violation | storage
    """
    code = "storage_error"

    CONNECTIVITY = "connectivity"
    CONSTRAINT_VIOLATION = "constraint_violation"
    STORAGE = "storage"

    def __init__(self, message: str, kind: str = STORAGE, **details: Any):
        super().__init__(message, kind=kind, **details)
        self.kind = kind
