"""
Traducción de errores del motor a respuestas HTTP
"""
from fastapi import HTTPException, status

from services.errors import (
    InvalidRangeError,
    NotFoundError,
    OutOfReservationRangeError,
    PropertyMismatchError,
    RoomAssignmentError,
    RoomConflictError,
    StorageError,
)

_STATUS_BY_ERROR = (
    (InvalidRangeError, status.HTTP_400_BAD_REQUEST),
    (OutOfReservationRangeError, status.HTTP_400_BAD_REQUEST),
    (PropertyMismatchError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (RoomConflictError, status.HTTP_409_CONFLICT),
)


def status_for(error: RoomAssignmentError) -> int:
    if isinstance(error, StorageError):
        if error.kind == StorageError.CONSTRAINT_VIOLATION:
            return status.HTTP_409_CONFLICT
        if error.kind == StorageError.CONNECTIVITY:
            return status.HTTP_503_SERVICE_UNAVAILABLE
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    for error_class, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: RoomAssignmentError) -> HTTPException:
    return HTTPException(status_code=status_for(error), detail=error.to_dict()["error"])
