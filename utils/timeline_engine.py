"""
Timeline Engine - grilla día x habitación de un alojamiento
Cálculo puro (sin acceso a base): recibe habitaciones y asignaciones ya
cargadas y arma la estructura que consume el frontend.
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from utils.date_range import DateRange, iter_days, window

OCCUPIED = "occupied"
FREE = "free"
AVAILABILITY_FILTERS = (OCCUPIED, FREE)


def _room_summary(room) -> Dict[str, Any]:
    return {
        "accommodation_code": room.accommodation_code,
        "room_name": room.room_name,
        "room_type": room.room_type,
    }


def _request_summary(request) -> Dict[str, Any]:
    return {
        "id": request.id,
        "check_in": request.check_in,
        "check_out": request.check_out,
        "num_guests": request.num_guests,
        "num_rooms": request.num_rooms,
        "contract_reference": request.contract_reference,
        "establishment_code": request.establishment_code,
        "status": request.status,
    }


def assignment_payload(assignment) -> Dict[str, Any]:
    return {
        "id": assignment.id,
        "room_id": assignment.room_id,
        "check_in_date": assignment.check_in_date,
        "check_out_date": assignment.check_out_date,
        "accommodation_request": _request_summary(assignment.accommodation_request),
        "room": _room_summary(assignment.room),
    }


def empty_timeline(start_date: date, num_days: int) -> Dict[str, Any]:
    period = window(start_date, num_days)
    return {
        "start_date": period.start,
        "end_date": period.end,
        "days": num_days,
        "rooms": [],
        # Todos los días pedidos existen, aunque no haya ocupación
        "assignments_by_date": {day.isoformat(): {} for day in iter_days(start_date, num_days)},
    }


def build_timeline(
    rooms: Iterable,
    assignments: Iterable,
    start_date: date,
    num_days: int,
    availability: Optional[str] = None
) -> Dict[str, Any]:
    """
    Arma el timeline de num_days días desde start_date.

    - rooms: ya ordenadas por capacidad; el orden se conserva.
    - assignments: pueden venir con un prefiltro laxo; acá se descartan las
      que no tocan el período y las que no tienen habitación o solicitud.
    - availability: "occupied" deja solo habitaciones con asignaciones,
      "free" solo las que no tienen.
    - Una asignación aparece en cada día con check_in_date <= día <= check_out_date
      (el día de salida se muestra en la fila de la habitación).
    """
    if availability is not None and availability not in AVAILABILITY_FILTERS:
        raise ValueError(f"Invalid availability filter: {availability}")

    timeline = empty_timeline(start_date, num_days)
    period = window(start_date, num_days)
    days = list(iter_days(start_date, num_days))

    by_room: Dict[int, List] = {}
    for assignment in assignments:
        if assignment.room is None or assignment.accommodation_request is None:
            continue
        assignment_range = DateRange.of(assignment.check_in_date, assignment.check_out_date)
        if not assignment_range.touches(period):
            continue
        by_room.setdefault(assignment.room_id, []).append((assignment, assignment_range))

    for room in rooms:
        room_assignments = by_room.get(room.id, [])

        has_assignments = len(room_assignments) > 0
        if availability == OCCUPIED and not has_assignments:
            continue
        if availability == FREE and has_assignments:
            continue

        room_data = {
            "id": room.id,
            "room_name": room.room_name,
            "room_type": room.room_type,
            "capacity": room.capacity,
            "assignments": [],
        }

        for assignment, assignment_range in room_assignments:
            payload = assignment_payload(assignment)
            room_data["assignments"].append(payload)

            for day in days:
                if assignment_range.covers_day(day):
                    cell = timeline["assignments_by_date"][day.isoformat()].setdefault(room.id, [])
                    cell.append(payload)

        timeline["rooms"].append(room_data)

    return timeline
