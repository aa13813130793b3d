"""
Operaciones del día: llegadas, salidas, estadías en curso y alojados
Usado por recepción y housekeeping.
"""

from datetime import date
from typing import Any, Dict, Iterable, List

from services.repository import RoomAssignmentRepository
from utils.date_range import parse_to_date
from utils.logging_utils import log_event

OPERATION_SETS = ("arrivals", "departures", "stayovers", "staying")


def _guest_payload(guest) -> Dict[str, Any]:
    return {
        "id": guest.id,
        "role": guest.role,
        "first_name": guest.first_name,
        "last_name1": guest.last_name1,
        "last_name2": guest.last_name2,
        "document_type": guest.document_type,
        "document_number": guest.document_number,
        "email": guest.email,
        "phone": guest.phone,
        "main_guest": bool(guest.main_guest),
    }


def _reservation_payload(reservation) -> Dict[str, Any]:
    return {
        "id": reservation.id,
        "establishment_code": reservation.establishment_code,
        "check_in": reservation.check_in,
        "check_out": reservation.check_out,
        "num_guests": reservation.num_guests,
        "num_rooms": reservation.num_rooms,
        "contract_reference": reservation.contract_reference,
        "payment_type": reservation.payment_type,
        "status": reservation.status,
        "guests": [_guest_payload(g) for g in reservation.guests],
        "vehicles": [{"id": v.id, "license_plate": v.license_plate} for v in reservation.vehicles],
        "link_email": None,
        "assigned_rooms": [],
    }


def classify_reservations(reservations: Iterable, day: date) -> Dict[str, List[Dict[str, Any]]]:
    """
    Clasifica cada reserva de forma independiente (puede caer en varios grupos).
    Solo se compara la parte de fecha de check_in / check_out.

    - arrivals:   check_in == day
    - departures: check_out == day
    - stayovers:  check_in < day < check_out
    - staying:    check_in <= day <= check_out (incluye a los tres anteriores)

    Una misma reserva es el mismo dict en todos los grupos donde aparece.
    """
    result: Dict[str, List[Dict[str, Any]]] = {name: [] for name in OPERATION_SETS}

    for reservation in reservations:
        check_in = parse_to_date(reservation.check_in)
        check_out = parse_to_date(reservation.check_out)
        payload = _reservation_payload(reservation)

        if check_in == day:
            result["arrivals"].append(payload)
        if check_out == day:
            result["departures"].append(payload)
        if check_in < day < check_out:
            result["stayovers"].append(payload)
        if check_in <= day <= check_out:
            result["staying"].append(payload)

    return result


class DailyOperationsService:

    @staticmethod
    def classify_day(
        repo: RoomAssignmentRepository,
        day: date,
        usuario: str = "sistema"
    ) -> Dict[str, Any]:
        reservations = repo.list_all_reservations_with_guests_and_vehicles()
        sets = classify_reservations(reservations, day)

        staying_ids = [item["id"] for item in sets["staying"]]
        if staying_ids:
            email_map: Dict[int, str] = {}
            for link in repo.list_links_by_reservation_ids(staying_ids):
                if link.email:
                    email_map[link.accommodation_request_id] = link.email

            rooms_map: Dict[int, List[Dict[str, Any]]] = {}
            for assignment in repo.list_assignments_by_reservation_ids(staying_ids):
                assigned = rooms_map.setdefault(assignment.accommodation_request_id, [])
                if assignment.room is not None:
                    assigned.append({
                        "room_name": assignment.room.room_name,
                        "room_type": assignment.room.room_type,
                    })

            # arrivals/departures/stayovers comparten los dicts de staying
            for item in sets["staying"]:
                item["link_email"] = email_map.get(item["id"])
                item["assigned_rooms"] = rooms_map.get(item["id"], [])

        counts = {name: len(sets[name]) for name in OPERATION_SETS}
        log_event("operaciones", usuario, "Operaciones del día", f"fecha={day.isoformat()} " + " ".join(
            f"{name}={count}" for name, count in counts.items()
        ))

        return {"date": day, **sets, "counts": counts}
