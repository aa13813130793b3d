"""
Fixtures compartidos:
- repo: repositorio en memoria para probar los servicios sin base
- db_session / client: sqlite en memoria + TestClient con get_db sobreescrito
"""

import os
import sys
import tempfile
from datetime import datetime
from itertools import count
from pathlib import Path

# Agregar directorio raíz al PYTHONPATH para imports
sys.path.insert(0, str(Path(__file__).parent.parent))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", str(Path(tempfile.gettempdir()) / "alojamientos_test_logs.txt"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from database.conexion import Base, get_db
from models import AccommodationRequest, Guest, Link, Room, RoomAssignment, Vehicle
from services.repository import RoomAssignmentRepository
from utils.date_range import parse_to_date


class InMemoryRepository(RoomAssignmentRepository):
    """Implementación en memoria con la misma semántica que SqlAlchemyRepository"""

    def __init__(self):
        self.rooms = {}
        self.reservations = {}
        self.assignments = {}
        self.links = []
        self._ids = count(1)

    # ---------- helpers de carga para los tests ----------

    def add_room(self, room_name="101", accommodation_code="HOTEL1", room_type="double", capacity=2):
        room = Room(
            id=next(self._ids),
            accommodation_code=accommodation_code,
            room_name=room_name,
            room_type=room_type,
            capacity=capacity,
        )
        self.rooms[room.id] = room
        return room

    def add_reservation(self, check_in, check_out, establishment_code="HOTEL1", guests=(), vehicles=(), **fields):
        reservation = AccommodationRequest(
            id=next(self._ids),
            establishment_code=establishment_code,
            check_in=check_in if isinstance(check_in, datetime) else datetime.combine(parse_to_date(check_in), datetime.min.time()),
            check_out=check_out if isinstance(check_out, datetime) else datetime.combine(parse_to_date(check_out), datetime.min.time()),
            num_guests=fields.pop("num_guests", 2),
            num_rooms=fields.pop("num_rooms", 1),
            status=fields.pop("status", "to check in"),
            **fields,
        )
        reservation.guests = [Guest(id=next(self._ids), request_id=reservation.id, **g) for g in guests]
        reservation.vehicles = [Vehicle(id=next(self._ids), request_id=reservation.id, license_plate=p) for p in vehicles]
        self.reservations[reservation.id] = reservation
        return reservation

    def add_link(self, reservation, email):
        link = Link(id=next(self._ids), url="https://example.test/r", email=email, accommodation_request_id=reservation.id)
        self.links.append(link)
        return link

    def add_assignment(self, room, reservation, check_in_date, check_out_date):
        """Inserta sin pasar por las validaciones del servicio"""
        return self.insert_assignment(room.id, reservation.id, parse_to_date(check_in_date), parse_to_date(check_out_date))

    # ---------- interfaz ----------

    def list_rooms_by_property(self, accommodation_code, min_capacity=None):
        rooms = [r for r in self.rooms.values() if r.accommodation_code == accommodation_code]
        if min_capacity:
            rooms = [r for r in rooms if r.capacity is not None and r.capacity >= min_capacity]
        return sorted(rooms, key=lambda r: (r.capacity is None, r.capacity or 0, r.id))

    def list_assignments_by_room(self, room_id, exclude_id=None):
        return [a for a in self.assignments.values() if a.room_id == room_id and a.id != exclude_id]

    def list_assignments_by_rooms(self, room_ids, date_range_hint=None):
        result = [a for a in self.assignments.values() if a.room_id in set(room_ids)]
        if date_range_hint is not None:
            result = [
                a for a in result
                if a.check_in_date <= date_range_hint.end or a.check_out_date >= date_range_hint.start
            ]
        return sorted(result, key=lambda a: (a.check_in_date, a.id))

    def list_assignments_by_reservation_ids(self, reservation_ids):
        ids = set(reservation_ids)
        return [a for a in self.assignments.values() if a.accommodation_request_id in ids]

    def list_assignments(self, room_ids=None, accommodation_request_id=None, start_date=None, end_date=None):
        result = list(self.assignments.values())
        if room_ids is not None:
            result = [a for a in result if a.room_id in set(room_ids)]
        if accommodation_request_id is not None:
            result = [a for a in result if a.accommodation_request_id == accommodation_request_id]
        if start_date is not None:
            result = [a for a in result if a.check_out_date > start_date]
        if end_date is not None:
            result = [a for a in result if a.check_in_date < end_date]
        return sorted(result, key=lambda a: (a.check_in_date, a.id))

    def get_room(self, room_id):
        return self.rooms.get(room_id)

    def get_reservation(self, reservation_id):
        return self.reservations.get(reservation_id)

    def get_assignment(self, assignment_id):
        return self.assignments.get(assignment_id)

    def insert_assignment(self, room_id, accommodation_request_id, check_in_date, check_out_date):
        assignment = RoomAssignment(
            id=next(self._ids),
            room_id=room_id,
            accommodation_request_id=accommodation_request_id,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
        )
        assignment.room = self.rooms.get(room_id)
        assignment.accommodation_request = self.reservations.get(accommodation_request_id)
        self.assignments[assignment.id] = assignment
        return assignment

    def update_assignment(self, assignment_id, date_range):
        assignment = self.assignments.get(assignment_id)
        if assignment is None:
            return None
        assignment.check_in_date = date_range.start
        assignment.check_out_date = date_range.end
        return assignment

    def delete_assignment(self, assignment_id):
        return self.assignments.pop(assignment_id, None) is not None

    def list_all_reservations_with_guests_and_vehicles(self):
        return sorted(self.reservations.values(), key=lambda r: (r.check_in, r.id))

    def list_links_by_reservation_ids(self, reservation_ids):
        ids = set(reservation_ids)
        return [link for link in self.links if link.accommodation_request_id in ids]


@pytest.fixture
def repo():
    return InMemoryRepository()


# ========================================================================
# SQLITE + TESTCLIENT
# ========================================================================

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=test_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session):
    from main import app

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
