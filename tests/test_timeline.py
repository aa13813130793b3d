"""
Tests del timeline de habitaciones
"""

import pytest
from datetime import date
from types import SimpleNamespace

from services.timeline_service import TimelineService
from utils.timeline_engine import build_timeline, empty_timeline


START = date(2025, 1, 1)


class TestTimelineEngine:

    def test_departure_day_is_shown(self, repo):
        room = repo.add_room("101")
        reservation = repo.add_reservation("2025-01-01", "2025-01-10")
        assignment = repo.add_assignment(room, reservation, "2025-01-01", "2025-01-03")

        timeline = build_timeline([room], [assignment], START, 5)
        by_date = timeline["assignments_by_date"]

        for day in ("2025-01-01", "2025-01-02", "2025-01-03"):
            assert [a["id"] for a in by_date[day][room.id]] == [assignment.id]
        assert by_date["2025-01-04"] == {}
        assert by_date["2025-01-05"] == {}

    def test_every_day_is_present(self):
        timeline = build_timeline([], [], date(2025, 1, 30), 3)
        assert list(timeline["assignments_by_date"].keys()) == ["2025-01-30", "2025-01-31", "2025-02-01"]
        assert timeline["start_date"] == date(2025, 1, 30)
        assert timeline["end_date"] == date(2025, 2, 1)
        assert timeline["days"] == 3

    def test_room_payload_and_assignment_summary(self, repo):
        room = repo.add_room("101", room_type="suite", capacity=3)
        reservation = repo.add_reservation("2025-01-01", "2025-01-10", contract_reference="CTR-1")
        repo.add_assignment(room, reservation, "2025-01-02", "2025-01-04")

        timeline = build_timeline([room], repo.assignments.values(), START, 7)

        room_data = timeline["rooms"][0]
        assert room_data["room_name"] == "101"
        assert room_data["capacity"] == 3
        payload = room_data["assignments"][0]
        assert payload["room"] == {"accommodation_code": "HOTEL1", "room_name": "101", "room_type": "suite"}
        assert payload["accommodation_request"]["contract_reference"] == "CTR-1"

    def test_assignments_outside_period_are_dropped(self, repo):
        room = repo.add_room("101")
        reservation = repo.add_reservation("2024-12-01", "2025-02-01")
        before = repo.add_assignment(room, reservation, "2024-12-01", "2024-12-20")
        edge = repo.add_assignment(room, reservation, "2024-12-25", "2025-01-01")
        after = repo.add_assignment(room, reservation, "2025-01-20", "2025-01-25")

        timeline = build_timeline([room], [before, edge, after], START, 7)

        ids = [a["id"] for a in timeline["rooms"][0]["assignments"]]
        assert ids == [edge.id]
        assert [a["id"] for a in timeline["assignments_by_date"]["2025-01-01"][room.id]] == [edge.id]

    def test_availability_filters(self, repo):
        busy = repo.add_room("101")
        free = repo.add_room("102")
        reservation = repo.add_reservation("2025-01-01", "2025-01-10")
        assignment = repo.add_assignment(busy, reservation, "2025-01-02", "2025-01-03")

        occupied = build_timeline([busy, free], [assignment], START, 7, availability="occupied")
        assert [r["id"] for r in occupied["rooms"]] == [busy.id]

        only_free = build_timeline([busy, free], [assignment], START, 7, availability="free")
        assert [r["id"] for r in only_free["rooms"]] == [free.id]
        # Sin filas de habitaciones ocupadas, tampoco hay celdas
        assert all(cells == {} for cells in only_free["assignments_by_date"].values())

    def test_invalid_availability(self):
        with pytest.raises(ValueError):
            build_timeline([], [], START, 7, availability="busy")

    def test_assignment_without_relations_is_skipped(self, repo):
        room = repo.add_room("101")
        orphan = SimpleNamespace(
            id=99, room_id=room.id, room=room, accommodation_request=None,
            check_in_date=date(2025, 1, 1), check_out_date=date(2025, 1, 2),
        )
        timeline = build_timeline([room], [orphan], START, 3)
        assert timeline["rooms"][0]["assignments"] == []
        assert timeline["assignments_by_date"]["2025-01-01"] == {}

    def test_empty_timeline(self):
        timeline = empty_timeline(START, 2)
        assert timeline["rooms"] == []
        assert timeline["assignments_by_date"] == {"2025-01-01": {}, "2025-01-02": {}}


class TestTimelineService:

    def test_rooms_ordered_by_capacity_nulls_last(self, repo):
        unknown = repo.add_room("A", capacity=None)
        big = repo.add_room("B", capacity=4)
        small = repo.add_room("C", capacity=1)

        timeline = TimelineService.build(repo, "HOTEL1", START, 7)
        assert [r["id"] for r in timeline["rooms"]] == [small.id, big.id, unknown.id]

    def test_min_capacity(self, repo):
        repo.add_room("A", capacity=1)
        big = repo.add_room("B", capacity=4)
        repo.add_room("C", capacity=None)

        timeline = TimelineService.build(repo, "HOTEL1", START, 7, min_capacity=2)
        assert [r["id"] for r in timeline["rooms"]] == [big.id]

    def test_property_without_rooms(self, repo):
        repo.add_room("101", accommodation_code="OTRO")
        timeline = TimelineService.build(repo, "HOTEL1", START, 3)
        assert timeline["rooms"] == []
        assert len(timeline["assignments_by_date"]) == 3

    def test_other_property_assignments_are_not_shown(self, repo):
        mine = repo.add_room("101", accommodation_code="HOTEL1")
        theirs = repo.add_room("201", accommodation_code="HOTEL2")
        res_mine = repo.add_reservation("2025-01-01", "2025-01-05", establishment_code="HOTEL1")
        res_theirs = repo.add_reservation("2025-01-01", "2025-01-05", establishment_code="HOTEL2")
        repo.add_assignment(mine, res_mine, "2025-01-01", "2025-01-02")
        repo.add_assignment(theirs, res_theirs, "2025-01-01", "2025-01-02")

        timeline = TimelineService.build(repo, "HOTEL1", START, 3)
        assert list(timeline["assignments_by_date"]["2025-01-01"].keys()) == [mine.id]

    def test_is_read_only_and_repeatable(self, repo):
        room = repo.add_room("101")
        reservation = repo.add_reservation("2025-01-01", "2025-01-10")
        repo.add_assignment(room, reservation, "2025-01-02", "2025-01-05")

        first = TimelineService.build(repo, "HOTEL1", START, 7)
        second = TimelineService.build(repo, "HOTEL1", START, 7)

        assert first == second
        assert len(repo.assignments) == 1
