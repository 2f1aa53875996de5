"""Tests for the floor layout engine."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.room import Room
from engine.layout import (
    group_and_offset,
    check_collision,
    rects_overlap,
    find_layout_violations,
    band_offset,
)
from config.defaults import ALL_FLOORS, SINGLE_FLOOR_HEIGHT, FLOOR_BAND_HEIGHT


def make_room(room_id="A", floor=2, x=0, y=0, width=200, height=120, number=None):
    return Room(
        room_id=room_id,
        owner_id="owner",
        number=number or room_id,
        floor=floor,
        x=x, y=y, width=width, height=height,
    )


class TestGroupAndOffset:
    def test_two_floors_all_mode(self):
        rooms = [make_room("low", floor=1, y=20), make_room("high", floor=2, y=20)]

        layout = group_and_offset(rooms, ALL_FLOORS)
        assert layout.floors == [2, 1]
        assert layout.display_y_of("high") == 120
        assert layout.display_y_of("low") == 1020
        assert layout.total_height == 2 * FLOOR_BAND_HEIGHT

    def test_highest_floor_is_topmost(self):
        rooms = [make_room(f"r{f}", floor=f) for f in (1, 3, 2)]

        layout = group_and_offset(rooms, ALL_FLOORS)
        ranks = {dr.room.floor: dr.floor_rank for dr in layout.display_rooms}
        assert ranks == {3: 0, 2: 1, 1: 2}
        assert band_offset(ranks[3]) < band_offset(ranks[2]) < band_offset(ranks[1])

    def test_single_floor_keeps_local_y(self):
        rooms = [make_room("a", floor=1, y=40), make_room("b", floor=2, y=60)]

        layout = group_and_offset(rooms, 2)
        assert [dr.room_id for dr in layout.display_rooms] == ["b"]
        assert layout.display_y_of("b") == 60
        assert layout.total_height == SINGLE_FLOOR_HEIGHT

    def test_single_floor_accepts_string_floor(self):
        rooms = [make_room("a", floor=3, y=10)]
        layout = group_and_offset(rooms, "3")
        assert layout.display_y_of("a") == 10

    def test_groups_keep_input_order(self):
        rooms = [make_room("b", floor=2), make_room("a", floor=2, x=300), make_room("c", floor=1)]

        layout = group_and_offset(rooms, ALL_FLOORS)
        assert [r.room_id for r in layout.rooms_by_floor[2]] == ["b", "a"]
        assert [r.room_id for r in layout.rooms_by_floor[1]] == ["c"]

    def test_repeated_calls_are_identical(self):
        rooms = [make_room("a", floor=1, y=5), make_room("b", floor=4, y=7), make_room("c", floor=2)]

        first = group_and_offset(rooms, ALL_FLOORS)
        second = group_and_offset(rooms, ALL_FLOORS)
        assert [dr.display_y for dr in first.display_rooms] == [dr.display_y for dr in second.display_rooms]
        assert first.total_height == second.total_height

    def test_empty_room_list(self):
        layout = group_and_offset([], ALL_FLOORS)
        assert layout.floors == []
        assert layout.display_rooms == []
        assert layout.total_height == 0

    def test_display_y_is_not_written_back(self):
        room = make_room("a", floor=1, y=20)
        group_and_offset([room, make_room("b", floor=2)], ALL_FLOORS)
        assert room.y == 20


class TestCheckCollision:
    def test_overlapping_peer_rejected(self):
        a = make_room("A", floor=2, x=0, y=0)
        b = make_room("B", floor=2, x=600, y=400)
        assert check_collision(b, [a, b], 150, 50) is True

    def test_touching_edge_allowed(self):
        a = make_room("A", floor=2, x=0, y=0)
        b = make_room("B", floor=2, x=600, y=400)
        assert check_collision(b, [a, b], 200, 0) is False

    def test_resize_past_canvas_width(self):
        room = make_room("A", x=1900, y=700, width=100, height=60)
        assert check_collision(room, [room], 1900, 700, proposed_width=200) is True

    def test_resize_within_canvas(self):
        room = make_room("A", x=1800, y=680, width=100, height=60)
        assert check_collision(room, [room], 1800, 680, proposed_width=200, proposed_height=120) is False

    def test_negative_position_rejected(self):
        room = make_room("A", x=10, y=10)
        assert check_collision(room, [room], -1, 10) is True
        assert check_collision(room, [room], 10, -1) is True

    def test_bottom_edge(self):
        room = make_room("A", height=120)
        assert check_collision(room, [room], 0, SINGLE_FLOOR_HEIGHT - 120) is False
        assert check_collision(room, [room], 0, SINGLE_FLOOR_HEIGHT - 119) is True

    def test_other_floors_ignored(self):
        a = make_room("A", floor=1, x=0, y=0)
        b = make_room("B", floor=2, x=600, y=400)
        assert check_collision(b, [a, b], 0, 0) is False

    def test_subject_does_not_collide_with_itself(self):
        room = make_room("A", x=100, y=100)
        assert check_collision(room, [room], 110, 110) is False

    def test_no_peers(self):
        room = make_room("A", floor=9)
        assert check_collision(room, [], 50, 50) is False


class TestRectsOverlap:
    def test_contained(self):
        assert rects_overlap((0, 0, 100, 100), (10, 10, 20, 20))

    def test_corner_touch(self):
        assert not rects_overlap((0, 0, 100, 100), (100, 100, 50, 50))

    def test_separated_vertically(self):
        assert not rects_overlap((0, 0, 100, 100), (0, 150, 100, 100))


class TestFindLayoutViolations:
    def test_clean_layout(self):
        rooms = [make_room("A", x=0), make_room("B", x=200)]
        assert find_layout_violations(rooms) == []

    def test_reports_overlap_and_bounds(self):
        rooms = [
            make_room("A", x=0),
            make_room("B", x=100),
            make_room("C", floor=3, x=1900),
        ]
        violations = find_layout_violations(rooms)
        assert len(violations) == 2
        assert any("A and B overlap on floor 2" in v for v in violations)
        assert any("Room C" in v for v in violations)

    def test_same_position_on_different_floors(self):
        rooms = [make_room("A", floor=1), make_room("B", floor=2)]
        assert find_layout_violations(rooms) == []


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
