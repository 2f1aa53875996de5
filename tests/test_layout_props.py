"""Property tests: committed layouts stay in bounds and overlap-free."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

hypothesis = pytest.importorskip("hypothesis")
from hypothesis import given, settings, strategies as st

from data.repository import Repository
from data.sample_data import generate_demo_rooms
from engine.interaction import RoomCanvasController, GestureOutcome
from engine.layout import find_layout_violations, group_and_offset
from config.defaults import ALL_FLOORS, CANVAS_WIDTH, SINGLE_FLOOR_HEIGHT

ROOM_COUNT = 8

deltas = st.integers(min_value=-2500, max_value=2500)

gestures = st.lists(
    st.tuples(
        st.sampled_from(["drag", "resize"]),
        st.integers(min_value=0, max_value=ROOM_COUNT - 1),
        deltas,
        deltas,
    ),
    min_size=1,
    max_size=25,
)


def make_controller():
    rooms = generate_demo_rooms("owner", ROOM_COUNT)
    repo = Repository({})
    repo.batch_update_rooms(rooms)
    return RoomCanvasController(rooms, repo, edit_mode=True), repo


def snapshot(repo, room_id):
    r = repo.get_room(room_id)
    return r.x, r.y, r.width, r.height


@settings(max_examples=75, deadline=None)
@given(gestures)
def test_commits_preserve_bounds_and_separation(steps):
    controller, repo = make_controller()
    ids = [r.room_id for r in controller.rooms]

    for kind, index, dx, dy in steps:
        room_id = ids[index]
        before = snapshot(repo, room_id)
        if kind == "drag":
            controller.pointer_down(room_id, 0, 0)
            controller.pointer_move(room_id, dx, dy)
            outcome = controller.pointer_up(room_id, dx, dy)
        else:
            controller.resize_start(room_id, 0, 0)
            outcome = controller.resize_end(room_id, dx, dy)

        if outcome != GestureOutcome.COMMITTED:
            assert snapshot(repo, room_id) == before

    stored = repo.get_all_rooms_for_owner("owner")
    assert find_layout_violations(stored) == []
    for r in stored:
        assert r.x >= 0 and r.y >= 0
        assert r.x + r.width <= CANVAS_WIDTH
        assert r.y + r.height <= SINGLE_FLOOR_HEIGHT


@given(st.lists(st.integers(min_value=-3, max_value=12), min_size=1, max_size=10))
def test_floor_bands_follow_descending_floor_order(floors):
    rooms = generate_demo_rooms("owner", len(floors))
    for room, floor in zip(rooms, floors):
        room.floor = floor

    layout = group_and_offset(rooms, ALL_FLOORS)
    assert layout.floors == sorted(set(floors), reverse=True)
    ranks = {}
    for dr in layout.display_rooms:
        ranks.setdefault(dr.room.floor, dr.floor_rank)
    assert sorted(ranks.values()) == list(range(len(ranks)))
    for a in ranks:
        for b in ranks:
            if a > b:
                assert ranks[a] < ranks[b]
