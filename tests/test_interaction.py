"""Tests for drag/resize gesture handling."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.room import Room
from data.repository import Repository
from engine.interaction import RoomCanvasController, GestureKind, GestureOutcome
from config.defaults import ALL_FLOORS, MIN_ROOM_WIDTH, MIN_ROOM_HEIGHT


def make_room(room_id="A", floor=2, x=0, y=0, width=200, height=120):
    return Room(room_id=room_id, owner_id="owner", number=room_id, floor=floor,
                x=x, y=y, width=width, height=height)


def make_controller(rooms, edit_mode=True, **callbacks):
    repo = Repository({})
    repo.batch_update_rooms(rooms)
    controller = RoomCanvasController(rooms, repo, edit_mode=edit_mode, **callbacks)
    return controller, repo


def drag(controller, room_id, dx, dy, start=(100, 100)):
    controller.pointer_down(room_id, *start)
    controller.pointer_move(room_id, start[0] + dx, start[1] + dy)
    return controller.pointer_up(room_id, start[0] + dx, start[1] + dy)


class TestDrag:
    def test_accepted_drag_commits(self):
        commits = []
        controller, repo = make_controller(
            [make_room("A"), make_room("B", x=600, y=400)],
            on_commit_position=lambda rid, x, y: commits.append((rid, x, y)),
        )

        outcome = drag(controller, "B", -400, -400)
        assert outcome == GestureOutcome.COMMITTED
        assert commits == [("B", 200, 0)]
        assert (repo.get_room("B").x, repo.get_room("B").y) == (200, 0)
        assert (controller.get_room("B").x, controller.get_room("B").y) == (200, 0)

    def test_overlapping_drag_rejected(self):
        commits = []
        controller, repo = make_controller(
            [make_room("A"), make_room("B", x=600, y=400)],
            on_commit_position=lambda *args: commits.append(args),
        )

        outcome = drag(controller, "B", -450, -350)
        assert outcome == GestureOutcome.REJECTED
        assert commits == []
        stored = repo.get_room("B")
        assert (stored.x, stored.y, stored.width, stored.height) == (600, 400, 200, 120)
        assert controller.get_room("B").x == 600

    def test_out_of_bounds_drag_rejected(self):
        controller, repo = make_controller([make_room("A", x=10, y=10)])
        assert drag(controller, "A", -20, 0) == GestureOutcome.REJECTED
        assert repo.get_room("A").x == 10

    def test_release_point_decides_final_position(self):
        controller, repo = make_controller([make_room("A", x=100, y=100)])
        controller.pointer_down("A", 0, 0)
        controller.pointer_move("A", 50, 0)
        # Released further along without an intermediate move event
        assert controller.pointer_up("A", 80, 30) == GestureOutcome.COMMITTED
        assert (repo.get_room("A").x, repo.get_room("A").y) == (180, 130)

    def test_preview_offset_is_visual_only(self):
        controller, repo = make_controller([make_room("A", x=100, y=100)])
        controller.pointer_down("A", 0, 0)
        assert controller.pointer_move("A", 30, 40) == (30, 40)
        assert controller.preview_rect("A") == (130, 140, 200, 120)
        assert repo.get_room("A").x == 100
        assert controller.get_room("A").x == 100

    def test_drag_on_other_floor_ignores_peers(self):
        controller, repo = make_controller([make_room("A", floor=1), make_room("B", floor=2, x=600)])
        assert drag(controller, "B", -600, 0) == GestureOutcome.COMMITTED
        assert repo.get_room("B").x == 0


class TestClickVsDrag:
    def test_small_movement_is_a_click_outside_edit_mode(self):
        selected = []
        controller, _ = make_controller([make_room("A")], edit_mode=False,
                                        on_select=lambda room: selected.append(room.room_id))

        assert drag(controller, "A", 3, 4) == GestureOutcome.CLICK
        assert selected == ["A"]

    def test_large_movement_outside_edit_mode_still_selects(self):
        selected = []
        controller, repo = make_controller([make_room("A", x=100)], edit_mode=False,
                                           on_select=lambda room: selected.append(room.room_id))

        assert drag(controller, "A", 300, 0) == GestureOutcome.CLICK
        assert selected == ["A"]
        assert repo.get_room("A").x == 100

    def test_threshold_distance_is_not_a_drag(self):
        controller, repo = make_controller([make_room("A", x=100)])
        controller.pointer_down("A", 0, 0)
        assert controller.pointer_move("A", 3, 4) is None  # Exactly 5px
        assert controller.gesture("A").kind == GestureKind.PRESS
        assert controller.pointer_up("A", 3, 4) == GestureOutcome.CLICK
        assert repo.get_room("A").x == 100

    def test_click_in_edit_mode_selects(self):
        selected = []
        controller, repo = make_controller([make_room("A", x=100)],
                                           on_select=lambda room: selected.append(room.room_id))
        controller.pointer_down("A", 0, 0)
        controller.pointer_move("A", 2, 2)
        assert controller.pointer_up("A", 2, 2) == GestureOutcome.CLICK
        assert selected == ["A"]
        assert repo.get_room("A").x == 100

    def test_drag_stays_active_after_returning_near_start(self):
        controller, repo = make_controller([make_room("A", x=100, y=100)])
        controller.pointer_down("A", 0, 0)
        controller.pointer_move("A", 20, 0)
        controller.pointer_move("A", 2, 0)
        assert controller.gesture("A").kind == GestureKind.DRAG
        assert controller.pointer_up("A", 2, 0) == GestureOutcome.COMMITTED
        assert repo.get_room("A").x == 102

    def test_up_without_down_is_ignored(self):
        controller, _ = make_controller([make_room("A")])
        assert controller.pointer_up("A", 10, 10) == GestureOutcome.IGNORED

    def test_unknown_room(self):
        controller, _ = make_controller([make_room("A")])
        assert controller.pointer_down("missing", 0, 0) is None
        assert controller.resize_start("missing", 0, 0) is None


class TestResize:
    def test_accepted_resize_commits(self):
        sizes = []
        controller, repo = make_controller(
            [make_room("A", x=100, y=100)],
            on_commit_size=lambda rid, w, h: sizes.append((rid, w, h)),
        )
        controller.resize_start("A", 300, 220)
        assert controller.resize_move("A", 350, 260) == (250, 160)
        assert controller.resize_end("A", 350, 260) == GestureOutcome.COMMITTED
        assert sizes == [("A", 250, 160)]
        stored = repo.get_room("A")
        assert (stored.x, stored.y, stored.width, stored.height) == (100, 100, 250, 160)

    def test_resize_clamped_to_minimum(self):
        controller, repo = make_controller([make_room("A", x=100, y=100)])
        controller.resize_start("A", 0, 0)
        assert controller.resize_end("A", -500, -500) == GestureOutcome.COMMITTED
        stored = repo.get_room("A")
        assert (stored.width, stored.height) == (MIN_ROOM_WIDTH, MIN_ROOM_HEIGHT)

    def test_resize_past_canvas_rejected(self):
        controller, repo = make_controller([make_room("A", x=1900, y=700, width=100, height=60)])
        controller.resize_start("A", 0, 0)
        assert controller.resize_end("A", 100, 0) == GestureOutcome.REJECTED
        assert repo.get_room("A").width == 100

    def test_resize_into_peer_rejected(self):
        controller, repo = make_controller([make_room("A"), make_room("B", x=250)])
        controller.resize_start("A", 0, 0)
        assert controller.resize_end("A", 60, 0) == GestureOutcome.REJECTED
        assert repo.get_room("A").width == 200

    def test_resize_requires_edit_mode(self):
        controller, _ = make_controller([make_room("A")], edit_mode=False)
        assert controller.resize_start("A", 0, 0) is None
        assert controller.resize_end("A", 50, 50) == GestureOutcome.IGNORED

    def test_resize_never_starts_a_drag(self):
        controller, repo = make_controller([make_room("A", x=100, y=100)])
        controller.pointer_down("A", 0, 0)
        controller.resize_start("A", 0, 0)
        assert controller.pointer_move("A", 50, 50) is None
        assert controller.pointer_up("A", 50, 50) == GestureOutcome.IGNORED
        assert controller.resize_end("A", 50, 50) == GestureOutcome.COMMITTED
        stored = repo.get_room("A")
        assert (stored.x, stored.y) == (100, 100)
        assert (stored.width, stored.height) == (250, 170)

    def test_preview_during_resize(self):
        controller, _ = make_controller([make_room("A", x=10, y=10)])
        controller.resize_start("A", 0, 0)
        controller.resize_move("A", 40, -100)
        assert controller.preview_rect("A") == (10, 10, 240, MIN_ROOM_HEIGHT)


class TestControllerState:
    def test_gestures_are_independent_per_room(self):
        controller, repo = make_controller([make_room("A"), make_room("B", x=600)])
        controller.pointer_down("A", 0, 0)
        controller.pointer_down("B", 0, 0)
        controller.pointer_move("A", 0, 300)
        controller.pointer_move("B", 0, 200)
        assert controller.pointer_up("B", 0, 200) == GestureOutcome.COMMITTED
        assert controller.gesture("A").kind == GestureKind.DRAG
        assert controller.pointer_up("A", 0, 300) == GestureOutcome.COMMITTED
        assert repo.get_room("A").y == 300
        assert repo.get_room("B").y == 200

    def test_leaving_edit_mode_drops_gestures(self):
        controller, repo = make_controller([make_room("A", x=100)])
        controller.pointer_down("A", 0, 0)
        controller.pointer_move("A", 50, 0)
        controller.set_edit_mode(False)
        assert controller.gesture("A") is None
        assert controller.pointer_up("A", 50, 0) == GestureOutcome.IGNORED
        assert repo.get_room("A").x == 100

    def test_layout_reflects_commits(self):
        controller, _ = make_controller([make_room("A", floor=1, y=20), make_room("B", floor=2, y=20)])
        assert controller.layout(ALL_FLOORS).display_y_of("A") == 1020
        drag(controller, "A", 0, 30)
        assert controller.layout(ALL_FLOORS).display_y_of("A") == 1050
        assert controller.layout(1).display_y_of("A") == 50


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
