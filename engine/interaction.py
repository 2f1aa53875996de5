"""Drag and resize gesture handling for rooms on the floor-plan canvas.

Each room carries at most one gesture at a time. A gesture is an explicit
GestureState value holding where the pointer started, the room's committed
position and size at that moment, and the latest pointer location. Nothing is
written to the room until release, and release always either commits the
candidate through the repository or leaves the room untouched.
"""

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

from models.room import Room, FloorLayout
from engine.layout import check_collision, group_and_offset
from config.defaults import (
    ALL_FLOORS, DRAG_ACTIVATION_DISTANCE, MIN_ROOM_WIDTH, MIN_ROOM_HEIGHT,
)

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class GestureKind(str, Enum):
    PRESS = "PRESS"      # Pointer is down but has not travelled past the activation distance
    DRAG = "DRAG"
    RESIZE = "RESIZE"


class GestureOutcome(str, Enum):
    CLICK = "CLICK"
    COMMITTED = "COMMITTED"
    REJECTED = "REJECTED"
    IGNORED = "IGNORED"


@dataclass
class GestureState:
    kind: GestureKind
    room_id: str
    start_point: Point
    last_point: Point
    start_x: float
    start_y: float
    start_width: float
    start_height: float

    @property
    def delta(self) -> Point:
        return (self.last_point[0] - self.start_point[0], self.last_point[1] - self.start_point[1])


def clamp_size(width: float, height: float) -> Tuple[float, float]:
    return max(MIN_ROOM_WIDTH, width), max(MIN_ROOM_HEIGHT, height)


class RoomCanvasController:
    """Turns pointer input into validated, persisted room moves and resizes."""

    def __init__(
        self,
        rooms: List[Room],
        repository,
        edit_mode: bool = False,
        on_select: Optional[Callable[[Room], None]] = None,
        on_commit_position: Optional[Callable[[str, float, float], None]] = None,
        on_commit_size: Optional[Callable[[str, float, float], None]] = None,
        activation_distance: float = DRAG_ACTIVATION_DISTANCE,
    ):
        self.rooms: List[Room] = list(rooms)
        self.repository = repository
        self.edit_mode = edit_mode
        self.on_select = on_select
        self.on_commit_position = on_commit_position
        self.on_commit_size = on_commit_size
        self.activation_distance = activation_distance
        self._gestures: Dict[str, GestureState] = {}

    # --- Lookup ---

    def get_room(self, room_id: str) -> Optional[Room]:
        return next((r for r in self.rooms if r.room_id == room_id), None)

    def gesture(self, room_id: str) -> Optional[GestureState]:
        return self._gestures.get(room_id)

    def layout(self, view_mode: Union[str, int] = ALL_FLOORS) -> FloorLayout:
        return group_and_offset(self.rooms, view_mode)

    def set_edit_mode(self, enabled: bool):
        if not enabled:
            self._gestures.clear()
        self.edit_mode = enabled

    def _start(self, kind: GestureKind, room: Room, point: Point) -> GestureState:
        state = GestureState(
            kind=kind,
            room_id=room.room_id,
            start_point=point,
            last_point=point,
            start_x=room.x,
            start_y=room.y,
            start_width=room.width,
            start_height=room.height,
        )
        self._gestures[room.room_id] = state
        return state

    def _replace_room(self, updated: Room):
        self.rooms = [updated if r.room_id == updated.room_id else r for r in self.rooms]
        self.repository.update_room(updated)

    # --- Drag ---

    def pointer_down(self, room_id: str, px: float, py: float) -> Optional[GestureState]:
        room = self.get_room(room_id)
        if room is None:
            return None
        return self._start(GestureKind.PRESS, room, (px, py))

    def pointer_move(self, room_id: str, px: float, py: float) -> Optional[Point]:
        """Track the pointer. Returns the visual drag offset once dragging."""
        state = self._gestures.get(room_id)
        if state is None or state.kind == GestureKind.RESIZE:
            return None

        state.last_point = (px, py)
        if state.kind == GestureKind.PRESS and self.edit_mode:
            dx, dy = state.delta
            if math.hypot(dx, dy) > self.activation_distance:
                state.kind = GestureKind.DRAG

        if state.kind == GestureKind.DRAG:
            return state.delta
        return None

    def pointer_up(self, room_id: str, px: float, py: float) -> GestureOutcome:
        state = self._gestures.get(room_id)
        if state is None or state.kind == GestureKind.RESIZE:
            return GestureOutcome.IGNORED

        # Decide on the release point itself; a move event may not have preceded it.
        self.pointer_move(room_id, px, py)
        del self._gestures[room_id]

        room = self.get_room(room_id)
        if room is None:
            return GestureOutcome.IGNORED

        # Never passed the activation distance: a click, in edit mode too
        if state.kind == GestureKind.PRESS:
            if self.on_select:
                self.on_select(room)
            return GestureOutcome.CLICK

        dx, dy = state.delta
        new_x = state.start_x + dx
        new_y = state.start_y + dy

        if check_collision(room, self.rooms, new_x, new_y):
            logger.info("Rejected move of room %s to (%.0f, %.0f)", room.number, new_x, new_y)
            return GestureOutcome.REJECTED

        self._replace_room(replace(room, x=new_x, y=new_y))
        logger.debug("Moved room %s to (%.0f, %.0f)", room.number, new_x, new_y)
        if self.on_commit_position:
            self.on_commit_position(room_id, new_x, new_y)
        return GestureOutcome.COMMITTED

    # --- Resize ---

    def resize_start(self, room_id: str, px: float, py: float) -> Optional[GestureState]:
        """Begin a corner-handle resize. Replaces any press pending on the room."""
        if not self.edit_mode:
            return None
        room = self.get_room(room_id)
        if room is None:
            return None
        return self._start(GestureKind.RESIZE, room, (px, py))

    def _candidate_size(self, state: GestureState) -> Tuple[float, float]:
        dx, dy = state.delta
        return clamp_size(state.start_width + dx, state.start_height + dy)

    def resize_move(self, room_id: str, px: float, py: float) -> Optional[Tuple[float, float]]:
        state = self._gestures.get(room_id)
        if state is None or state.kind != GestureKind.RESIZE:
            return None
        state.last_point = (px, py)
        return self._candidate_size(state)

    def resize_end(self, room_id: str, px: float, py: float) -> GestureOutcome:
        state = self._gestures.get(room_id)
        if state is None or state.kind != GestureKind.RESIZE:
            return GestureOutcome.IGNORED

        state.last_point = (px, py)
        del self._gestures[room_id]

        room = self.get_room(room_id)
        if room is None:
            return GestureOutcome.IGNORED

        new_width, new_height = self._candidate_size(state)
        if check_collision(room, self.rooms, room.x, room.y, new_width, new_height):
            logger.info("Rejected resize of room %s to %.0fx%.0f", room.number, new_width, new_height)
            return GestureOutcome.REJECTED

        self._replace_room(replace(room, width=new_width, height=new_height))
        logger.debug("Resized room %s to %.0fx%.0f", room.number, new_width, new_height)
        if self.on_commit_size:
            self.on_commit_size(room_id, new_width, new_height)
        return GestureOutcome.COMMITTED

    # --- Rendering ---

    def preview_rect(self, room_id: str) -> Optional[Tuple[float, float, float, float]]:
        """Local (x, y, width, height) to draw for a room, including any in-flight gesture."""
        room = self.get_room(room_id)
        if room is None:
            return None
        state = self._gestures.get(room_id)
        if state is None or state.kind == GestureKind.PRESS:
            return room.x, room.y, room.width, room.height
        if state.kind == GestureKind.DRAG:
            dx, dy = state.delta
            return state.start_x + dx, state.start_y + dy, room.width, room.height
        w, h = self._candidate_size(state)
        return room.x, room.y, w, h
