"""Floor grouping, display offsets, and collision checks for the room canvas."""

from typing import Dict, List, Optional, Tuple, Union
from models.room import Room, DisplayRoom, FloorLayout
from config.defaults import (
    ALL_FLOORS, CANVAS_WIDTH, SINGLE_FLOOR_HEIGHT,
    FLOOR_BAND_HEIGHT, FLOOR_HEADER_HEIGHT,
)

Rect = Tuple[float, float, float, float]  # x, y, width, height


def band_offset(floor_rank: int) -> float:
    """Top of a floor's band in the all-floors view."""
    return floor_rank * FLOOR_BAND_HEIGHT


def group_by_floor(rooms: List[Room]) -> Dict[int, List[Room]]:
    grouped: Dict[int, List[Room]] = {}
    for r in rooms:
        grouped.setdefault(r.floor, []).append(r)
    return grouped


def group_and_offset(
    rooms: List[Room],
    view_mode: Union[str, int] = ALL_FLOORS,
) -> FloorLayout:
    """Group rooms by floor and attach a display_y to each.

    In the all-floors view floors are stacked highest first, each in its own
    band under a header. A single-floor view shows only that floor's rooms at
    their local coordinates.
    """
    if view_mode == ALL_FLOORS:
        visible = list(rooms)
    else:
        visible = [r for r in rooms if r.floor == int(view_mode)]

    grouped = group_by_floor(visible)
    floors = sorted(grouped.keys(), reverse=True)
    rank = {floor: i for i, floor in enumerate(floors)}

    display_rooms = []
    for r in visible:
        if view_mode == ALL_FLOORS:
            display_y = r.y + band_offset(rank[r.floor]) + FLOOR_HEADER_HEIGHT
        else:
            display_y = r.y
        display_rooms.append(DisplayRoom(room=r, display_y=display_y, floor_rank=rank[r.floor]))

    if view_mode == ALL_FLOORS:
        total_height = len(floors) * FLOOR_BAND_HEIGHT
    else:
        total_height = SINGLE_FLOOR_HEIGHT

    return FloorLayout(
        view_mode=view_mode,
        floors=floors,
        rooms_by_floor=grouped,
        display_rooms=display_rooms,
        total_height=total_height,
    )


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Strict AABB intersection; boxes that only share an edge do not overlap."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return not (
        ax + aw <= bx or   # a left of b
        bx + bw <= ax or   # a right of b
        ay + ah <= by or   # a above b
        by + bh <= ay      # a below b
    )


def is_within_bounds(x: float, y: float, width: float, height: float) -> bool:
    return (
        x >= 0 and y >= 0
        and x + width <= CANVAS_WIDTH
        and y + height <= SINGLE_FLOOR_HEIGHT
    )


def check_collision(
    room: Room,
    rooms: List[Room],
    proposed_x: float,
    proposed_y: float,
    proposed_width: Optional[float] = None,
    proposed_height: Optional[float] = None,
) -> bool:
    """Return True if moving/resizing room to the proposed box must be rejected."""
    w = room.width if proposed_width is None else proposed_width
    h = room.height if proposed_height is None else proposed_height

    if not is_within_bounds(proposed_x, proposed_y, w, h):
        return True

    proposed = (proposed_x, proposed_y, w, h)
    for peer in rooms:
        if peer.room_id == room.room_id or peer.floor != room.floor:
            continue
        if rects_overlap(proposed, (peer.x, peer.y, peer.width, peer.height)):
            return True
    return False


def find_layout_violations(rooms: List[Room]) -> List[str]:
    """List rooms that break the canvas bounds or overlap a same-floor peer."""
    violations = []
    for r in rooms:
        if not is_within_bounds(r.x, r.y, r.width, r.height):
            violations.append(
                f"Room {r.number} (floor {r.floor}) lies outside the "
                f"{CANVAS_WIDTH}x{SINGLE_FLOOR_HEIGHT} canvas at "
                f"({r.x:.0f}, {r.y:.0f}, {r.width:.0f}x{r.height:.0f})"
            )

    for floor, peers in sorted(group_by_floor(rooms).items()):
        for i, a in enumerate(peers):
            for b in peers[i + 1:]:
                if rects_overlap((a.x, a.y, a.width, a.height), (b.x, b.y, b.width, b.height)):
                    violations.append(f"Rooms {a.number} and {b.number} overlap on floor {floor}")
    return violations
