"""Demo data installed on first launch."""

import uuid
from typing import List

from models.room import Room, RoomStatus, RoomType
from models.user import User
from config.defaults import (
    DEMO_USER_ID, DEMO_USERNAME, DEFAULT_BASE_PRICE,
    DEFAULT_ROOM_WIDTH, DEFAULT_ROOM_HEIGHT,
)

# Demo rooms are laid out five to a row with a 20px gutter
DEMO_COLUMNS = 5
DEMO_COLUMN_PITCH = DEFAULT_ROOM_WIDTH + 20
DEMO_ROW_PITCH = DEFAULT_ROOM_HEIGHT + 20
DEMO_MARGIN = 20
DEMO_FLOOR = 2


def generate_demo_user() -> User:
    return User(user_id=DEMO_USER_ID, username=DEMO_USERNAME, name="Demo Manager", role="ADMIN")


def _demo_status(i: int) -> RoomStatus:
    if i == 0:
        return RoomStatus.OCCUPIED
    if i == 1:
        return RoomStatus.LEAVING_SOON
    return RoomStatus.VACANT


def generate_demo_rooms(owner_id: str, count: int) -> List[Room]:
    """Generate `count` rooms on floor 2 in a non-overlapping grid."""
    rooms = []
    for i in range(count):
        rooms.append(Room(
            room_id=str(uuid.uuid4()),
            owner_id=owner_id,
            number=str(DEMO_FLOOR * 100 + 1 + i),
            floor=DEMO_FLOOR,
            room_type=RoomType.EN_SUITE if i % 3 == 0 else RoomType.WINDOW,
            status=_demo_status(i),
            base_price=DEFAULT_BASE_PRICE + i * 10000,
            x=(i % DEMO_COLUMNS) * DEMO_COLUMN_PITCH + DEMO_MARGIN,
            y=(i // DEMO_COLUMNS) * DEMO_ROW_PITCH + DEMO_MARGIN,
        ))
    return rooms
