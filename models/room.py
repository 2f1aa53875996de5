from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Union

from config.defaults import DEFAULT_ROOM_WIDTH, DEFAULT_ROOM_HEIGHT


class RoomStatus(str, Enum):
    VACANT = "VACANT"
    OCCUPIED = "OCCUPIED"
    LEAVING_SOON = "LEAVING_SOON"
    RESERVED = "RESERVED"
    MAINTENANCE = "MAINTENANCE"


class RoomType(str, Enum):
    WINDOW = "WINDOW"
    NO_WINDOW = "NO_WINDOW"
    EN_SUITE = "EN_SUITE"
    DUPLEX = "DUPLEX"


@dataclass
class Room:
    room_id: str
    owner_id: str
    number: str                     # e.g. "201"
    floor: int
    room_type: RoomType = RoomType.WINDOW
    status: RoomStatus = RoomStatus.VACANT
    base_price: int = 0             # Monthly asking rent (KRW)
    x: float = 0.0                  # Local to the floor origin (px)
    y: float = 0.0
    width: float = DEFAULT_ROOM_WIDTH
    height: float = DEFAULT_ROOM_HEIGHT


@dataclass
class DisplayRoom:
    """A room projected onto the canvas; display_y is never persisted."""
    room: Room
    display_y: float
    floor_rank: int = 0

    @property
    def room_id(self) -> str:
        return self.room.room_id


@dataclass
class FloorLayout:
    view_mode: Union[str, int]
    floors: List[int] = field(default_factory=list)              # Highest floor first
    rooms_by_floor: Dict[int, List[Room]] = field(default_factory=dict)
    display_rooms: List[DisplayRoom] = field(default_factory=list)
    total_height: float = 0.0

    def display_y_of(self, room_id: str) -> float:
        for dr in self.display_rooms:
            if dr.room_id == room_id:
                return dr.display_y
        raise KeyError(room_id)
