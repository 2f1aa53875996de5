from dataclasses import dataclass
from typing import Optional

from models.room import Room


@dataclass
class Resident:
    resident_id: str
    name: str
    phone: str
    emergency_phone: str = ""
    memo: str = ""


@dataclass
class Contract:
    contract_id: str
    room_id: str
    resident_id: str
    start_date: str                 # ISO date
    end_date: str                   # ISO date
    deposit: int = 0
    rent: int = 0
    management_fee: int = 0
    payment_day: int = 1            # Day of month, 1-31
    is_active: bool = True
    actual_leave_date: Optional[str] = None

    @property
    def monthly_charge(self) -> int:
        return self.rent + self.management_fee


@dataclass
class RoomWithContract:
    """Room joined with its active contract and resident for display."""
    room: Room
    contract: Optional[Contract] = None
    resident: Optional[Resident] = None

    @property
    def is_occupied(self) -> bool:
        return self.contract is not None
