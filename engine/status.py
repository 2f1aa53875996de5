"""Badge label and colours for room and payment statuses."""

from dataclasses import dataclass
from typing import Dict

from models.room import RoomStatus
from models.finance import PaymentStatus


@dataclass(frozen=True)
class StatusBadge:
    label: str
    color: str   # Border / text colour
    fill: str    # Card background


ROOM_STATUS_BADGES: Dict[RoomStatus, StatusBadge] = {
    RoomStatus.VACANT: StatusBadge("Vacant", "#94A3B8", "#FFFFFF"),
    RoomStatus.OCCUPIED: StatusBadge("Occupied", "#16A34A", "#F0FDF4"),
    RoomStatus.LEAVING_SOON: StatusBadge("Leaving soon", "#F59E0B", "#FFFBEB"),
    RoomStatus.RESERVED: StatusBadge("Reserved", "#EA580C", "#FFF7ED"),
    RoomStatus.MAINTENANCE: StatusBadge("Maintenance", "#DC2626", "#FEF2F2"),
}

PAYMENT_STATUS_BADGES: Dict[PaymentStatus, StatusBadge] = {
    PaymentStatus.PAID: StatusBadge("Paid", "#155724", "#D4EDDA"),
    PaymentStatus.UNPAID: StatusBadge("Unpaid", "#856404", "#FFF3CD"),
    PaymentStatus.PARTIAL: StatusBadge("Partially paid", "#0C5460", "#D1ECF1"),
    PaymentStatus.OVERDUE: StatusBadge("Overdue", "#CC0000", "#FFCCCC"),
}


def status_badge(status: RoomStatus) -> StatusBadge:
    return ROOM_STATUS_BADGES[RoomStatus(status)]


def payment_status_badge(status: PaymentStatus) -> StatusBadge:
    return PAYMENT_STATUS_BADGES[PaymentStatus(status)]
