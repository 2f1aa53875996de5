"""Key-value backed repository for rooms, residents, contracts, payments and expenses.

Records live in a mutable mapping (st.session_state in the app, a dict in
tests) under the keys in STORAGE_KEYS. Each write replaces the stored list, so
later reads see it immediately; the last write wins.
"""

import logging
import uuid
from dataclasses import replace
from typing import Callable, List, MutableMapping, Optional, TypeVar

from models.room import Room, RoomStatus, RoomType
from models.tenancy import Resident, Contract
from models.finance import Payment, Expense
from models.user import User
from data.sample_data import generate_demo_user, generate_demo_rooms
from config.defaults import (
    STORAGE_KEYS, DEFAULT_ROOM_X, DEFAULT_ROOM_Y,
    DEFAULT_ROOM_WIDTH, DEFAULT_ROOM_HEIGHT,
    DEMO_USER_ID, DEMO_USERNAME, DEMO_ROOM_COUNT,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def new_id() -> str:
    return str(uuid.uuid4())


class Repository:
    def __init__(self, store: MutableMapping):
        self._store = store

    # --- Generic helpers ---

    def _get(self, kind: str) -> list:
        return list(self._store.get(STORAGE_KEYS[kind], []))

    def _set(self, kind: str, records: list):
        self._store[STORAGE_KEYS[kind]] = list(records)

    def _find(self, kind: str, match: Callable[[T], bool]) -> Optional[T]:
        return next((r for r in self._get(kind) if match(r)), None)

    def _upsert(self, kind: str, record, id_attr: str) -> bool:
        """Replace the record with the same id, or append it. Returns True if replaced."""
        records = self._get(kind)
        record_id = getattr(record, id_attr)
        for i, existing in enumerate(records):
            if getattr(existing, id_attr) == record_id:
                records[i] = record
                self._set(kind, records)
                return True
        records.append(record)
        self._set(kind, records)
        return False

    def _delete(self, kind: str, id_attr: str, record_id: str):
        records = self._get(kind)
        self._set(kind, [r for r in records if getattr(r, id_attr) != record_id])

    # --- Users ---

    def get_users(self) -> List[User]:
        return self._get("users")

    def find_user_by_username(self, username: str) -> Optional[User]:
        return self._find("users", lambda u: u.username == username)

    def get_user(self, user_id: str) -> Optional[User]:
        return self._find("users", lambda u: u.user_id == user_id)

    def create_user(self, username: str, name: str, role: str = "ADMIN") -> User:
        user = User(user_id=new_id(), username=username, name=name, role=role)
        self._set("users", self._get("users") + [user])
        return user

    # --- Rooms ---

    def get_all_rooms_for_owner(self, owner_id: str) -> List[Room]:
        return [r for r in self._get("rooms") if r.owner_id == owner_id]

    def get_room(self, room_id: str) -> Optional[Room]:
        return self._find("rooms", lambda r: r.room_id == room_id)

    def create_room(
        self,
        owner_id: str,
        number: str,
        floor: int,
        room_type: RoomType = RoomType.WINDOW,
        status: RoomStatus = RoomStatus.VACANT,
        base_price: int = 0,
        x: float = DEFAULT_ROOM_X,
        y: float = DEFAULT_ROOM_Y,
        width: float = DEFAULT_ROOM_WIDTH,
        height: float = DEFAULT_ROOM_HEIGHT,
    ) -> Room:
        room = Room(
            room_id=new_id(),
            owner_id=owner_id,
            number=number,
            floor=floor,
            room_type=room_type,
            status=status,
            base_price=base_price,
            x=x, y=y, width=width, height=height,
        )
        self._set("rooms", self._get("rooms") + [room])
        logger.debug("Created room %s on floor %s", number, floor)
        return room

    def update_room(self, room: Room):
        """Upsert by room_id: unknown rooms are inserted."""
        if not self._upsert("rooms", room, "room_id"):
            logger.debug("update_room inserted unknown room %s", room.room_id)

    def batch_update_rooms(self, rooms: List[Room]):
        ids = {r.room_id for r in rooms}
        others = [r for r in self._get("rooms") if r.room_id not in ids]
        self._set("rooms", others + list(rooms))

    def delete_room(self, room_id: str):
        self._delete("rooms", "room_id", room_id)

    def set_room_status(self, room_id: str, status: RoomStatus) -> Optional[Room]:
        room = self.get_room(room_id)
        if room is None:
            return None
        updated = replace(room, status=status)
        self.update_room(updated)
        return updated

    # --- Residents ---

    def get_residents(self) -> List[Resident]:
        return self._get("residents")

    def get_resident(self, resident_id: str) -> Optional[Resident]:
        return self._find("residents", lambda r: r.resident_id == resident_id)

    def create_resident(self, name: str, phone: str, emergency_phone: str = "", memo: str = "") -> Resident:
        resident = Resident(new_id(), name, phone, emergency_phone, memo)
        self._set("residents", self._get("residents") + [resident])
        return resident

    def update_resident(self, resident: Resident):
        self._upsert("residents", resident, "resident_id")

    def delete_resident(self, resident_id: str):
        self._delete("residents", "resident_id", resident_id)

    # --- Contracts ---

    def get_contracts(self) -> List[Contract]:
        return self._get("contracts")

    def get_active_contract(self, room_id: str) -> Optional[Contract]:
        return self._find("contracts", lambda c: c.room_id == room_id and c.is_active)

    def get_contracts_by_resident(self, resident_id: str) -> List[Contract]:
        return [c for c in self._get("contracts") if c.resident_id == resident_id]

    def create_contract(
        self,
        room_id: str,
        resident_id: str,
        start_date: str,
        end_date: str,
        deposit: int = 0,
        rent: int = 0,
        management_fee: int = 0,
        payment_day: int = 1,
        is_active: bool = True,
    ) -> Contract:
        contract = Contract(
            contract_id=new_id(),
            room_id=room_id,
            resident_id=resident_id,
            start_date=start_date,
            end_date=end_date,
            deposit=deposit,
            rent=rent,
            management_fee=management_fee,
            payment_day=payment_day,
            is_active=is_active,
        )
        self._set("contracts", self._get("contracts") + [contract])
        return contract

    def update_contract(self, contract: Contract):
        self._upsert("contracts", contract, "contract_id")

    def delete_contract(self, contract_id: str):
        self._delete("contracts", "contract_id", contract_id)

    # --- Payments ---

    def get_payments(self) -> List[Payment]:
        return self._get("payments")

    def get_payments_by_month(self, month: str) -> List[Payment]:
        return [p for p in self._get("payments") if p.month == month]

    def create_payment(self, **fields) -> Payment:
        payment = Payment(payment_id=new_id(), **fields)
        self._set("payments", self._get("payments") + [payment])
        return payment

    def update_payment(self, payment: Payment):
        self._upsert("payments", payment, "payment_id")

    # --- Expenses ---

    def get_expenses(self) -> List[Expense]:
        return self._get("expenses")

    def create_expense(self, **fields) -> Expense:
        expense = Expense(expense_id=new_id(), **fields)
        self._set("expenses", self._get("expenses") + [expense])
        return expense

    def update_expense(self, expense: Expense):
        self._upsert("expenses", expense, "expense_id")

    def delete_expense(self, expense_id: str):
        self._delete("expenses", "expense_id", expense_id)

    # --- Demo data ---

    def seed(self) -> bool:
        """Install the demo user and rooms if no user exists. Returns True if seeded."""
        if self.get_users():
            return False

        self._set("users", [generate_demo_user()])
        self._set("rooms", generate_demo_rooms(DEMO_USER_ID, DEMO_ROOM_COUNT))
        logger.info("Seeded demo user '%s' with %d rooms", DEMO_USERNAME, DEMO_ROOM_COUNT)
        return True
