"""Joining rooms with contracts and residents; check-in and move-out."""

import logging
from dataclasses import replace
from typing import List, Optional

from models.room import RoomStatus
from models.tenancy import Resident, RoomWithContract

logger = logging.getLogger(__name__)


def enrich_rooms(repository, owner_id: str) -> List[RoomWithContract]:
    """Attach each room's active contract and resident."""
    enriched = []
    for room in repository.get_all_rooms_for_owner(owner_id):
        contract = repository.get_active_contract(room.room_id)
        resident = repository.get_resident(contract.resident_id) if contract else None
        enriched.append(RoomWithContract(room=room, contract=contract, resident=resident))
    return enriched


def check_in(
    repository,
    name: str,
    phone: str,
    emergency_phone: str = "",
    memo: str = "",
    contract: Optional[dict] = None,
) -> Resident:
    """Register a resident and, when contract terms are given, move them into the room.

    `contract` holds room_id, start_date, end_date, deposit, rent,
    management_fee and payment_day. The room is marked OCCUPIED.
    """
    if contract is not None:
        room = repository.get_room(contract["room_id"])
        if room is None:
            raise ValueError(f"Unknown room: {contract['room_id']}")
        if repository.get_active_contract(room.room_id) is not None:
            raise ValueError(f"Room {room.number} already has an active contract.")

    resident = repository.create_resident(name, phone, emergency_phone, memo)

    if contract is not None:
        repository.create_contract(resident_id=resident.resident_id, is_active=True, **contract)
        repository.set_room_status(contract["room_id"], RoomStatus.OCCUPIED)
        logger.info("Checked in %s to room %s", name, room.number)

    return resident


def remove_resident(repository, resident_id: str):
    """Delete a resident with their contracts, freeing their rooms."""
    if repository.get_resident(resident_id) is None:
        raise ValueError(f"Unknown resident: {resident_id}")

    for contract in repository.get_contracts_by_resident(resident_id):
        repository.delete_contract(contract.contract_id)
        # Ended contracts no longer hold their room; it may have a new tenant
        if contract.is_active:
            repository.set_room_status(contract.room_id, RoomStatus.VACANT)

    repository.delete_resident(resident_id)


def end_contract(repository, contract_id: str, leave_date: str):
    """Close a contract on the resident's actual leave date and free the room."""
    contract = next((c for c in repository.get_contracts() if c.contract_id == contract_id), None)
    if contract is None:
        raise ValueError(f"Unknown contract: {contract_id}")

    repository.update_contract(replace(contract, is_active=False, actual_leave_date=leave_date))
    repository.set_room_status(contract.room_id, RoomStatus.VACANT)
