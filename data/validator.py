"""Validation for room, resident, contract and expense form input."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from config.defaults import (
    CANVAS_WIDTH, SINGLE_FLOOR_HEIGHT, MIN_ROOM_WIDTH, MIN_ROOM_HEIGHT,
)


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def error(self, message: str):
        self.is_valid = False
        self.errors.append(message)


def _parse_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def validate_room(number: str, floor: int, base_price: int, width: float, height: float,
                  existing_numbers: Optional[List[str]] = None) -> ValidationResult:
    result = ValidationResult()
    if not number or not number.strip():
        result.error("Room: Number is required.")
    elif existing_numbers and number.strip() in existing_numbers:
        result.error(f"Room: Number {number.strip()} is already in use.")

    if base_price < 0:
        result.error("Room: Base price cannot be negative.")

    if width < MIN_ROOM_WIDTH or height < MIN_ROOM_HEIGHT:
        result.error(f"Room: Size must be at least {MIN_ROOM_WIDTH}x{MIN_ROOM_HEIGHT}.")
    elif width > CANVAS_WIDTH or height > SINGLE_FLOOR_HEIGHT:
        result.error(f"Room: Size cannot exceed the {CANVAS_WIDTH}x{SINGLE_FLOOR_HEIGHT} canvas.")

    if floor <= 0:
        result.warnings.append(f"Room: Floor {floor} is below ground level.")
    return result


def validate_resident(name: str, phone: str) -> ValidationResult:
    result = ValidationResult()
    if not name or not name.strip():
        result.error("Resident: Name is required.")
    if not phone or not phone.strip():
        result.error("Resident: Phone number is required.")
    elif not any(ch.isdigit() for ch in phone):
        result.error("Resident: Phone number must contain digits.")
    return result


def validate_contract(start_date: str, end_date: str, deposit: int, rent: int,
                      management_fee: int, payment_day: int) -> ValidationResult:
    result = ValidationResult()
    start = _parse_date(start_date)
    end = _parse_date(end_date)
    if start is None:
        result.error("Contract: Start date must be an ISO date (YYYY-MM-DD).")
    if end is None:
        result.error("Contract: End date must be an ISO date (YYYY-MM-DD).")
    if start and end and end < start:
        result.error("Contract: End date cannot be before the start date.")

    if min(deposit, rent, management_fee) < 0:
        result.error("Contract: Amounts cannot be negative.")
    if rent == 0:
        result.warnings.append("Contract: Rent is zero.")

    if not 1 <= payment_day <= 31:
        result.error("Contract: Payment day must be between 1 and 31.")
    return result


def validate_expense(category: str, amount: int, expense_date: str) -> ValidationResult:
    result = ValidationResult()
    if not category:
        result.error("Expense: Category is required.")
    if amount <= 0:
        result.error("Expense: Amount must be positive.")
    if _parse_date(expense_date) is None:
        result.error("Expense: Date must be an ISO date (YYYY-MM-DD).")
    return result
