from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class PaymentStatus(str, Enum):
    PAID = "PAID"
    UNPAID = "UNPAID"
    PARTIAL = "PARTIAL"
    OVERDUE = "OVERDUE"


class ExpenseCategory(str, Enum):
    UTILITY = "UTILITY"
    MAINTENANCE = "MAINTENANCE"
    REPAIR = "REPAIR"
    OTHER = "OTHER"


@dataclass
class Payment:
    payment_id: str
    contract_id: str
    resident_id: str
    room_id: str
    month: str                      # "YYYY-MM"
    amount: int                     # Expected: rent + management fee
    paid_amount: int = 0
    paid_date: Optional[str] = None
    status: PaymentStatus = PaymentStatus.UNPAID
    memo: str = ""
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def outstanding(self) -> int:
        return max(0, self.amount - self.paid_amount)


@dataclass
class Expense:
    expense_id: str
    category: ExpenseCategory
    subcategory: str
    amount: int
    date: str                       # ISO date
    description: str = ""
    memo: str = ""
    created_at: datetime = field(default_factory=datetime.now)
