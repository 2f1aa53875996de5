"""Monthly rent billing and income/expense summaries."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from models.tenancy import Contract
from models.finance import Payment, PaymentStatus, Expense


@dataclass
class MonthSummary:
    month: str
    total_deposits: int         # Held across active contracts
    monthly_income: int         # Rent + management fee across active contracts
    total_expenses: int
    paid_count: int
    unpaid_count: int           # UNPAID or OVERDUE
    payment_count: int

    @property
    def net_income(self) -> int:
        return self.monthly_income - self.total_expenses


def current_month(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"{today.year}-{today.month:02d}"


def generate_monthly_payments(repository, month: str) -> List[Payment]:
    """Bill every active contract once for `month`. Returns the payments created."""
    billed = {p.contract_id for p in repository.get_payments_by_month(month)}
    created = []
    for contract in repository.get_contracts():
        if not contract.is_active or contract.contract_id in billed:
            continue
        created.append(repository.create_payment(
            contract_id=contract.contract_id,
            resident_id=contract.resident_id,
            room_id=contract.room_id,
            month=month,
            amount=contract.monthly_charge,
            paid_amount=0,
            paid_date=None,
            status=PaymentStatus.UNPAID,
            memo="",
        ))
    return created


def summarize_month(
    contracts: List[Contract],
    payments: List[Payment],
    expenses: List[Expense],
    month: str,
) -> MonthSummary:
    active = [c for c in contracts if c.is_active]
    monthly = [p for p in payments if p.month == month]
    return MonthSummary(
        month=month,
        total_deposits=sum(c.deposit for c in active),
        monthly_income=sum(c.monthly_charge for c in active),
        total_expenses=sum(e.amount for e in expenses),
        paid_count=sum(1 for p in monthly if p.status == PaymentStatus.PAID),
        unpaid_count=sum(1 for p in monthly if p.status in (PaymentStatus.UNPAID, PaymentStatus.OVERDUE)),
        payment_count=len(monthly),
    )


def expenses_by_category(expenses: List[Expense]) -> dict:
    totals = {}
    for e in expenses:
        key = getattr(e.category, "value", e.category)
        totals[key] = totals.get(key, 0) + e.amount
    return totals
