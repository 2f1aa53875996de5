"""KPI metric rows for the floor plan and finance views."""

import streamlit as st
from typing import List

from models.room import Room, RoomStatus
from engine.finance import MonthSummary
from engine.currency import format_currency_with_suffix


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color, help.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        col.metric(
            label=m["label"],
            value=m["value"],
            delta=m.get("delta"),
            delta_color=m.get("delta_color", "normal"),
            help=m.get("help"),
        )


def render_occupancy_metrics(rooms: List[Room]):
    by_status = {s: sum(1 for r in rooms if r.status == s) for s in RoomStatus}
    occupied = by_status[RoomStatus.OCCUPIED] + by_status[RoomStatus.LEAVING_SOON]
    render_metric_row([
        {"label": "Rooms", "value": len(rooms)},
        {"label": "Occupied", "value": occupied,
         "delta": f"{occupied / len(rooms):.0%}" if rooms else None},
        {"label": "Vacant", "value": by_status[RoomStatus.VACANT]},
        {"label": "Leaving Soon", "value": by_status[RoomStatus.LEAVING_SOON]},
        {"label": "Maintenance", "value": by_status[RoomStatus.MAINTENANCE]},
    ])


def render_finance_metrics(summary: MonthSummary):
    render_metric_row([
        {"label": "Monthly Income", "value": format_currency_with_suffix(summary.monthly_income),
         "help": "Rent + management fee over active contracts"},
        {"label": "Deposits Held", "value": format_currency_with_suffix(summary.total_deposits)},
        {"label": "Expenses", "value": format_currency_with_suffix(summary.total_expenses)},
        {"label": f"Paid ({summary.month})", "value": f"{summary.paid_count} / {summary.payment_count}",
         "delta": f"{summary.unpaid_count} unpaid" if summary.unpaid_count else None,
         "delta_color": "inverse",
         "help": "Unpaid counts UNPAID and OVERDUE bills"},
    ])
