"""Plotly chart builders for the occupancy and finance views."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List

from models.room import Room, RoomStatus
from engine.status import ROOM_STATUS_BADGES


def occupancy_donut(rooms: List[Room], title: str = "Rooms by Status") -> go.Figure:
    """Donut chart of room counts per status."""
    counts = {s: 0 for s in RoomStatus}
    for r in rooms:
        counts[RoomStatus(r.status)] += 1

    statuses = [s for s in RoomStatus if counts[s] > 0]
    fig = go.Figure(data=[go.Pie(
        labels=[ROOM_STATUS_BADGES[s].label for s in statuses],
        values=[counts[s] for s in statuses],
        hole=0.6,
        marker_colors=[ROOM_STATUS_BADGES[s].color for s in statuses],
        textinfo="percent+label",
        sort=False,
    )])
    occupied = counts[RoomStatus.OCCUPIED] + counts[RoomStatus.LEAVING_SOON]
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{occupied}/{len(rooms)}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def income_vs_expense_bar(income: int, expenses: int, title: str = "Income vs Expenses") -> go.Figure:
    df = pd.DataFrame([
        {"Item": "Monthly income", "Amount": income},
        {"Item": "Expenses", "Amount": expenses},
        {"Item": "Net", "Amount": income - expenses},
    ])
    fig = px.bar(
        df, x="Item", y="Amount", color="Item", title=title,
        color_discrete_map={"Monthly income": "#4A90D9", "Expenses": "#E8734A", "Net": "#16A34A"},
    )
    fig.update_layout(showlegend=False, height=350, yaxis_title="KRW", xaxis_title="")
    fig.update_traces(texttemplate="%{y:,}", textposition="auto")
    return fig


def expense_category_bar(totals: Dict[str, int], title: str = "Expenses by Category") -> go.Figure:
    df = pd.DataFrame(
        [{"Category": k, "Amount": v} for k, v in totals.items()],
        columns=["Category", "Amount"],
    ).sort_values("Amount", ascending=True)
    fig = px.bar(df, x="Amount", y="Category", orientation="h", title=title)
    fig.update_layout(height=max(250, len(df) * 50), xaxis_title="KRW", yaxis_title="")
    fig.update_traces(marker_color="#E8734A", texttemplate="%{x:,}", textposition="auto")
    return fig
