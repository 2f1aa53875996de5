"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List, Optional

from models.room import Room, RoomStatus
from models.finance import PaymentStatus
from engine.status import ROOM_STATUS_BADGES, PAYMENT_STATUS_BADGES
from engine.currency import format_currency_with_suffix

_PAYMENT_VALUES = {s.value for s in PaymentStatus}


def _badge_style(badges: dict):
    by_label = {b.label: b for b in badges.values()}

    def color(val):
        badge = by_label.get(val)
        if badge is None:
            return ""
        return f"background-color: {badge.fill}; color: {badge.color}; font-weight: bold"
    return color


def rooms_to_df(rooms: List[Room], resident_names: Optional[dict] = None) -> pd.DataFrame:
    resident_names = resident_names or {}
    rows = [{
        "Room": r.number,
        "Floor": r.floor,
        "Type": r.room_type.value.replace("_", " ").title(),
        "Status": ROOM_STATUS_BADGES[RoomStatus(r.status)].label,
        "Base Price": format_currency_with_suffix(r.base_price),
        "Resident": resident_names.get(r.room_id, "—"),
        "Position": f"({r.x:.0f}, {r.y:.0f})",
        "Size": f"{r.width:.0f}x{r.height:.0f}",
    } for r in sorted(rooms, key=lambda r: (r.floor, r.number))]
    return pd.DataFrame(rows)


def render_room_table(df: pd.DataFrame, status_column: str = "Status"):
    """Render the room list with colour-coded statuses."""
    if df.empty:
        st.info("No rooms match the current filters.")
        return
    styled = df.style.map(_badge_style(ROOM_STATUS_BADGES), subset=[status_column])
    st.dataframe(styled, use_container_width=True, hide_index=True)


def render_payment_table(df: pd.DataFrame, status_column: str = "Status"):
    """Render a month's bills with colour-coded payment statuses."""
    if df.empty:
        st.info("No bills for this month.")
        return
    if status_column in df.columns:
        df = df.assign(**{status_column: [
            PAYMENT_STATUS_BADGES[PaymentStatus(s)].label if s in _PAYMENT_VALUES else s
            for s in df[status_column]
        ]})
        styled = df.style.map(_badge_style(PAYMENT_STATUS_BADGES), subset=[status_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
