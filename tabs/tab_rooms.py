"""Tab 2: Rooms — room list, filters, and create/edit/delete."""

import streamlit as st
from dataclasses import replace

from data.session_store import get_repository
from data.validator import validate_room
from engine.layout import check_collision
from engine.status import ROOM_STATUS_BADGES
from components.tables import rooms_to_df, render_room_table
from components.charts import occupancy_donut
from models.room import RoomStatus, RoomType
from config.defaults import (
    DEFAULT_ROOM_FLOOR, DEFAULT_BASE_PRICE, DEFAULT_ROOM_WIDTH, DEFAULT_ROOM_HEIGHT,
)

ALL = "ALL"


def _room_form(key, room=None):
    """Shared create/edit form. Returns the submitted values or None."""
    with st.form(key):
        col1, col2 = st.columns(2)
        with col1:
            number = st.text_input("Number", value=room.number if room else "")
            floor = st.number_input("Floor", value=room.floor if room else DEFAULT_ROOM_FLOOR, step=1)
            room_type = st.selectbox(
                "Type", options=list(RoomType),
                index=list(RoomType).index(room.room_type) if room else 0,
                format_func=lambda t: t.value.replace("_", " ").title(),
            )
        with col2:
            status = st.selectbox(
                "Status", options=list(RoomStatus),
                index=list(RoomStatus).index(room.status) if room else 0,
                format_func=lambda s: ROOM_STATUS_BADGES[s].label,
            )
            base_price = st.number_input(
                "Base price (KRW)", value=room.base_price if room else DEFAULT_BASE_PRICE, step=10000,
            )
            width = st.number_input("Width (px)", value=int(room.width) if room else DEFAULT_ROOM_WIDTH, step=10)
            height = st.number_input("Height (px)", value=int(room.height) if room else DEFAULT_ROOM_HEIGHT, step=10)
        submitted = st.form_submit_button("Save")

    if not submitted:
        return None
    return {
        "number": number.strip(),
        "floor": int(floor),
        "room_type": room_type,
        "status": status,
        "base_price": int(base_price),
        "width": float(width),
        "height": float(height),
    }


def _validate(values, existing_numbers):
    return validate_room(
        values["number"], values["floor"], values["base_price"],
        values["width"], values["height"], existing_numbers=existing_numbers,
    )


def render(sidebar_state):
    """Render the Rooms tab."""
    st.header("Rooms")

    user = sidebar_state.user
    repository = get_repository()
    rooms = repository.get_all_rooms_for_owner(user.user_id)

    # --- Filters ---
    col1, col2, col3 = st.columns([2, 1, 1])
    query = col1.text_input("Search by number", key="rooms_search")
    status_filter = col2.selectbox(
        "Status", [ALL] + list(RoomStatus), key="rooms_status",
        format_func=lambda s: "All" if s == ALL else ROOM_STATUS_BADGES[s].label,
    )
    type_filter = col3.selectbox(
        "Type", [ALL] + list(RoomType), key="rooms_type",
        format_func=lambda t: "All" if t == ALL else t.value.replace("_", " ").title(),
    )

    filtered = rooms
    if query:
        filtered = [r for r in filtered if query.lower() in r.number.lower()]
    if status_filter != ALL:
        filtered = [r for r in filtered if r.status == status_filter]
    if type_filter != ALL:
        filtered = [r for r in filtered if r.room_type == type_filter]

    residents = {}
    for r in filtered:
        contract = repository.get_active_contract(r.room_id)
        resident = repository.get_resident(contract.resident_id) if contract else None
        if resident:
            residents[r.room_id] = resident.name

    col1, col2 = st.columns([3, 1])
    with col1:
        render_room_table(rooms_to_df(filtered, residents))
    with col2:
        if rooms:
            st.plotly_chart(occupancy_donut(rooms), use_container_width=True)

    st.divider()

    # --- Create ---
    with st.expander("Add room"):
        values = _room_form("room_create_form")
        if values is not None:
            result = _validate(values, [r.number for r in rooms])
            for w in result.warnings:
                st.warning(w)
            if result.is_valid:
                repository.create_room(owner_id=user.user_id, **values)
                st.success(f"Room {values['number']} created.")
                st.rerun()
            for e in result.errors:
                st.error(e)

    # --- Edit / delete ---
    if not rooms:
        return

    with st.expander("Edit or delete room"):
        labels = {r.room_id: f"{r.number} (floor {r.floor})" for r in rooms}
        room_id = st.selectbox("Room", list(labels.keys()), format_func=labels.get, key="rooms_edit_select")
        room = repository.get_room(room_id)

        values = _room_form("room_edit_form", room)
        if values is not None:
            others = [r.number for r in rooms if r.room_id != room_id]
            result = _validate(values, others)
            if result.is_valid:
                updated = replace(room, **values)
                # A floor or size change must still fit the floor without overlapping
                if check_collision(updated, rooms, updated.x, updated.y):
                    st.error("The room does not fit at its current position on that floor. "
                             "Move it on the Floor Plan first.")
                else:
                    repository.update_room(updated)
                    st.success(f"Room {updated.number} saved.")
                    st.rerun()
            for e in result.errors:
                st.error(e)

        if st.button(f"Delete room {room.number}", type="primary", key="rooms_delete"):
            if repository.get_active_contract(room_id) is not None:
                st.error("This room has an active contract. Move the resident out first.")
            else:
                repository.delete_room(room_id)
                st.rerun()
