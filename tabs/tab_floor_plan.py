"""Tab 1: Floor Plan — room canvas with drag/resize layout editing."""

import streamlit as st
from typing import Optional, Tuple

from data.session_store import (
    get_repository, get_selected_room_id, set_selected_room_id,
    set_layout_notice, pop_layout_notice, get_last_canvas_click, set_last_canvas_click,
    get_canvas_revision, reset_canvas_selection, get_layout_preview, set_layout_preview,
)
from engine.interaction import RoomCanvasController, GestureOutcome
from engine.layout import find_layout_violations
from engine.tenancy import enrich_rooms
from engine.status import status_badge
from engine.currency import format_currency_with_suffix
from components.canvas import floor_plan_figure
from components.metrics_cards import render_occupancy_metrics
from config.defaults import (
    ALL_FLOORS, DEFAULT_ROOM_FLOOR, DEFAULT_BASE_PRICE, CANVAS_WIDTH, SINGLE_FLOOR_HEIGHT,
)


def _build_controller(repository, rooms, edit_mode):
    def on_select(room):
        set_selected_room_id(room.room_id)

    def on_commit_position(room_id, x, y):
        set_layout_notice(f"Moved to ({x:.0f}, {y:.0f}).")

    def on_commit_size(room_id, width, height):
        set_layout_notice(f"Resized to {width:.0f}x{height:.0f}.")

    return RoomCanvasController(
        rooms,
        repository,
        edit_mode=edit_mode,
        on_select=on_select,
        on_commit_position=on_commit_position,
        on_commit_size=on_commit_size,
    )


def canvas_click(points: list, last_click: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Decide which room a chart selection clicks.

    The chart keeps its selection across reruns, so a room id is acted on only
    when it differs from the last one handled. Returns (room to click or None,
    id to remember). An empty selection forgets the last click.
    """
    if not points:
        return None, None
    clicked = points[0].get("customdata")
    if isinstance(clicked, list):
        clicked = clicked[0]
    if not clicked or clicked == last_click:
        return None, last_click
    return clicked, clicked


def _click(controller, room_id):
    """A plot click is a press and release at the same point."""
    controller.pointer_down(room_id, 0, 0)
    controller.pointer_up(room_id, 0, 0)


def _replay_preview(controller, preview):
    """Start the pending gesture without releasing it. Returns {room_id: rect}."""
    room_id = preview["room_id"]
    if preview["kind"] == "resize":
        if controller.resize_start(room_id, 0, 0) is None:
            return {}
        controller.resize_move(room_id, preview["dx"], preview["dy"])
    else:
        if controller.pointer_down(room_id, 0, 0) is None:
            return {}
        controller.pointer_move(room_id, preview["dx"], preview["dy"])
    rect = controller.preview_rect(room_id)
    return {room_id: rect} if rect else {}


def _render_room_detail(item):
    room = item.room
    badge = status_badge(room.status)
    st.subheader(f"Room {room.number}")
    st.caption(f"{room.room_type.value.replace('_', ' ').title()} | Floor {room.floor} | {badge.label}")

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Resident**")
        if item.resident:
            st.write(item.resident.name)
            st.write(item.resident.phone or "—")
            if item.resident.emergency_phone:
                st.caption(f"Emergency: {item.resident.emergency_phone}")
        else:
            st.write("Vacant")
    with col2:
        st.markdown("**Contract**")
        if item.contract:
            c = item.contract
            st.write(f"{c.start_date} → {c.end_date}")
            st.write(f"Deposit: {format_currency_with_suffix(c.deposit)}")
            st.write(f"Monthly: {format_currency_with_suffix(c.monthly_charge)} (day {c.payment_day})")
        else:
            st.write(f"Base price: {format_currency_with_suffix(room.base_price)}")

    if item.resident and item.resident.memo:
        st.info(item.resident.memo)


def _render_layout_editor(controller, rooms):
    """Pointer gestures entered as offsets: a drag by (dx, dy) or a corner resize by (dw, dh)."""
    st.subheader("Edit Layout")
    labels = {r.room_id: f"{r.number} (floor {r.floor})" for r in rooms}
    room_id = st.selectbox(
        "Room", options=list(labels.keys()), format_func=labels.get, key="layout_room",
    )
    room = controller.get_room(room_id)
    st.caption(f"At ({room.x:.0f}, {room.y:.0f}), size {room.width:.0f}x{room.height:.0f}. "
               f"Canvas is {CANVAS_WIDTH}x{SINGLE_FLOOR_HEIGHT} per floor.")

    col1, col2 = st.columns(2)
    with col1:
        with st.form("move_form"):
            dx = st.number_input("Move right (px)", value=0, step=10)
            dy = st.number_input("Move down (px)", value=0, step=10)
            preview_move = st.form_submit_button("Preview")
            move = st.form_submit_button("Move")
    with col2:
        with st.form("resize_form"):
            dw = st.number_input("Widen (px)", value=0, step=10)
            dh = st.number_input("Heighten (px)", value=0, step=10)
            preview_resize = st.form_submit_button("Preview")
            resize = st.form_submit_button("Resize")

    if preview_move or preview_resize:
        set_layout_preview({
            "room_id": room_id,
            "kind": "move" if preview_move else "resize",
            "dx": dx if preview_move else dw,
            "dy": dy if preview_move else dh,
        })
        st.rerun()

    outcome = None
    if move:
        controller.pointer_down(room_id, 0, 0)
        controller.pointer_move(room_id, dx, dy)
        outcome = controller.pointer_up(room_id, dx, dy)
    elif resize:
        controller.resize_start(room_id, 0, 0)
        controller.resize_move(room_id, dw, dh)
        outcome = controller.resize_end(room_id, dw, dh)

    if outcome == GestureOutcome.REJECTED:
        set_layout_notice("That position is blocked: it leaves the canvas or overlaps another room.")
    elif outcome == GestureOutcome.CLICK:
        set_layout_notice(f"Moves of {controller.activation_distance}px or less are treated as clicks.")
    if outcome is not None:
        st.rerun()


def _add_room(repository, owner_id, rooms):
    repository.create_room(
        owner_id=owner_id,
        number=str(DEFAULT_ROOM_FLOOR * 100 + len(rooms)),
        floor=DEFAULT_ROOM_FLOOR,
        base_price=DEFAULT_BASE_PRICE,
    )


def render(sidebar_state):
    """Render the Floor Plan tab."""
    st.header("Floor Plan")

    user = sidebar_state.user
    repository = get_repository()
    enriched = enrich_rooms(repository, user.user_id)
    rooms = [item.room for item in enriched]
    details = {item.room.room_id: item for item in enriched}

    render_occupancy_metrics(rooms)

    notice = pop_layout_notice()
    if notice:
        st.toast(notice)

    if not rooms:
        st.info("No rooms yet. Turn on layout editing and add one, or create rooms in the Rooms tab.")

    controller = _build_controller(repository, rooms, sidebar_state.edit_mode)
    view_mode = sidebar_state.view_mode
    layout = controller.layout(view_mode)

    for v in find_layout_violations([dr.room for dr in layout.display_rooms]):
        st.warning(v)

    if sidebar_state.edit_mode:
        if st.button("Add room", key="floor_plan_add_room"):
            _add_room(repository, user.user_id, rooms)
            st.rerun()

    # A previewed gesture is shown for one rerun and never committed
    preview = {}
    pending = get_layout_preview()
    if pending and sidebar_state.edit_mode:
        preview = _replay_preview(controller, pending)
    set_layout_preview(None)

    fig = floor_plan_figure(
        layout,
        details=details,
        preview=preview,
        selected_room_id=get_selected_room_id(),
        edit_mode=sidebar_state.edit_mode,
    )
    event = st.plotly_chart(
        fig, use_container_width=True, on_select="rerun",
        selection_mode="points", key=f"floor_plan_chart_{get_canvas_revision()}",
    )

    points = event.selection.points if event else []
    clicked, remembered = canvas_click(points, get_last_canvas_click())
    set_last_canvas_click(remembered)
    if clicked:
        _click(controller, clicked)
        st.rerun()

    st.divider()

    selected = details.get(get_selected_room_id())
    if selected and (view_mode == ALL_FLOORS or selected.room.floor == int(view_mode)):
        _render_room_detail(selected)
        if st.button("Close", key="floor_plan_close_detail"):
            set_selected_room_id(None)
            reset_canvas_selection()
            st.rerun()
    else:
        st.caption("Click a room to see its resident and contract.")

    if sidebar_state.edit_mode:
        visible = [dr.room for dr in layout.display_rooms]
        if visible:
            st.divider()
            _render_layout_editor(controller, visible)
