"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import Optional

from data.repository import Repository
from models.user import User
from config.defaults import ALL_FLOORS, CURRENT_USER_KEY


def initialize_session_state():
    """Initialize UI state keys and install demo data on first run."""
    defaults = {
        CURRENT_USER_KEY: None,
        "view_mode": ALL_FLOORS,
        "edit_mode": False,
        "selected_room_id": None,
        "layout_notice": None,
        "layout_preview": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default

    get_repository().seed()


def get_repository() -> Repository:
    return Repository(st.session_state)


# --- Login (local lookup only) ---

def login(username: str) -> bool:
    user = get_repository().find_user_by_username(username.strip())
    if user is None:
        return False
    st.session_state[CURRENT_USER_KEY] = user.user_id
    return True


def logout():
    st.session_state[CURRENT_USER_KEY] = None
    st.session_state["selected_room_id"] = None


def get_current_user() -> Optional[User]:
    user_id = st.session_state.get(CURRENT_USER_KEY)
    if not user_id:
        return None
    return get_repository().get_user(user_id)


# --- Floor plan view state ---

def get_view_mode():
    return st.session_state.get("view_mode", ALL_FLOORS)


def set_view_mode(view_mode):
    st.session_state["view_mode"] = view_mode


def is_edit_mode() -> bool:
    return st.session_state.get("edit_mode", False)


def set_edit_mode(enabled: bool):
    st.session_state["edit_mode"] = enabled


def get_selected_room_id() -> Optional[str]:
    return st.session_state.get("selected_room_id")


def set_selected_room_id(room_id: Optional[str]):
    st.session_state["selected_room_id"] = room_id


def set_layout_notice(message: Optional[str]):
    """Message shown once on the next rerun of the floor plan."""
    st.session_state["layout_notice"] = message


def pop_layout_notice() -> Optional[str]:
    return st.session_state.pop("layout_notice", None)


def get_last_canvas_click() -> Optional[str]:
    return st.session_state.get("last_canvas_click")


def set_last_canvas_click(room_id: Optional[str]):
    st.session_state["last_canvas_click"] = room_id


def get_canvas_revision() -> int:
    return st.session_state.get("canvas_revision", 0)


def reset_canvas_selection():
    """Mount a fresh chart so its retained point selection is dropped."""
    st.session_state["canvas_revision"] = get_canvas_revision() + 1
    st.session_state["last_canvas_click"] = None


def get_layout_preview() -> Optional[dict]:
    return st.session_state.get("layout_preview")


def set_layout_preview(preview: Optional[dict]):
    """Pending gesture to draw on the next rerun: room_id, kind ("move"/"resize"), dx, dy."""
    st.session_state["layout_preview"] = preview
