"""Global sidebar: local login, floor filter and layout edit toggle."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional, Union

from data.session_store import (
    get_repository, get_current_user, login, logout,
    get_view_mode, set_view_mode, is_edit_mode, set_edit_mode,
)
from models.user import User
from config.defaults import ALL_FLOORS, DEMO_USERNAME


@dataclass
class SidebarState:
    user: Optional[User]
    view_mode: Union[str, int]
    edit_mode: bool


def _render_login():
    with st.form("login_form"):
        username = st.text_input("Username", placeholder=DEMO_USERNAME)
        submitted = st.form_submit_button("Log in")
    if submitted:
        if login(username):
            st.rerun()
        else:
            st.error(f"No user named '{username}'.")
    st.caption(f"Demo account: {DEMO_USERNAME}")


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Room Board")
        st.divider()

        user = get_current_user()
        if user is None:
            _render_login()
            return SidebarState(user=None, view_mode=get_view_mode(), edit_mode=False)

        st.caption(f"Signed in as {user.name} ({user.role})")
        if st.button("Log out", key="sidebar_logout"):
            logout()
            st.rerun()

        st.divider()

        # Floor selector
        rooms = get_repository().get_all_rooms_for_owner(user.user_id)
        floors = sorted(set(r.floor for r in rooms))
        options = [ALL_FLOORS] + floors
        current = get_view_mode()
        if current not in options:
            current = ALL_FLOORS

        view_mode = st.selectbox(
            "Floor",
            options=options,
            index=options.index(current),
            format_func=lambda v: "All floors" if v == ALL_FLOORS else f"Floor {v}",
            key="sidebar_floor",
        )
        if view_mode != get_view_mode():
            set_view_mode(view_mode)

        edit_mode = st.toggle("Edit layout", value=is_edit_mode(), key="sidebar_edit_mode")
        if edit_mode != is_edit_mode():
            set_edit_mode(edit_mode)

        if edit_mode:
            st.info("Move and resize rooms from the Floor Plan tab. Clicking a room still opens its details.")

    return SidebarState(user=user, view_mode=view_mode, edit_mode=edit_mode)
