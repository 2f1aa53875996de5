"""Room Board — Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_floor_plan,
    tab_rooms,
    tab_residents,
    tab_finance,
)
from config.defaults import LOG_LEVEL, LOG_FORMAT


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    st.set_page_config(
        page_title="Room Board",
        page_icon="🏠",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    if sidebar_state.user is None:
        st.title("Room Board")
        st.info("Log in from the sidebar to manage your rooms.")
        return

    tab1, tab2, tab3, tab4 = st.tabs([
        "🗺️ Floor Plan",
        "🚪 Rooms",
        "👥 Residents",
        "💰 Finance",
    ])

    with tab1:
        tab_floor_plan.render(sidebar_state)
    with tab2:
        tab_rooms.render(sidebar_state)
    with tab3:
        tab_residents.render(sidebar_state)
    with tab4:
        tab_finance.render(sidebar_state)


if __name__ == "__main__":
    main()
