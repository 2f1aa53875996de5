"""Tab 3: Residents — check-in with contract, edit, move-out."""

import streamlit as st
import pandas as pd
from dataclasses import replace
from datetime import date, timedelta

from data.session_store import get_repository
from data.validator import validate_resident, validate_contract
from engine.tenancy import check_in, remove_resident, end_contract
from engine.currency import format_currency_with_suffix
from models.room import RoomStatus


def _residents_df(repository, rooms):
    room_numbers = {r.room_id: r.number for r in rooms}
    rows = []
    for resident in repository.get_residents():
        contracts = repository.get_contracts_by_resident(resident.resident_id)
        active = next((c for c in contracts if c.is_active), None)
        rows.append({
            "Name": resident.name,
            "Phone": resident.phone,
            "Emergency": resident.emergency_phone or "—",
            "Room": room_numbers.get(active.room_id, "—") if active else "—",
            "Contract": f"{active.start_date} → {active.end_date}" if active else "—",
            "Monthly": format_currency_with_suffix(active.monthly_charge) if active else "—",
        })
    return pd.DataFrame(rows)


def _render_check_in(repository, rooms):
    vacant = [r for r in rooms if r.status in (RoomStatus.VACANT, RoomStatus.RESERVED)
              and repository.get_active_contract(r.room_id) is None]

    with st.form("resident_create_form"):
        col1, col2 = st.columns(2)
        with col1:
            name = st.text_input("Name")
            phone = st.text_input("Phone")
            emergency = st.text_input("Emergency phone")
            memo = st.text_area("Memo")
        with col2:
            labels = {"": "No contract yet"}
            labels.update({r.room_id: f"{r.number} (floor {r.floor})" for r in vacant})
            room_id = st.selectbox("Room", list(labels.keys()), format_func=labels.get)
            start = st.date_input("Start date", value=date.today())
            end = st.date_input("End date", value=date.today() + timedelta(days=180))
            deposit = st.number_input("Deposit (KRW)", value=0, step=100000)
            rent = st.number_input("Rent (KRW)", value=0, step=10000)
            fee = st.number_input("Management fee (KRW)", value=0, step=10000)
            payment_day = st.number_input("Payment day", min_value=1, max_value=31, value=1)
        submitted = st.form_submit_button("Check in")

    if not submitted:
        return

    result = validate_resident(name, phone)
    contract = None
    if room_id:
        contract = {
            "room_id": room_id,
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "deposit": int(deposit),
            "rent": int(rent),
            "management_fee": int(fee),
            "payment_day": int(payment_day),
        }
        c_result = validate_contract(**{k: v for k, v in contract.items() if k != "room_id"})
        result.errors.extend(c_result.errors)
        result.warnings.extend(c_result.warnings)
        result.is_valid = result.is_valid and c_result.is_valid

    for w in result.warnings:
        st.warning(w)
    if not result.is_valid:
        for e in result.errors:
            st.error(e)
        return

    try:
        check_in(repository, name.strip(), phone.strip(), emergency.strip(), memo, contract)
    except ValueError as e:
        st.error(str(e))
        return
    st.rerun()


def render(sidebar_state):
    """Render the Residents tab."""
    st.header("Residents")

    repository = get_repository()
    rooms = repository.get_all_rooms_for_owner(sidebar_state.user.user_id)

    df = _residents_df(repository, rooms)
    if df.empty:
        st.info("No residents yet.")
    else:
        query = st.text_input("Search by name or phone", key="residents_search")
        if query:
            mask = df["Name"].str.contains(query, case=False) | df["Phone"].str.contains(query, case=False)
            df = df[mask]
        st.dataframe(df, use_container_width=True, hide_index=True)

    st.divider()

    with st.expander("Check in a resident"):
        _render_check_in(repository, rooms)

    residents = repository.get_residents()
    if not residents:
        return

    with st.expander("Edit, move out or remove a resident"):
        labels = {r.resident_id: f"{r.name} ({r.phone})" for r in residents}
        resident_id = st.selectbox("Resident", list(labels.keys()), format_func=labels.get,
                                   key="residents_edit_select")
        resident = repository.get_resident(resident_id)

        with st.form("resident_edit_form"):
            name = st.text_input("Name", value=resident.name)
            phone = st.text_input("Phone", value=resident.phone)
            emergency = st.text_input("Emergency phone", value=resident.emergency_phone)
            memo = st.text_area("Memo", value=resident.memo)
            saved = st.form_submit_button("Save")
        if saved:
            result = validate_resident(name, phone)
            if result.is_valid:
                repository.update_resident(replace(
                    resident, name=name.strip(), phone=phone.strip(),
                    emergency_phone=emergency.strip(), memo=memo,
                ))
                st.rerun()
            for e in result.errors:
                st.error(e)

        active = next((c for c in repository.get_contracts_by_resident(resident_id) if c.is_active), None)
        col1, col2 = st.columns(2)
        if active:
            leave_date = col1.date_input("Leave date", value=date.today(), key="residents_leave_date")
            if col1.button("Move out", key="residents_move_out"):
                end_contract(repository, active.contract_id, leave_date.isoformat())
                st.rerun()
            if col1.button("Mark as leaving soon", key="residents_leaving_soon"):
                repository.set_room_status(active.room_id, RoomStatus.LEAVING_SOON)
                st.rerun()
        if col2.button("Remove resident", type="primary", key="residents_remove"):
            remove_resident(repository, resident_id)
            st.rerun()
