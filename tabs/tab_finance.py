"""Tab 4: Finance — monthly billing, payment records, and expenses."""

import streamlit as st
import pandas as pd
from dataclasses import replace
from datetime import date

from data.session_store import get_repository
from data.validator import validate_expense
from engine.finance import (
    current_month, generate_monthly_payments, summarize_month, expenses_by_category,
)
from engine.currency import format_currency_with_suffix
from engine.status import PAYMENT_STATUS_BADGES
from components.metrics_cards import render_finance_metrics
from components.charts import income_vs_expense_bar, expense_category_bar
from components.tables import render_payment_table
from models.finance import PaymentStatus, ExpenseCategory
from config.defaults import EXPENSE_SUBCATEGORIES


def _render_payments(repository, month, rooms, residents):
    payments = repository.get_payments_by_month(month)
    rows = [{
        "Room": rooms.get(p.room_id, "—"),
        "Resident": residents.get(p.resident_id, "—"),
        "Due": format_currency_with_suffix(p.amount),
        "Paid": format_currency_with_suffix(p.paid_amount),
        "Paid On": p.paid_date or "—",
        "Status": p.status.value,
        "Memo": p.memo,
    } for p in payments]
    render_payment_table(pd.DataFrame(rows))

    if not payments:
        return

    with st.expander("Record a payment"):
        labels = {p.payment_id: f"{rooms.get(p.room_id, '?')} — {residents.get(p.resident_id, '?')}"
                  for p in payments}
        payment_id = st.selectbox("Bill", list(labels.keys()), format_func=labels.get, key="finance_bill")
        payment = next(p for p in payments if p.payment_id == payment_id)

        with st.form("payment_form"):
            paid_amount = st.number_input("Paid amount (KRW)", value=payment.paid_amount or payment.amount,
                                          step=10000)
            paid_date = st.date_input("Paid on", value=date.fromisoformat(payment.paid_date)
                                      if payment.paid_date else date.today())
            status = st.selectbox(
                "Status", list(PaymentStatus),
                index=list(PaymentStatus).index(payment.status),
                format_func=lambda s: PAYMENT_STATUS_BADGES[s].label,
            )
            memo = st.text_input("Memo", value=payment.memo)
            saved = st.form_submit_button("Save")
        if saved:
            repository.update_payment(replace(
                payment,
                paid_amount=int(paid_amount),
                paid_date=paid_date.isoformat() if status != PaymentStatus.UNPAID else None,
                status=status,
                memo=memo,
            ))
            st.rerun()


def _render_expenses(repository):
    expenses = sorted(repository.get_expenses(), key=lambda e: e.date, reverse=True)
    if expenses:
        st.dataframe(pd.DataFrame([{
            "Date": e.date,
            "Category": e.category.value.title(),
            "Subcategory": e.subcategory,
            "Amount": format_currency_with_suffix(e.amount),
            "Description": e.description,
            "Memo": e.memo,
        } for e in expenses]), use_container_width=True, hide_index=True)
    else:
        st.info("No expenses recorded.")

    with st.expander("Add expense"):
        category = st.selectbox("Category", list(ExpenseCategory),
                                format_func=lambda c: c.value.title(), key="expense_category")
        with st.form("expense_form"):
            subcategory = st.selectbox("Subcategory", EXPENSE_SUBCATEGORIES[category.value])
            amount = st.number_input("Amount (KRW)", value=0, step=10000)
            expense_date = st.date_input("Date", value=date.today())
            description = st.text_input("Description")
            memo = st.text_input("Memo")
            saved = st.form_submit_button("Add")
        if saved:
            result = validate_expense(category.value, int(amount), expense_date.isoformat())
            if result.is_valid:
                repository.create_expense(
                    category=category,
                    subcategory=subcategory,
                    amount=int(amount),
                    date=expense_date.isoformat(),
                    description=description,
                    memo=memo,
                )
                st.rerun()
            for e in result.errors:
                st.error(e)

    if expenses:
        with st.expander("Delete expense"):
            labels = {e.expense_id: f"{e.date} {e.subcategory} {format_currency_with_suffix(e.amount)}"
                      for e in expenses}
            expense_id = st.selectbox("Expense", list(labels.keys()), format_func=labels.get,
                                      key="expense_delete_select")
            if st.button("Delete", type="primary", key="expense_delete"):
                repository.delete_expense(expense_id)
                st.rerun()


def render(sidebar_state):
    """Render the Finance tab."""
    st.header("Finance")

    repository = get_repository()
    rooms = {r.room_id: r.number for r in repository.get_all_rooms_for_owner(sidebar_state.user.user_id)}
    residents = {r.resident_id: r.name for r in repository.get_residents()}

    month = st.text_input("Month (YYYY-MM)", value=current_month(), key="finance_month")
    try:
        date.fromisoformat(f"{month}-01")
    except ValueError:
        st.error("Month must look like 2024-11.")
        return

    created = generate_monthly_payments(repository, month)
    if created:
        st.toast(f"Billed {len(created)} active contract(s) for {month}.")

    summary = summarize_month(
        repository.get_contracts(), repository.get_payments(), repository.get_expenses(), month,
    )
    render_finance_metrics(summary)

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(income_vs_expense_bar(summary.monthly_income, summary.total_expenses),
                        use_container_width=True)
    with col2:
        totals = expenses_by_category(repository.get_expenses())
        if totals:
            st.plotly_chart(expense_category_bar(totals), use_container_width=True)

    payments_tab, expenses_tab = st.tabs(["Payments", "Expenses"])
    with payments_tab:
        _render_payments(repository, month, rooms, residents)
    with expenses_tab:
        _render_expenses(repository)
