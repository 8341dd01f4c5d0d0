from datetime import datetime

import streamlit as st

import api
from errors import ExpenseTrackerError
import state


def _submit():
    ss = st.session_state
    created_at = None
    if ss.get(state.EDITING_ID) is None and ss.get(state.FORM_BACKDATE):
        created_at = datetime.combine(ss[state.SELECTED_DATE], datetime.now().time())

    draft = state.current_draft(ss, created_at=created_at)
    try:
        if ss.get(state.EDITING_ID) is not None:
            api.update_expense(ss[state.EDITING_ID], draft)
        else:
            api.create_expense(draft)
    except ExpenseTrackerError as e:
        ss[state.FLASH_ERROR] = f"Saving failed: {e}"
        return

    state.reset_form(ss)


def expense_form():
    editing = st.session_state.get(state.EDITING_ID) is not None
    st.header("✏️ Edit Expense" if editing else "➕ Add Expense")

    with st.form("expense_form"):
        st.number_input("Amount", min_value=0.0, step=1.0, key=state.FORM_AMOUNT)
        st.text_input("Currency", placeholder="Enter currency", key=state.FORM_CURRENCY)
        st.text_input("Comment", placeholder="Enter comment", key=state.FORM_COMMENT)
        if not editing:
            st.checkbox("Record on the selected day", key=state.FORM_BACKDATE)

        st.form_submit_button(
            "Update Expense" if editing else "Add Expense",
            on_click=_submit,
        )

    if editing:
        st.button("Cancel edit", on_click=state.reset_form, args=(st.session_state,))
