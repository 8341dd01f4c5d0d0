import streamlit as st

import api
from errors import ExpenseTrackerError
from pagination import NEXT, PREVIOUS, PageView, advance
import state


def _go(direction: str, total: int):
    st.session_state[state.CURRENT_PAGE] = advance(
        direction, st.session_state[state.CURRENT_PAGE], total
    )


def _delete(expense_id: str):
    try:
        api.delete_expense(expense_id)
    except ExpenseTrackerError as e:
        st.session_state[state.FLASH_ERROR] = f"Delete failed: {e}"
        return
    if st.session_state.get(state.EDITING_ID) == expense_id:
        state.reset_form(st.session_state)


def expense_list(page: PageView):
    st.subheader("Expenses")

    if not page.items:
        st.info("No expenses for the selected day")
    for expense in page.items:
        with st.container(border=True):
            c1, c2 = st.columns([3, 1])
            c1.markdown(f"**{expense.comment or '(no comment)'}**")
            c2.markdown(f"{expense.amount:,.2f} {expense.currency}")

            c1, c2, c3 = st.columns([3, 1, 1])
            c1.caption(f"{expense.created_at:%b %d, %Y, %I:%M %p}")
            c2.button(
                "Edit",
                key=f"edit_{expense.id}",
                on_click=state.start_edit,
                args=(st.session_state, expense),
            )
            c3.button(
                "Delete",
                key=f"delete_{expense.id}",
                on_click=_delete,
                args=(expense.id,),
            )

    prev_col, info_col, next_col = st.columns([1, 2, 1])
    prev_col.button(
        "prev",
        disabled=not page.has_prev,
        on_click=_go,
        args=(PREVIOUS, page.total_pages),
    )
    if page.total_pages:
        info_col.caption(f"Page {page.current_page} of {page.total_pages}")
    next_col.button(
        "Next",
        disabled=not page.has_next,
        on_click=_go,
        args=(NEXT, page.total_pages),
    )
