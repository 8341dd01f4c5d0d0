import logging

import streamlit as st

from aggregation import summarize
from api import fetch_expenses
from config import EXPENSES_PER_PAGE, configure_logging
from errors import ExpenseApiError, InvalidRecordError
from pagination import paginate
import state

from ui.charts import charts_section, totals_row
from ui.expense_form import expense_form
from ui.expense_list import expense_list

configure_logging()
logger = logging.getLogger(__name__)


st.set_page_config(
    page_title="Expense Tracker",
    layout="wide",
)

ss = st.session_state
state.ensure_defaults(ss)

st.sidebar.title("Expense Tracker")
st.sidebar.date_input(
    "Day",
    key=state.SELECTED_DATE,
    on_change=state.reset_page,
    args=(ss,),
)

st.title("💸 Expense Tracker")

if ss.get(state.FLASH_ERROR):
    st.error(ss[state.FLASH_ERROR])
    ss[state.FLASH_ERROR] = None

try:
    records = fetch_expenses()
except ExpenseApiError as e:
    logger.exception("Could not load expenses")
    st.error(f"Could not load expenses: {e}")
    st.stop()
except InvalidRecordError as e:
    logger.error("Rejected expenses payload: %s", e)
    st.error(f"The server returned an invalid expense: {e}")
    st.stop()

summary = summarize(records, ss[state.SELECTED_DATE])

# ---------------- Totals + charts ----------------
totals_row(summary)
charts_section(summary)

st.divider()

# ---------------- List + form ----------------
list_col, form_col = st.columns([3, 2])

with list_col:
    page_no = state.sync_page(ss, len(summary.daily_expenses), EXPENSES_PER_PAGE)
    expense_list(paginate(summary.daily_expenses, page_no, EXPENSES_PER_PAGE))

with form_col:
    expense_form()
