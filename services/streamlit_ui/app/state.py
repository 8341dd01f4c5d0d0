from datetime import date, datetime
from typing import MutableMapping, Optional

from models import ExpenseDraft, ExpenseRecord
from pagination import clamp_page, total_pages

# session_state keys
SELECTED_DATE = "selected_date"
CURRENT_PAGE = "current_page"
EDITING_ID = "editing_id"
FORM_AMOUNT = "form_amount"
FORM_CURRENCY = "form_currency"
FORM_COMMENT = "form_comment"
FORM_BACKDATE = "form_backdate"
FLASH_ERROR = "flash_error"


def ensure_defaults(state: MutableMapping, today: Optional[date] = None):
    defaults = {
        SELECTED_DATE: today or date.today(),
        CURRENT_PAGE: 1,
        EDITING_ID: None,
        FORM_AMOUNT: 0.0,
        FORM_CURRENCY: "",
        FORM_COMMENT: "",
        FORM_BACKDATE: False,
        FLASH_ERROR: None,
    }
    for key, value in defaults.items():
        if key not in state:
            state[key] = value


def start_edit(state: MutableMapping, record: ExpenseRecord):
    state[FORM_AMOUNT] = record.amount
    state[FORM_CURRENCY] = record.currency
    state[FORM_COMMENT] = record.comment
    state[EDITING_ID] = record.id


def reset_form(state: MutableMapping):
    state[FORM_AMOUNT] = 0.0
    state[FORM_CURRENCY] = ""
    state[FORM_COMMENT] = ""
    state[FORM_BACKDATE] = False
    state[EDITING_ID] = None


def reset_page(state: MutableMapping):
    state[CURRENT_PAGE] = 1


def sync_page(state: MutableMapping, item_count: int, page_size: int) -> int:
    """Keep the current page inside the list after it shrinks (delete, new day)."""
    page = clamp_page(state.get(CURRENT_PAGE, 1), total_pages(item_count, page_size))
    state[CURRENT_PAGE] = page
    return page


def current_draft(state: MutableMapping, created_at: Optional[datetime] = None) -> ExpenseDraft:
    return ExpenseDraft(
        amount=state.get(FORM_AMOUNT) or 0.0,
        currency=(state.get(FORM_CURRENCY) or "").strip(),
        comment=(state.get(FORM_COMMENT) or "").strip(),
        created_at=created_at,
    )
