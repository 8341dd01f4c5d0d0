import logging
from typing import List

import requests

from config import API_CONNECT_TIMEOUT, API_READ_TIMEOUT, EXPENSE_API_URL
from errors import ExpenseApiError
from models import ExpenseDraft, ExpenseRecord, parse_records

logger = logging.getLogger(__name__)

TIMEOUT = (API_CONNECT_TIMEOUT, API_READ_TIMEOUT)


def _expense_url(expense_id: str) -> str:
    return f"{EXPENSE_API_URL.rstrip('/')}/{expense_id}"


def _send(method: str, url: str, **kwargs) -> requests.Response:
    try:
        r = requests.request(method, url, timeout=TIMEOUT, **kwargs)
        r.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        logger.error("%s %s failed with status %s", method, url, status)
        raise ExpenseApiError(f"{method} {url} failed ({status})", status_code=status) from e
    except requests.RequestException as e:
        logger.error("%s %s failed: %s", method, url, e)
        raise ExpenseApiError(f"{method} {url} failed: {e}") from e
    return r


def fetch_expenses() -> List[ExpenseRecord]:
    r = _send("GET", EXPENSE_API_URL)
    try:
        payload = r.json()
    except ValueError as e:
        raise ExpenseApiError(f"GET {EXPENSE_API_URL} returned invalid JSON") from e

    records = parse_records(payload)
    logger.info("Fetched %d expenses", len(records))
    return records


def create_expense(draft: ExpenseDraft):
    _send("POST", EXPENSE_API_URL, json=draft.to_payload())
    logger.info("Created expense %s %s", draft.amount, draft.currency)


def update_expense(expense_id: str, draft: ExpenseDraft):
    _send("PUT", _expense_url(expense_id), json=draft.to_payload())
    logger.info("Updated expense %s", expense_id)


def delete_expense(expense_id: str):
    _send("DELETE", _expense_url(expense_id))
    logger.info("Deleted expense %s", expense_id)
