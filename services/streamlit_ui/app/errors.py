from typing import Any, List, Optional


class ExpenseTrackerError(Exception):
    """Base class for errors surfaced to the UI."""


class InvalidRecordError(ExpenseTrackerError, ValueError):
    """
    An expense coming from the API could not be validated.
    `index` is the position of the record in the payload (None for a
    payload that is not a list at all).
    """

    def __init__(self, message: str, index: Optional[int] = None, details: Optional[List[Any]] = None):
        super().__init__(message)
        self.index = index
        self.details = details or []


class ExpenseApiError(ExpenseTrackerError, RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
