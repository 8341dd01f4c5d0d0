import pytest

from models import ExpenseRecord


def make_record(created_at, amount=1.0, currency="AED", comment="", _id=None):
    return ExpenseRecord.model_validate({
        "_id": _id or f"id-{created_at}-{amount}",
        "amount": amount,
        "currency": currency,
        "comment": comment,
        "created_at": created_at,
    })


@pytest.fixture
def march_records():
    return [
        make_record("2024-03-05T08:00", 10, comment="coffee", _id="a"),
        make_record("2024-03-05T20:00", 5, comment="bus", _id="b"),
        make_record("2024-03-10T10:00", 7, comment="lunch", _id="c"),
    ]
