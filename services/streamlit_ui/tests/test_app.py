from datetime import date, datetime, timedelta
from pathlib import Path
from unittest import mock

import requests
from streamlit.testing.v1 import AppTest

APP_FILE = str(Path(__file__).resolve().parents[1] / "app" / "app.py")


def _wire(_id, when, amount, comment="item"):
    return {"_id": _id, "amount": amount, "currency": "AED", "comment": comment,
            "created_at": when.isoformat(timespec="minutes")}


def _ok(payload):
    resp = mock.Mock(spec=requests.Response)
    resp.status_code = 200
    resp.raise_for_status.return_value = None
    resp.json.return_value = payload
    return resp


def _today_at(hour):
    return datetime.combine(date.today(), datetime.min.time()) + timedelta(hours=hour)


def _buttons(at, label):
    return [b for b in at.button if b.label == label]


def test_app_shows_today_totals():
    payload = [
        _wire("a", _today_at(8), 10),
        _wire("b", _today_at(20), 5),
        _wire("c", _today_at(8) - timedelta(days=60), 99),
    ]
    with mock.patch("requests.request", return_value=_ok(payload)):
        at = AppTest.from_file(APP_FILE, default_timeout=30).run()

    assert not at.exception
    assert at.metric[0].value == "15.00"
    assert len(_buttons(at, "Edit")) == 2


def test_app_pages_through_the_day():
    payload = [_wire(f"r{i}", _today_at(i + 1), 1) for i in range(4)]
    with mock.patch("requests.request", return_value=_ok(payload)):
        at = AppTest.from_file(APP_FILE, default_timeout=30).run()
        assert len(_buttons(at, "Edit")) == 3
        assert _buttons(at, "prev")[0].disabled

        _buttons(at, "Next")[0].click().run()

    assert not at.exception
    assert len(_buttons(at, "Edit")) == 1
    assert _buttons(at, "Next")[0].disabled


def test_app_reports_unreachable_api():
    with mock.patch("requests.request", side_effect=requests.ConnectionError("refused")):
        at = AppTest.from_file(APP_FILE, default_timeout=30).run()

    assert at.error
    assert "Could not load expenses" in at.error[0].value


class _FakeExpenseApi:
    """Stands in for requests.request, backed by an in-memory list."""

    def __init__(self, records, fail_writes=False):
        self.records = list(records)
        self.fail_writes = fail_writes
        self.calls = []

    def __call__(self, method, url, timeout=None, json=None):
        self.calls.append((method, url, json))
        if method != "GET" and self.fail_writes:
            resp = mock.Mock(spec=requests.Response)
            resp.status_code = 500
            resp.raise_for_status.side_effect = requests.HTTPError(response=resp)
            return resp
        if method == "DELETE":
            expense_id = url.rsplit("/", 1)[1]
            self.records = [r for r in self.records if r["_id"] != expense_id]
        return _ok(list(self.records))

    def writes(self):
        return [c for c in self.calls if c[0] != "GET"]


def _four_today():
    return [_wire(f"r{i}", _today_at(i + 1), 1) for i in range(4)]


def test_edit_sends_put_by_id():
    fake = _FakeExpenseApi([_wire("a", _today_at(8), 10, comment="coffee")])
    with mock.patch("requests.request", side_effect=fake):
        at = AppTest.from_file(APP_FILE, default_timeout=30).run()
        at.button(key="edit_a").click().run()
        assert at.header[0].value == "✏️ Edit Expense"
        assert at.text_input(key="form_comment").value == "coffee"

        at.text_input(key="form_comment").input("taxi")
        _buttons(at, "Update Expense")[0].click().run()

    assert not at.exception
    method, url, body = fake.writes()[0]
    assert method == "PUT"
    assert url.endswith("/api/expenses/a")
    assert body["comment"] == "taxi"
    assert "created_at" not in body
    assert at.session_state["editing_id"] is None


def test_add_on_selected_day_sends_created_at():
    day = date.today() - timedelta(days=3)
    fake = _FakeExpenseApi([])
    with mock.patch("requests.request", side_effect=fake):
        at = AppTest.from_file(APP_FILE, default_timeout=30).run()
        at.date_input(key="selected_date").set_value(day).run()

        at.number_input(key="form_amount").set_value(4.0)
        at.text_input(key="form_currency").input("AED")
        at.checkbox(key="form_backdate").check()
        _buttons(at, "Add Expense")[0].click().run()

    assert not at.exception
    method, url, body = fake.writes()[0]
    assert method == "POST"
    assert body["amount"] == 4.0
    assert body["created_at"].startswith(day.isoformat())


def test_delete_moves_back_when_page_empties():
    fake = _FakeExpenseApi(_four_today())
    with mock.patch("requests.request", side_effect=fake):
        at = AppTest.from_file(APP_FILE, default_timeout=30).run()
        _buttons(at, "Next")[0].click().run()
        assert at.session_state["current_page"] == 2

        at.button(key="delete_r3").click().run()

    assert not at.exception
    assert fake.writes()[0][0] == "DELETE"
    assert fake.writes()[0][1].endswith("/api/expenses/r3")
    assert at.session_state["current_page"] == 1
    assert len(_buttons(at, "Edit")) == 3


def test_failed_save_is_reported():
    fake = _FakeExpenseApi([], fail_writes=True)
    with mock.patch("requests.request", side_effect=fake):
        at = AppTest.from_file(APP_FILE, default_timeout=30).run()
        at.number_input(key="form_amount").set_value(2.0)
        _buttons(at, "Add Expense")[0].click().run()

    assert not at.exception
    assert any("Saving failed" in e.value for e in at.error)
    assert at.session_state["form_amount"] == 2.0


def test_changing_day_goes_back_to_first_page():
    fake = _FakeExpenseApi(_four_today())
    with mock.patch("requests.request", side_effect=fake):
        at = AppTest.from_file(APP_FILE, default_timeout=30).run()
        _buttons(at, "Next")[0].click().run()
        assert at.session_state["current_page"] == 2

        at.date_input(key="selected_date").set_value(date.today() - timedelta(days=1)).run()

    assert not at.exception
    assert at.session_state["current_page"] == 1
    assert not _buttons(at, "Edit")
