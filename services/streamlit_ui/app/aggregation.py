"""
Daily / monthly expense totals for the charts and the expense list.

Everything here is recomputed from the full record list on each call.
Amounts are summed as plain numbers: records in different currencies are
added together without conversion, same as the original tracker.
"""

import calendar
from datetime import date, datetime
from typing import Iterable, List, Sequence, Tuple

import pandas as pd

from models import DailyBucket, ExpenseRecord, ExpenseSummary


def _as_date(selected) -> date:
    if isinstance(selected, datetime):
        return selected.date()
    return selected


def filter_by_day(records: Iterable[ExpenseRecord], selected_date) -> List[ExpenseRecord]:
    day = _as_date(selected_date)
    return [r for r in records if r.created_on == day]


def sum_amounts(records: Iterable[ExpenseRecord]) -> float:
    return sum(r.amount for r in records)


def month_bounds(selected_date) -> Tuple[date, date]:
    d = _as_date(selected_date)
    last = calendar.monthrange(d.year, d.month)[1]
    return d.replace(day=1), d.replace(day=last)


def filter_by_month(records: Iterable[ExpenseRecord], selected_date) -> List[ExpenseRecord]:
    first, last = month_bounds(selected_date)
    return [r for r in records if first <= r.created_on <= last]


def group_by_day_of_month(records: Sequence[ExpenseRecord], selected_date) -> List[DailyBucket]:
    """
    One bucket per day of the selected month that has expenses, ordered
    by day number. Days without expenses get no bucket.
    """
    month_records = filter_by_month(records, selected_date)
    if not month_records:
        return []

    df = pd.DataFrame({
        "day": [r.created_at.day for r in month_records],
        "amount": [r.amount for r in month_records],
    })

    # integer keys, so groupby sorts 2 < 9 < 10
    daily = df.groupby("day")["amount"].sum().sort_index()

    return [
        DailyBucket(day=f"{int(day):02d}", total=float(total))
        for day, total in daily.items()
    ]


def total_for_month(records: Iterable[ExpenseRecord], selected_date) -> float:
    return sum_amounts(filter_by_month(records, selected_date))


def summarize(records: Sequence[ExpenseRecord], selected_date) -> ExpenseSummary:
    day = _as_date(selected_date)
    daily = filter_by_day(records, day)

    return ExpenseSummary(
        selected_date=day,
        daily_expenses=daily,
        daily_total=sum_amounts(daily),
        monthly_buckets=group_by_day_of_month(records, day),
        monthly_total=total_for_month(records, day),
    )
