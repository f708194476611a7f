from __future__ import annotations

from datetime import UTC, date, datetime

from dateutil.relativedelta import relativedelta

DayLike = date | datetime | str


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_naive() -> datetime:
    return utc_now().replace(tzinfo=None)


def to_day(value: DayLike) -> date:
    """Truncate a date, datetime or ISO-8601 string to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(value.strip()).date()


def month_start(value: DayLike) -> date:
    return to_day(value).replace(day=1)


def add_months(value: date, months: int) -> date:
    """Shift a date by whole months, landing on the first of the month."""
    return value.replace(day=1) + relativedelta(months=months)
