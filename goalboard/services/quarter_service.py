from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Callable, Iterable, Protocol, Sequence, TypeVar

from goalboard.utils.datetime_utils import DayLike, to_day

QUARTER_KEY_PATTERN = re.compile(r"(\d+)-Q(\d+)")

_QUARTER_MONTHS: dict[int, tuple[str, int, int]] = {
    1: ("Jan - Mar", 0, 2),
    2: ("Apr - Jun", 3, 5),
    3: ("Jul - Sep", 6, 8),
    4: ("Oct - Dec", 9, 11),
}


class InvalidQuarterKeyError(ValueError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Invalid quarter key: {key}")
        self.key = key


class StartDated(Protocol):
    start_date: DayLike


GoalT = TypeVar("GoalT", bound=StartDated)


@dataclass(frozen=True)
class Quarter:
    quarter: int
    year: int
    label: str
    months: str
    start_month: int
    end_month: int

    @property
    def key(self) -> str:
        return quarter_key(self.year, self.quarter)

    @property
    def sort_key(self) -> tuple[int, int]:
        return self.year, self.quarter


def quarter_key(year: int, quarter: int) -> str:
    return f"{year}-Q{quarter}"


def quarter_of(value: DayLike) -> int:
    """Return the calendar quarter (1-4) containing ``value``."""
    month_index = to_day(value).month - 1
    return month_index // 3 + 1


def quarter_info(value: DayLike) -> Quarter:
    day = to_day(value)
    quarter = quarter_of(day)
    months, start_month, end_month = _QUARTER_MONTHS[quarter]
    return Quarter(
        quarter=quarter,
        year=day.year,
        label=f"Q{quarter} {day.year}",
        months=months,
        start_month=start_month,
        end_month=end_month,
    )


def first_day_of_quarter(year: int, quarter: int) -> date:
    return date(year, (quarter - 1) * 3 + 1, 1)


def group_by_quarter(goals: Iterable[GoalT]) -> dict[str, list[GoalT]]:
    """Bucket goals by the quarter of their start date.

    Buckets are returned in chronological order and each bucket is sorted by
    start date; goals sharing a start date keep their input order.
    """
    buckets: dict[tuple[int, int], list[GoalT]] = {}
    for goal in goals:
        info = quarter_info(goal.start_date)
        buckets.setdefault(info.sort_key, []).append(goal)

    grouped: dict[str, list[GoalT]] = {}
    for year, quarter in sorted(buckets):
        items = buckets[(year, quarter)]
        items.sort(key=lambda goal: to_day(goal.start_date))
        grouped[quarter_key(year, quarter)] = items
    return grouped


def parse_quarter_key(key: str) -> Quarter:
    match = QUARTER_KEY_PATTERN.fullmatch(key.strip())
    if match is None:
        raise InvalidQuarterKeyError(key)
    year = int(match.group(1))
    quarter = int(match.group(2))
    if not 1 <= quarter <= 4 or not MINYEAR <= year <= MAXYEAR:
        raise InvalidQuarterKeyError(key)
    return quarter_info(first_day_of_quarter(year, quarter))


class QuarterService:
    """Quarter classification relative to the injected clock."""

    def __init__(self, *, today_provider: Callable[[], date] | None = None) -> None:
        self._today_provider = today_provider or date.today

    def current_quarter(self) -> Quarter:
        return quarter_info(self._today_provider())

    def all_quarters(self) -> list[Quarter]:
        current_year = self._today_provider().year
        return [
            quarter_info(first_day_of_quarter(year, quarter))
            for year in (current_year, current_year + 1)
            for quarter in range(1, 5)
        ]

    def is_current_quarter(self, quarter: Quarter) -> bool:
        current = self.current_quarter()
        return quarter.year == current.year and quarter.quarter == current.quarter

    def is_past_quarter(self, quarter: Quarter) -> bool:
        current = self.current_quarter()
        if quarter.year < current.year:
            return True
        return quarter.year == current.year and quarter.quarter < current.quarter

    def serialize_quarter(
        self,
        quarter: Quarter,
        goals: Sequence[object] = (),
    ) -> dict[str, object]:
        return {
            "key": quarter.key,
            "quarter": quarter.quarter,
            "year": quarter.year,
            "label": quarter.label,
            "months": quarter.months,
            "start_month": quarter.start_month,
            "end_month": quarter.end_month,
            "is_current": self.is_current_quarter(quarter),
            "is_past": self.is_past_quarter(quarter),
            "goals": list(goals),
        }
