from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Callable, Iterable, Protocol, TypeVar

from goalboard.utils.datetime_utils import DayLike, add_months, month_start, to_day


class GoalDayType(str, Enum):
    START = "start"
    DUE = "due"
    BOTH = "both"
    NONE = "none"


class DateRanged(Protocol):
    start_date: DayLike
    due_date: DayLike


GoalT = TypeVar("GoalT", bound=DateRanged)


@dataclass(frozen=True)
class MonthGrid:
    month: date
    leading_padding: int
    days: tuple[date, ...]


def goal_type_for_date(goal: DateRanged, value: DayLike) -> GoalDayType:
    day = to_day(value)
    is_start = to_day(goal.start_date) == day
    is_due = to_day(goal.due_date) == day
    if is_start and is_due:
        return GoalDayType.BOTH
    if is_start:
        return GoalDayType.START
    if is_due:
        return GoalDayType.DUE
    return GoalDayType.NONE


def goals_for_date(value: DayLike, goals: Iterable[GoalT]) -> list[GoalT]:
    """Goals that start or are due on the given day."""
    return [
        goal
        for goal in goals
        if goal_type_for_date(goal, value) is not GoalDayType.NONE
    ]


def in_progress_goals_for_date(value: DayLike, goals: Iterable[GoalT]) -> list[GoalT]:
    """Goals running through the given day, excluding their start and due days."""
    day = to_day(value)
    return [
        goal
        for goal in goals
        if to_day(goal.start_date) < day < to_day(goal.due_date)
    ]


def month_grid(reference: DayLike) -> MonthGrid:
    first = month_start(reference)
    days_in_month = calendar.monthrange(first.year, first.month)[1]
    # Columns run Sunday..Saturday; date.weekday() is Monday-based.
    leading_padding = (first.weekday() + 1) % 7
    return MonthGrid(
        month=first,
        leading_padding=leading_padding,
        days=tuple(first + timedelta(days=offset) for offset in range(days_in_month)),
    )


def next_month(displayed: DayLike) -> date:
    return add_months(month_start(displayed), 1)


class CalendarService:
    def __init__(self, *, today_provider: Callable[[], date] | None = None) -> None:
        self._today_provider = today_provider or date.today

    def today(self) -> date:
        return to_day(self._today_provider())

    def is_past_date(self, value: DayLike) -> bool:
        return to_day(value) < self.today()

    def is_selectable(self, value: DayLike) -> bool:
        return not self.is_past_date(value)

    def earliest_month(self) -> date:
        return month_start(self.today())

    def clamp_month(self, displayed: DayLike) -> date:
        return max(month_start(displayed), self.earliest_month())

    def can_go_back(self, displayed: DayLike) -> bool:
        return month_start(displayed) > self.earliest_month()

    def previous_month(self, displayed: DayLike) -> date:
        return self.clamp_month(add_months(month_start(displayed), -1))

    def next_month(self, displayed: DayLike) -> date:
        return next_month(displayed)

    def days_until(self, value: DayLike) -> int:
        return (to_day(value) - self.today()).days
