from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, date
from typing import Any, Callable
from uuid import UUID

from goalboard.models.goal import Goal
from goalboard.services.calendar_service import (
    CalendarService,
    GoalDayType,
    goal_type_for_date,
    goals_for_date,
    in_progress_goals_for_date,
    month_grid,
)
from goalboard.services.goal_service import GoalService


@dataclass(frozen=True)
class CalendarApplicationError(Exception):
    message: str
    code: str
    status_code: int
    details: dict[str, Any] | None = None


def _goal_marker(goal: Goal, day_type: GoalDayType) -> dict[str, Any]:
    return {
        "id": str(goal.id),
        "title": goal.title,
        "status": goal.status,
        "type": day_type.value,
    }


class CalendarApplicationService:
    def __init__(
        self,
        *,
        user_id: UUID,
        goal_service_factory: Callable[[UUID], GoalService],
        calendar_service_factory: Callable[[], CalendarService],
    ) -> None:
        self._goal_service = goal_service_factory(user_id)
        self._calendar_service = calendar_service_factory()

    @classmethod
    def with_defaults(cls, user_id: UUID) -> CalendarApplicationService:
        return cls(
            user_id=user_id,
            goal_service_factory=GoalService,
            calendar_service_factory=CalendarService,
        )

    def today(self) -> date:
        return self._calendar_service.today()

    def month_view(
        self,
        *,
        year: int | None = None,
        month: int | None = None,
    ) -> dict[str, Any]:
        today = self._calendar_service.today()
        try:
            requested = date(
                today.year if year is None else year,
                today.month if month is None else month,
                1,
            )
        except ValueError as exc:
            raise CalendarApplicationError(
                message="Invalid calendar month.",
                code="VALIDATION_ERROR",
                status_code=400,
                details={"year": year, "month": month},
            ) from exc

        displayed = self._calendar_service.clamp_month(requested)
        grid = month_grid(displayed)
        goals = self._goal_service.all_goals()

        days = []
        for day in grid.days:
            markers = [
                _goal_marker(goal, goal_type_for_date(goal, day))
                for goal in goals_for_date(day, goals)
            ]
            days.append(
                {
                    "date": day.isoformat(),
                    "day": day.day,
                    "is_today": day == today,
                    "is_past": self._calendar_service.is_past_date(day),
                    "is_selectable": self._calendar_service.is_selectable(day),
                    "has_goals": bool(markers),
                    "goals": markers,
                    "in_progress_goal_ids": [
                        str(goal.id) for goal in in_progress_goals_for_date(day, goals)
                    ],
                }
            )

        next_month = None
        if displayed < date(MAXYEAR, 12, 1):
            next_month = self._calendar_service.next_month(displayed).strftime("%Y-%m")

        return {
            "month": displayed.strftime("%Y-%m"),
            "label": displayed.strftime("%B %Y"),
            "was_clamped": displayed != requested,
            "leading_padding": grid.leading_padding,
            "days": days,
            "navigation": {
                "previous": self._calendar_service.previous_month(displayed).strftime(
                    "%Y-%m"
                ),
                "next": next_month,
                "can_go_back": self._calendar_service.can_go_back(displayed),
            },
        }

    def day_view(self, day: date) -> dict[str, Any]:
        goals = self._goal_service.all_goals()
        return {
            "date": day.isoformat(),
            "is_past": self._calendar_service.is_past_date(day),
            "is_selectable": self._calendar_service.is_selectable(day),
            "goals": [
                {
                    "goal": self._goal_service.serialize(goal),
                    "type": goal_type_for_date(goal, day).value,
                    "days_until_due": self._calendar_service.days_until(goal.due_date),
                }
                for goal in goals_for_date(day, goals)
            ],
            "in_progress": [
                {
                    "goal": self._goal_service.serialize(goal),
                    "days_until_due": self._calendar_service.days_until(goal.due_date),
                }
                for goal in in_progress_goals_for_date(day, goals)
            ],
        }
