from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable
from uuid import UUID

from goalboard.models.goal import Goal
from goalboard.services.goal_progress_service import (
    GoalProgressService,
    summarize_goals,
)
from goalboard.services.goal_service import GoalService, GoalServiceError
from goalboard.services.quarter_service import (
    InvalidQuarterKeyError,
    QuarterService,
    group_by_quarter,
    parse_quarter_key,
)


@dataclass(frozen=True)
class GoalApplicationError(Exception):
    message: str
    code: str
    status_code: int
    details: dict[str, Any] | None = None


class GoalApplicationService:
    def __init__(
        self,
        *,
        user_id: UUID,
        goal_service_factory: Callable[[UUID], GoalService],
        quarter_service_factory: Callable[[], QuarterService],
        progress_service_factory: Callable[[], GoalProgressService],
    ) -> None:
        self._user_id = user_id
        self._goal_service = goal_service_factory(user_id)
        self._quarter_service = quarter_service_factory()
        self._progress_service = progress_service_factory()

    @classmethod
    def with_defaults(cls, user_id: UUID) -> GoalApplicationService:
        return cls(
            user_id=user_id,
            goal_service_factory=GoalService,
            quarter_service_factory=QuarterService,
            progress_service_factory=GoalProgressService,
        )

    def _serialize_goal(self, goal: Goal) -> dict[str, Any]:
        data = self._goal_service.serialize(goal)
        data["progress"] = self._progress_service.serialize_progress(
            milestones=goal.milestones,
            due_date=goal.due_date,
        )
        return data

    def create_goal(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            goal = self._goal_service.create_goal(payload)
        except GoalServiceError as exc:
            raise _to_goal_application_error(exc) from exc
        return self._serialize_goal(goal)

    def list_goals(
        self,
        *,
        page: int,
        per_page: int,
        status: str | None,
    ) -> dict[str, Any]:
        try:
            goals, pagination = self._goal_service.list_goals(
                page=page,
                per_page=per_page,
                status=status,
            )
            stats = summarize_goals(self._goal_service.all_goals())
        except GoalServiceError as exc:
            raise _to_goal_application_error(exc) from exc
        return {
            "items": [self._serialize_goal(goal) for goal in goals],
            "pagination": pagination,
            "stats": self._progress_service.serialize_stats(stats),
        }

    def get_stats(self) -> dict[str, int]:
        stats = summarize_goals(self._goal_service.all_goals())
        return self._progress_service.serialize_stats(stats)

    def get_goal(self, goal_id: UUID) -> dict[str, Any]:
        try:
            goal = self._goal_service.get_goal(goal_id)
        except GoalServiceError as exc:
            raise _to_goal_application_error(exc) from exc
        return self._serialize_goal(goal)

    def update_goal(self, goal_id: UUID, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            goal = self._goal_service.update_goal(goal_id, payload)
        except GoalServiceError as exc:
            raise _to_goal_application_error(exc) from exc
        return self._serialize_goal(goal)

    def delete_goal(self, goal_id: UUID) -> None:
        try:
            self._goal_service.delete_goal(goal_id)
        except GoalServiceError as exc:
            raise _to_goal_application_error(exc) from exc

    def list_milestones(self, goal_id: UUID) -> list[dict[str, Any]]:
        try:
            milestones = self._goal_service.list_milestones(goal_id)
        except GoalServiceError as exc:
            raise _to_goal_application_error(exc) from exc
        return [self._goal_service.serialize_milestone(item) for item in milestones]

    def add_milestone(
        self, goal_id: UUID, payload: dict[str, Any]
    ) -> dict[str, Any]:
        try:
            milestone = self._goal_service.add_milestone(goal_id, payload)
        except GoalServiceError as exc:
            raise _to_goal_application_error(exc) from exc
        return self._goal_service.serialize_milestone(milestone)

    def update_milestone(
        self,
        goal_id: UUID,
        milestone_id: UUID,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        try:
            milestone, goal = self._goal_service.update_milestone(
                goal_id, milestone_id, payload
            )
        except GoalServiceError as exc:
            raise _to_goal_application_error(exc) from exc
        return {
            "milestone": self._goal_service.serialize_milestone(milestone),
            "goal": self._serialize_goal(goal),
        }

    def delete_milestone(self, goal_id: UUID, milestone_id: UUID) -> None:
        try:
            self._goal_service.delete_milestone(goal_id, milestone_id)
        except GoalServiceError as exc:
            raise _to_goal_application_error(exc) from exc

    def list_quarters(self) -> dict[str, Any]:
        buckets = group_by_quarter(self._goal_service.all_goals())
        window = self._quarter_service.all_quarters()
        window_keys = {quarter.key for quarter in window}

        quarters = [
            self._quarter_service.serialize_quarter(
                quarter,
                [self._serialize_goal(goal) for goal in buckets.get(quarter.key, [])],
            )
            for quarter in window
        ]
        other_quarters = [
            self._quarter_service.serialize_quarter(
                parse_quarter_key(key),
                [self._serialize_goal(goal) for goal in goals],
            )
            for key, goals in buckets.items()
            if key not in window_keys
        ]
        return {"quarters": quarters, "other_quarters": other_quarters}

    def get_quarter(self, key: str) -> dict[str, Any]:
        try:
            quarter = parse_quarter_key(key)
        except InvalidQuarterKeyError as exc:
            raise GoalApplicationError(
                message="Invalid quarter key.",
                code="VALIDATION_ERROR",
                status_code=400,
                details={"key": key, "expected_format": "<year>-Q<quarter>"},
            ) from exc

        goals = group_by_quarter(self._goal_service.all_goals()).get(quarter.key, [])
        return self._quarter_service.serialize_quarter(
            quarter,
            [self._serialize_goal(goal) for goal in goals],
        )


def _to_goal_application_error(exc: GoalServiceError) -> GoalApplicationError:
    return GoalApplicationError(
        message=exc.message,
        code=exc.code,
        status_code=exc.status_code,
        details=exc.details,
    )
