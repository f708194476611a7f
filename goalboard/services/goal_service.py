from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, cast
from uuid import UUID

from flask import current_app
from marshmallow import ValidationError

from goalboard.extensions.database import db
from goalboard.models.goal import Goal
from goalboard.models.milestone import Milestone
from goalboard.schemas.goal_schema import GoalSchema
from goalboard.schemas.milestone_schema import MilestoneSchema
from goalboard.services.goal_progress_service import (
    GOAL_STATUSES,
    is_finished,
    milestone_progress,
)

_MILESTONE_LINE_PREFIX = re.compile(r"^-\s*")


@dataclass
class GoalServiceError(Exception):
    message: str
    code: str
    status_code: int
    details: dict[str, Any] | None = None


def milestone_titles_from_description(description: str | None) -> list[str]:
    """Lines starting with ``-`` in a goal description become milestone titles."""
    if not description:
        return []
    titles = []
    for line in description.splitlines():
        stripped = line.strip()
        if not stripped.startswith("-"):
            continue
        title = _MILESTONE_LINE_PREFIX.sub("", stripped).strip()
        if title:
            titles.append(title)
    return titles


class GoalService:
    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id
        self._schema = GoalSchema()
        self._partial_schema = GoalSchema(partial=True)
        self._milestone_schema = MilestoneSchema()
        self._partial_milestone_schema = MilestoneSchema(partial=True)

    def create_goal(self, payload: dict[str, Any]) -> Goal:
        try:
            validated = self._schema.load(payload)
        except ValidationError as exc:
            raise GoalServiceError(
                message="Invalid goal data.",
                code="VALIDATION_ERROR",
                status_code=400,
                details={"messages": exc.messages},
            ) from exc

        goal = Goal(user_id=self.user_id, **validated)
        for index, title in enumerate(
            milestone_titles_from_description(validated.get("description"))
        ):
            goal.milestones.append(
                Milestone(title=title, completed=False, order_index=index)
            )
        db.session.add(goal)
        db.session.commit()
        return goal

    def _base_query(self, status: str | None) -> Any:
        query = Goal.query.filter_by(user_id=self.user_id)
        if status:
            normalized = status.strip().lower()
            if normalized not in GOAL_STATUSES:
                raise GoalServiceError(
                    message="Invalid goal status.",
                    code="VALIDATION_ERROR",
                    status_code=400,
                    details={"allowed": list(GOAL_STATUSES)},
                )
            query = query.filter(Goal.status == normalized)
        return query

    def list_goals(
        self,
        *,
        page: int,
        per_page: int,
        status: str | None = None,
    ) -> tuple[list[Goal], dict[str, int]]:
        query = self._base_query(status)
        pagination = query.order_by(Goal.created_at.desc()).paginate(
            page=page,
            per_page=per_page,
            error_out=False,
        )
        return cast(list[Goal], pagination.items), {
            "total": int(pagination.total),
            "page": int(pagination.page),
            "per_page": int(pagination.per_page),
            "pages": int(pagination.pages),
        }

    def all_goals(self, status: str | None = None) -> list[Goal]:
        query = self._base_query(status)
        return cast(list[Goal], query.order_by(Goal.start_date.asc()).all())

    def get_goal(self, goal_id: UUID) -> Goal:
        goal = cast(Goal | None, Goal.query.filter_by(id=goal_id).first())
        if goal is None:
            raise GoalServiceError(
                message="Goal not found.",
                code="NOT_FOUND",
                status_code=404,
            )
        if str(goal.user_id) != str(self.user_id):
            raise GoalServiceError(
                message="You do not have permission to access this goal.",
                code="FORBIDDEN",
                status_code=403,
            )
        return goal

    def update_goal(self, goal_id: UUID, payload: dict[str, Any]) -> Goal:
        goal = self.get_goal(goal_id)
        try:
            validated = self._partial_schema.load(payload, partial=True)
        except ValidationError as exc:
            raise GoalServiceError(
                message="Invalid data for goal update.",
                code="VALIDATION_ERROR",
                status_code=400,
                details={"messages": exc.messages},
            ) from exc

        start_date = validated.get("start_date", goal.start_date)
        due_date = validated.get("due_date", goal.due_date)
        if due_date < start_date:
            raise GoalServiceError(
                message="Invalid data for goal update.",
                code="VALIDATION_ERROR",
                status_code=400,
                details={
                    "messages": {
                        "due_date": ["Due date must not be earlier than start date."]
                    }
                },
            )

        for field, value in validated.items():
            setattr(goal, field, value)
        db.session.commit()
        return goal

    def delete_goal(self, goal_id: UUID) -> None:
        goal = self.get_goal(goal_id)
        db.session.delete(goal)
        db.session.commit()

    def list_milestones(self, goal_id: UUID) -> list[Milestone]:
        goal = self.get_goal(goal_id)
        return sorted(goal.milestones, key=lambda milestone: milestone.order_index)

    def add_milestone(self, goal_id: UUID, payload: dict[str, Any]) -> Milestone:
        goal = self.get_goal(goal_id)
        try:
            validated = self._milestone_schema.load(payload)
        except ValidationError as exc:
            raise GoalServiceError(
                message="Invalid milestone data.",
                code="VALIDATION_ERROR",
                status_code=400,
                details={"messages": exc.messages},
            ) from exc

        if "order_index" not in validated:
            validated["order_index"] = (
                max((item.order_index for item in goal.milestones), default=-1) + 1
            )
        milestone = Milestone(**validated)
        goal.milestones.append(milestone)
        db.session.commit()
        return milestone

    def _get_milestone(self, goal: Goal, milestone_id: UUID) -> Milestone:
        for milestone in goal.milestones:
            if str(milestone.id) == str(milestone_id):
                return cast(Milestone, milestone)
        raise GoalServiceError(
            message="Milestone not found.",
            code="NOT_FOUND",
            status_code=404,
        )

    def update_milestone(
        self,
        goal_id: UUID,
        milestone_id: UUID,
        payload: dict[str, Any],
    ) -> tuple[Milestone, Goal]:
        goal = self.get_goal(goal_id)
        milestone = self._get_milestone(goal, milestone_id)
        try:
            validated = self._partial_milestone_schema.load(payload, partial=True)
        except ValidationError as exc:
            raise GoalServiceError(
                message="Invalid data for milestone update.",
                code="VALIDATION_ERROR",
                status_code=400,
                details={"messages": exc.messages},
            ) from exc

        for field, value in validated.items():
            setattr(milestone, field, value)

        if milestone_progress(goal.milestones).all_completed and not is_finished(
            goal.status
        ):
            goal.status = "completed"
            current_app.logger.info(
                "Goal %s marked completed after all milestones were done.", goal.id
            )
        db.session.commit()
        return milestone, goal

    def delete_milestone(self, goal_id: UUID, milestone_id: UUID) -> None:
        goal = self.get_goal(goal_id)
        milestone = self._get_milestone(goal, milestone_id)
        goal.milestones.remove(milestone)
        db.session.commit()

    def serialize(self, goal: Goal) -> dict[str, Any]:
        data = cast(dict[str, Any], self._schema.dump(goal))
        data["milestones"] = sorted(
            data.get("milestones") or [], key=lambda item: item["order_index"]
        )
        return data

    def serialize_milestone(self, milestone: Milestone) -> dict[str, Any]:
        return cast(dict[str, Any], self._milestone_schema.dump(milestone))
