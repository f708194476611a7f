from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any
from uuid import uuid4

import pytest

from goalboard.application.services.goal_application_service import (
    GoalApplicationError,
    GoalApplicationService,
)
from goalboard.services.goal_progress_service import GoalProgressService
from goalboard.services.goal_service import GoalServiceError
from goalboard.services.quarter_service import QuarterService

TODAY = date(2024, 6, 1)


@dataclass
class _FakeMilestone:
    completed: bool


@dataclass
class _FakeGoal:
    title: str
    start_date: date
    due_date: date
    status: str = "active"
    milestones: list[_FakeMilestone] = field(default_factory=list)


class _FakeGoalService:
    def __init__(self, user_id):
        self.user_id = user_id
        self.goals = [
            _FakeGoal("spring", date(2024, 4, 10), date(2024, 6, 11)),
            _FakeGoal(
                "winter",
                date(2024, 1, 15),
                date(2024, 3, 20),
                status="done",
                milestones=[_FakeMilestone(True), _FakeMilestone(False)],
            ),
            _FakeGoal("old", date(2022, 5, 1), date(2022, 6, 1), status="completed"),
            _FakeGoal("far", date(2027, 2, 1), date(2027, 3, 1)),
        ]

    def create_goal(self, payload: dict[str, Any]) -> _FakeGoal:
        if not payload.get("title"):
            raise GoalServiceError(
                message="Invalid goal data.",
                code="VALIDATION_ERROR",
                status_code=400,
                details={"messages": {"title": ["Missing data for required field."]}},
            )
        return self.goals[0]

    def list_goals(self, *, page: int, per_page: int, status: str | None):
        return self.goals[:per_page], {
            "total": len(self.goals),
            "page": page,
            "per_page": per_page,
            "pages": 1,
        }

    def all_goals(self, status: str | None = None) -> list[_FakeGoal]:
        return sorted(self.goals, key=lambda goal: goal.start_date)

    def get_goal(self, goal_id):
        raise GoalServiceError(
            message="Goal not found.",
            code="NOT_FOUND",
            status_code=404,
        )

    def serialize(self, goal: _FakeGoal) -> dict[str, Any]:
        return {"id": str(uuid4()), "title": goal.title, "status": goal.status}


def _service() -> GoalApplicationService:
    return GoalApplicationService(
        user_id=uuid4(),
        goal_service_factory=_FakeGoalService,
        quarter_service_factory=lambda: QuarterService(today_provider=lambda: TODAY),
        progress_service_factory=lambda: GoalProgressService(
            today_provider=lambda: TODAY
        ),
    )


def test_create_goal_adds_progress() -> None:
    result = _service().create_goal({"title": "spring"})

    assert result["title"] == "spring"
    assert result["progress"] == {
        "completed_milestones": 0,
        "total_milestones": 0,
        "percent": 0.0,
        "days_left": 10,
    }


def test_create_goal_maps_service_errors() -> None:
    with pytest.raises(GoalApplicationError) as exc_info:
        _service().create_goal({})

    assert exc_info.value.status_code == 400
    assert exc_info.value.code == "VALIDATION_ERROR"
    assert "title" in exc_info.value.details["messages"]


def test_get_goal_maps_not_found() -> None:
    with pytest.raises(GoalApplicationError) as exc_info:
        _service().get_goal(uuid4())

    assert exc_info.value.status_code == 404
    assert exc_info.value.code == "NOT_FOUND"


def test_list_goals_includes_pagination_and_stats() -> None:
    result = _service().list_goals(page=1, per_page=2, status=None)

    assert [item["title"] for item in result["items"]] == ["spring", "winter"]
    assert result["items"][1]["progress"]["percent"] == 50.0
    assert result["pagination"]["total"] == 4
    assert result["stats"] == {"total": 4, "active": 2, "done": 2}


def test_list_quarters_buckets_goals_into_window() -> None:
    result = _service().list_quarters()

    quarters = result["quarters"]
    assert [q["key"] for q in quarters] == [
        "2024-Q1",
        "2024-Q2",
        "2024-Q3",
        "2024-Q4",
        "2025-Q1",
        "2025-Q2",
        "2025-Q3",
        "2025-Q4",
    ]
    by_key = {q["key"]: q for q in quarters}
    assert [g["title"] for g in by_key["2024-Q1"]["goals"]] == ["winter"]
    assert [g["title"] for g in by_key["2024-Q2"]["goals"]] == ["spring"]
    assert by_key["2024-Q2"]["is_current"] is True
    assert by_key["2024-Q1"]["is_past"] is True
    assert by_key["2025-Q1"]["goals"] == []

    other = result["other_quarters"]
    assert [q["key"] for q in other] == ["2022-Q2", "2027-Q1"]
    assert other[0]["is_past"] is True


def test_get_quarter_returns_bucket() -> None:
    result = _service().get_quarter("2024-Q1")

    assert result["key"] == "2024-Q1"
    assert [g["title"] for g in result["goals"]] == ["winter"]


def test_get_quarter_rejects_invalid_key() -> None:
    with pytest.raises(GoalApplicationError) as exc_info:
        _service().get_quarter("2024-Q9")

    assert exc_info.value.status_code == 400
    assert exc_info.value.code == "VALIDATION_ERROR"
    assert exc_info.value.details["key"] == "2024-Q9"
