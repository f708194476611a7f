from __future__ import annotations

import uuid
from datetime import date
from typing import Dict

import pytest

from goalboard.application.services.goal_application_service import (
    GoalApplicationService,
)
from goalboard.controllers.goal.dependencies import (
    GOAL_DEPENDENCIES_EXTENSION_KEY,
    GoalDependencies,
)
from goalboard.services.goal_progress_service import GoalProgressService
from goalboard.services.goal_service import GoalService
from goalboard.services.quarter_service import QuarterService

TODAY = date(2024, 6, 1)


@pytest.fixture
def frozen_client(app):
    def _factory(user_id):
        return GoalApplicationService(
            user_id=user_id,
            goal_service_factory=GoalService,
            quarter_service_factory=lambda: QuarterService(today_provider=lambda: TODAY),
            progress_service_factory=lambda: GoalProgressService(
                today_provider=lambda: TODAY
            ),
        )

    app.extensions[GOAL_DEPENDENCIES_EXTENSION_KEY] = GoalDependencies(
        goal_application_service_factory=_factory
    )
    return app.test_client()


def _register_and_login(client) -> str:
    suffix = uuid.uuid4().hex[:8]
    email = f"quarters-{suffix}@email.com"
    password = "StrongPass@123"
    client.post(
        "/auth/register",
        json={"full_name": "Quarter Planner", "email": email, "password": password},
    )
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.get_json()["token"]


def _auth_headers(token: str, contract: str | None = None) -> Dict[str, str]:
    headers = {"Authorization": f"Bearer {token}"}
    if contract:
        headers["X-API-Contract"] = contract
    return headers


def _create_goal(client, token: str, title: str, start: str, due: str) -> None:
    response = client.post(
        "/goals",
        json={"title": title, "start_date": start, "due_date": due},
        headers=_auth_headers(token),
    )
    assert response.status_code == 201


def test_quarters_window_buckets_goals_by_start_date(frozen_client) -> None:
    token = _register_and_login(frozen_client)
    _create_goal(frozen_client, token, "Winter", "2024-01-15", "2024-03-20")
    _create_goal(frozen_client, token, "Cross quarter", "2024-03-30", "2024-05-01")
    _create_goal(frozen_client, token, "Next year", "2025-11-02", "2025-12-01")
    _create_goal(frozen_client, token, "Someday", "2028-01-01", "2028-02-01")

    response = frozen_client.get("/goals/quarters", headers=_auth_headers(token))

    assert response.status_code == 200
    body = response.get_json()
    quarters = body["quarters"]
    assert len(quarters) == 8
    assert quarters[0]["key"] == "2024-Q1"
    assert quarters[-1]["key"] == "2025-Q4"
    by_key = {quarter["key"]: quarter for quarter in quarters}
    assert [g["title"] for g in by_key["2024-Q1"]["goals"]] == [
        "Winter",
        "Cross quarter",
    ]
    assert by_key["2024-Q2"]["goals"] == []
    assert by_key["2024-Q2"]["is_current"] is True
    assert by_key["2024-Q1"]["is_past"] is True
    assert [g["title"] for g in by_key["2025-Q4"]["goals"]] == ["Next year"]
    assert [q["key"] for q in body["other_quarters"]] == ["2028-Q1"]


def test_single_quarter_v2_contract(frozen_client) -> None:
    token = _register_and_login(frozen_client)
    _create_goal(frozen_client, token, "Summer", "2024-07-04", "2024-08-01")

    response = frozen_client.get(
        "/goals/quarters/2024-Q3", headers=_auth_headers(token, "v2")
    )

    assert response.status_code == 200
    quarter = response.get_json()["data"]["quarter"]
    assert quarter["label"] == "Q3 2024"
    assert quarter["months"] == "Jul - Sep"
    assert quarter["is_past"] is False
    assert [g["title"] for g in quarter["goals"]] == ["Summer"]


def test_single_quarter_rejects_invalid_key(frozen_client) -> None:
    token = _register_and_login(frozen_client)

    response = frozen_client.get(
        "/goals/quarters/2024-Q7", headers=_auth_headers(token, "v2")
    )

    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "VALIDATION_ERROR"
