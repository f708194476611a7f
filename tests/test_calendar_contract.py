from __future__ import annotations

import uuid
from datetime import date
from typing import Dict

import pytest

from goalboard.application.services.calendar_application_service import (
    CalendarApplicationService,
)
from goalboard.controllers.calendar.dependencies import (
    CALENDAR_DEPENDENCIES_EXTENSION_KEY,
    CalendarDependencies,
)
from goalboard.services.calendar_service import CalendarService
from goalboard.services.goal_service import GoalService

TODAY = date(2024, 6, 15)


@pytest.fixture
def frozen_client(app):
    def _factory(user_id):
        return CalendarApplicationService(
            user_id=user_id,
            goal_service_factory=GoalService,
            calendar_service_factory=lambda: CalendarService(
                today_provider=lambda: TODAY
            ),
        )

    app.extensions[CALENDAR_DEPENDENCIES_EXTENSION_KEY] = CalendarDependencies(
        calendar_application_service_factory=_factory
    )
    return app.test_client()


def _auth_headers(token: str, contract: str | None = None) -> Dict[str, str]:
    headers = {"Authorization": f"Bearer {token}"}
    if contract:
        headers["X-API-Contract"] = contract
    return headers


@pytest.fixture
def token(frozen_client) -> str:
    suffix = uuid.uuid4().hex[:8]
    email = f"calendar-{suffix}@email.com"
    password = "StrongPass@123"
    frozen_client.post(
        "/auth/register",
        json={"full_name": "Calendar User", "email": email, "password": password},
    )
    response = frozen_client.post(
        "/auth/login", json={"email": email, "password": password}
    )
    token = response.get_json()["token"]

    for title, start, due in (
        ("Ten days", "2024-06-10", "2024-06-20"),
        ("One day", "2024-06-20", "2024-06-20"),
        ("Next month", "2024-07-02", "2024-07-30"),
    ):
        created = frozen_client.post(
            "/goals",
            json={"title": title, "start_date": start, "due_date": due},
            headers=_auth_headers(token),
        )
        assert created.status_code == 201
    return token


def test_month_view_defaults_to_current_month(frozen_client, token) -> None:
    response = frozen_client.get("/calendar/month", headers=_auth_headers(token))

    assert response.status_code == 200
    body = response.get_json()
    assert body["month"] == "2024-06"
    assert body["label"] == "June 2024"
    assert body["was_clamped"] is False
    assert body["leading_padding"] == 6
    assert len(body["days"]) == 30
    assert body["navigation"] == {
        "previous": "2024-06",
        "next": "2024-07",
        "can_go_back": False,
    }

    days = {day["date"]: day for day in body["days"]}
    assert days["2024-06-15"]["is_today"] is True
    assert days["2024-06-14"]["is_past"] is True
    assert days["2024-06-14"]["is_selectable"] is False
    assert days["2024-06-10"]["goals"][0]["type"] == "start"
    assert days["2024-06-15"]["has_goals"] is False
    assert len(days["2024-06-15"]["in_progress_goal_ids"]) == 1

    markers = {marker["title"]: marker["type"] for marker in days["2024-06-20"]["goals"]}
    assert markers == {"Ten days": "due", "One day": "both"}


def test_month_view_clamps_past_months(frozen_client, token) -> None:
    response = frozen_client.get(
        "/calendar/month?year=2024&month=3", headers=_auth_headers(token, "v2")
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["month"] == "2024-06"
    assert data["was_clamped"] is True


def test_month_view_future_month_navigation(frozen_client, token) -> None:
    response = frozen_client.get(
        "/calendar/month?year=2024&month=8", headers=_auth_headers(token)
    )

    body = response.get_json()
    assert body["month"] == "2024-08"
    assert body["navigation"] == {
        "previous": "2024-07",
        "next": "2024-09",
        "can_go_back": True,
    }
    assert all(not day["has_goals"] for day in body["days"])


def test_month_view_last_representable_month_has_no_next(
    frozen_client, token
) -> None:
    response = frozen_client.get(
        "/calendar/month?year=9999&month=12", headers=_auth_headers(token)
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["month"] == "9999-12"
    assert len(body["days"]) == 31
    assert body["navigation"] == {
        "previous": "9999-11",
        "next": None,
        "can_go_back": True,
    }


def test_month_view_rejects_invalid_month(frozen_client, token) -> None:
    response = frozen_client.get(
        "/calendar/month?year=2024&month=13", headers=_auth_headers(token, "v2")
    )

    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "VALIDATION_ERROR"


def test_day_view_lists_start_due_and_in_progress_goals(frozen_client, token) -> None:
    response = frozen_client.get(
        "/calendar/day?date=2024-06-20", headers=_auth_headers(token)
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["date"] == "2024-06-20"
    assert body["is_past"] is False
    entries = {entry["goal"]["title"]: entry for entry in body["goals"]}
    assert entries["Ten days"]["type"] == "due"
    assert entries["One day"]["type"] == "both"
    assert entries["One day"]["days_until_due"] == 5
    assert body["in_progress"] == []


def test_day_view_defaults_to_today(frozen_client, token) -> None:
    response = frozen_client.get("/calendar/day", headers=_auth_headers(token, "v2"))

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["date"] == "2024-06-15"
    assert data["goals"] == []
    assert [entry["goal"]["title"] for entry in data["in_progress"]] == ["Ten days"]


def test_day_view_rejects_malformed_date(frozen_client, token) -> None:
    response = frozen_client.get(
        "/calendar/day?date=2024-13-40", headers=_auth_headers(token)
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == "Validation error"
