from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from goalboard.controllers.response_contract import (
    compat_success_response,
    service_error_response,
)
from goalboard.utils.response_builder import error_payload, success_payload


@dataclass
class _ServiceError(Exception):
    message: str
    code: str
    status_code: int
    details: dict[str, Any] | None = None


def test_success_payload_strips_sensitive_fields() -> None:
    payload = success_payload(
        message="ok",
        data={"user": {"email": "a@b.com", "password": "x", "current_jti": "j"}},
    )

    assert payload == {
        "success": True,
        "message": "ok",
        "data": {"user": {"email": "a@b.com"}},
    }


def test_error_payload_shape() -> None:
    payload = error_payload(
        message="Goal not found.", code="NOT_FOUND", details={"id": "1"}
    )

    assert payload == {
        "success": False,
        "message": "Goal not found.",
        "error": {"code": "NOT_FOUND", "details": {"id": "1"}},
    }


def test_compat_success_switches_on_contract_header(app) -> None:
    with app.test_request_context("/goals"):
        legacy = compat_success_response(
            legacy_payload={"goal": {"id": "1"}},
            status_code=201,
            message="Goal created successfully",
            data={"goal": {"id": "1"}},
        )
    assert legacy.status_code == 201
    assert legacy.get_json() == {"goal": {"id": "1"}}

    with app.test_request_context("/goals", headers={"X-API-Contract": "V2 "}):
        v2 = compat_success_response(
            legacy_payload={"goal": {"id": "1"}},
            status_code=201,
            message="Goal created successfully",
            data={"goal": {"id": "1"}},
        )
    assert v2.get_json()["success"] is True
    assert v2.get_json()["data"] == {"goal": {"id": "1"}}


def test_service_error_response_legacy_and_v2(app) -> None:
    error = _ServiceError(
        message="Invalid goal data.",
        code="VALIDATION_ERROR",
        status_code=400,
        details={"messages": {"title": ["required"]}},
    )

    with app.test_request_context("/goals"):
        legacy = service_error_response(error)
    assert legacy.status_code == 400
    assert legacy.get_json() == {
        "error": "Invalid goal data.",
        "details": {"messages": {"title": ["required"]}},
    }

    with app.test_request_context("/goals", headers={"X-API-Contract": "v2"}):
        v2 = service_error_response(error)
    assert v2.get_json()["error"]["code"] == "VALIDATION_ERROR"
    assert v2.get_json()["message"] == "Invalid goal data."
