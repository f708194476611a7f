from __future__ import annotations

from typing import Any

from flask import Response

from goalboard.application.services.goal_application_service import (
    GoalApplicationError,
)
from goalboard.controllers.response_contract import (
    compat_success_response,
    service_error_response,
)


def compat_success(
    *,
    legacy_payload: dict[str, Any],
    status_code: int,
    message: str,
    data: dict[str, Any],
    meta: dict[str, Any] | None = None,
) -> Response:
    return compat_success_response(
        legacy_payload=legacy_payload,
        status_code=status_code,
        message=message,
        data=data,
        meta=meta,
    )


def goal_application_error_response(exc: GoalApplicationError) -> Response:
    return service_error_response(exc)
