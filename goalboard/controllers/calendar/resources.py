# mypy: disable-error-code=misc

from __future__ import annotations

from datetime import date
from typing import Any
from uuid import UUID

from flask_apispec import doc, use_kwargs
from flask_apispec.views import MethodResource
from flask_jwt_extended import get_jwt_identity, jwt_required
from marshmallow import fields, validate

from goalboard.application.services.calendar_application_service import (
    CalendarApplicationError,
    CalendarApplicationService,
)
from goalboard.controllers.response_contract import (
    compat_success_response,
    service_error_response,
)

from .dependencies import get_calendar_dependencies

CONTRACT_HEADER_PARAM = {
    "X-API-Contract": {
        "in": "header",
        "description": "Optional. Send 'v2' for the standard contract.",
        "type": "string",
        "required": False,
    }
}


def _current_service() -> CalendarApplicationService:
    user_id = UUID(get_jwt_identity())
    dependencies = get_calendar_dependencies()
    return dependencies.calendar_application_service_factory(user_id)


class CalendarMonthResource(MethodResource):
    @doc(
        description=(
            "Returns a month grid (Sunday first) where each day is marked "
            "with the goals that start or are due on it. Months before the "
            "current one are clamped to the current month."
        ),
        tags=["Calendar"],
        security=[{"BearerAuth": []}],
        params={
            "year": {"in": "query", "type": "integer", "required": False},
            "month": {"in": "query", "type": "integer", "required": False},
            **CONTRACT_HEADER_PARAM,
        },
        responses={
            200: {"description": "Month grid"},
            400: {"description": "Invalid month"},
            401: {"description": "Invalid token"},
        },
    )
    @use_kwargs(
        {
            "year": fields.Int(
                load_default=None, validate=validate.Range(min=1, max=9999)
            ),
            "month": fields.Int(
                load_default=None, validate=validate.Range(min=1, max=12)
            ),
        },
        location="query",
    )
    @jwt_required()
    def get(self, year: int | None, month: int | None) -> Any:
        try:
            result = _current_service().month_view(year=year, month=month)
        except CalendarApplicationError as exc:
            return service_error_response(exc)

        return compat_success_response(
            legacy_payload=result,
            status_code=200,
            message="Calendar month retrieved successfully",
            data=result,
        )


class CalendarDayResource(MethodResource):
    @doc(
        description=(
            "Returns the goals starting or due on a day and the goals in "
            "progress across it. Defaults to today."
        ),
        tags=["Calendar"],
        security=[{"BearerAuth": []}],
        params={
            "date": {
                "in": "query",
                "type": "string",
                "required": False,
                "example": "2025-03-15",
            },
            **CONTRACT_HEADER_PARAM,
        },
        responses={
            200: {"description": "Goals of the day"},
            400: {"description": "Invalid date"},
            401: {"description": "Invalid token"},
        },
    )
    @use_kwargs(
        {"day": fields.Date(load_default=None, data_key="date")},
        location="query",
    )
    @jwt_required()
    def get(self, day: date | None) -> Any:
        service = _current_service()
        result = service.day_view(day if day is not None else service.today())
        return compat_success_response(
            legacy_payload=result,
            status_code=200,
            message="Calendar day retrieved successfully",
            data=result,
        )
