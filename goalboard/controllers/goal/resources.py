# mypy: disable-error-code=misc

from __future__ import annotations

from typing import Any
from uuid import UUID

from flask import request
from flask_apispec import doc, use_kwargs
from flask_apispec.views import MethodResource
from flask_jwt_extended import get_jwt_identity, jwt_required
from marshmallow import fields

from goalboard.application.services.goal_application_service import (
    GoalApplicationError,
    GoalApplicationService,
)

from .contracts import compat_success, goal_application_error_response
from .dependencies import get_goal_dependencies

CONTRACT_HEADER_PARAM = {
    "X-API-Contract": {
        "in": "header",
        "description": "Optional. Send 'v2' for the standard contract.",
        "type": "string",
        "required": False,
    }
}
GOAL_ID_PARAM = {"goal_id": {"in": "path", "type": "string", "required": True}}
MILESTONE_ID_PARAM = {
    "milestone_id": {"in": "path", "type": "string", "required": True}
}


def _current_service() -> GoalApplicationService:
    user_id = UUID(get_jwt_identity())
    dependencies = get_goal_dependencies()
    return dependencies.goal_application_service_factory(user_id)


class GoalCollectionResource(MethodResource):
    @doc(
        description=(
            "Creates a goal for the authenticated user. Description lines "
            "starting with '-' become the initial milestones."
        ),
        tags=["Goals"],
        security=[{"BearerAuth": []}],
        params=CONTRACT_HEADER_PARAM,
        responses={
            201: {"description": "Goal created"},
            400: {"description": "Invalid data"},
            401: {"description": "Invalid token"},
        },
    )
    @jwt_required()
    def post(self) -> Any:
        payload = request.get_json(silent=True) or {}
        try:
            goal_data = _current_service().create_goal(payload)
        except GoalApplicationError as exc:
            return goal_application_error_response(exc)

        return compat_success(
            legacy_payload={"message": "Goal created successfully", "goal": goal_data},
            status_code=201,
            message="Goal created successfully",
            data={"goal": goal_data},
        )

    @doc(
        description=(
            "Lists the authenticated user's goals, newest first, with "
            "pagination, an optional status filter and overall stats."
        ),
        tags=["Goals"],
        security=[{"BearerAuth": []}],
        params={
            "page": {"in": "query", "type": "integer", "required": False},
            "per_page": {"in": "query", "type": "integer", "required": False},
            "status": {"in": "query", "type": "string", "required": False},
            **CONTRACT_HEADER_PARAM,
        },
        responses={
            200: {"description": "Paginated goal list"},
            400: {"description": "Invalid parameters"},
            401: {"description": "Invalid token"},
        },
    )
    @use_kwargs(
        {
            "page": fields.Int(load_default=1, validate=lambda x: x > 0),
            "per_page": fields.Int(load_default=10, validate=lambda x: 0 < x <= 100),
            "status": fields.Str(load_default=None),
        },
        location="query",
    )
    @jwt_required()
    def get(self, page: int, per_page: int, status: str | None) -> Any:
        try:
            result = _current_service().list_goals(
                page=page,
                per_page=per_page,
                status=status,
            )
        except GoalApplicationError as exc:
            return goal_application_error_response(exc)

        items = result["items"]
        pagination = result["pagination"]
        stats = result["stats"]
        return compat_success(
            legacy_payload={"items": items, "stats": stats, **pagination},
            status_code=200,
            message="Goals listed successfully",
            data={"items": items, "stats": stats},
            meta={"pagination": pagination},
        )


class GoalResource(MethodResource):
    @doc(
        description="Returns one goal of the authenticated user.",
        tags=["Goals"],
        security=[{"BearerAuth": []}],
        params={**GOAL_ID_PARAM, **CONTRACT_HEADER_PARAM},
        responses={
            200: {"description": "Goal found"},
            401: {"description": "Invalid token"},
            403: {"description": "Forbidden"},
            404: {"description": "Goal not found"},
        },
    )
    @jwt_required()
    def get(self, goal_id: UUID) -> Any:
        try:
            goal_data = _current_service().get_goal(goal_id)
        except GoalApplicationError as exc:
            return goal_application_error_response(exc)

        return compat_success(
            legacy_payload={"goal": goal_data},
            status_code=200,
            message="Goal retrieved successfully",
            data={"goal": goal_data},
        )

    @doc(
        description="Updates one goal of the authenticated user.",
        tags=["Goals"],
        security=[{"BearerAuth": []}],
        params={**GOAL_ID_PARAM, **CONTRACT_HEADER_PARAM},
        responses={
            200: {"description": "Goal updated"},
            400: {"description": "Invalid data"},
            401: {"description": "Invalid token"},
            403: {"description": "Forbidden"},
            404: {"description": "Goal not found"},
        },
    )
    @jwt_required()
    def put(self, goal_id: UUID) -> Any:
        payload = request.get_json(silent=True) or {}
        try:
            goal_data = _current_service().update_goal(goal_id, payload)
        except GoalApplicationError as exc:
            return goal_application_error_response(exc)

        return compat_success(
            legacy_payload={"message": "Goal updated successfully", "goal": goal_data},
            status_code=200,
            message="Goal updated successfully",
            data={"goal": goal_data},
        )

    @doc(
        description="Deletes one goal and its milestones.",
        tags=["Goals"],
        security=[{"BearerAuth": []}],
        params={**GOAL_ID_PARAM, **CONTRACT_HEADER_PARAM},
        responses={
            200: {"description": "Goal deleted"},
            401: {"description": "Invalid token"},
            403: {"description": "Forbidden"},
            404: {"description": "Goal not found"},
        },
    )
    @jwt_required()
    def delete(self, goal_id: UUID) -> Any:
        try:
            _current_service().delete_goal(goal_id)
        except GoalApplicationError as exc:
            return goal_application_error_response(exc)

        return compat_success(
            legacy_payload={"message": "Goal deleted successfully"},
            status_code=200,
            message="Goal deleted successfully",
            data={},
        )


class MilestoneCollectionResource(MethodResource):
    @doc(
        description="Lists the milestones of a goal ordered by position.",
        tags=["Milestones"],
        security=[{"BearerAuth": []}],
        params={**GOAL_ID_PARAM, **CONTRACT_HEADER_PARAM},
        responses={
            200: {"description": "Milestone list"},
            401: {"description": "Invalid token"},
            403: {"description": "Forbidden"},
            404: {"description": "Goal not found"},
        },
    )
    @jwt_required()
    def get(self, goal_id: UUID) -> Any:
        try:
            items = _current_service().list_milestones(goal_id)
        except GoalApplicationError as exc:
            return goal_application_error_response(exc)

        return compat_success(
            legacy_payload={"items": items},
            status_code=200,
            message="Milestones listed successfully",
            data={"items": items},
        )

    @doc(
        description="Appends a milestone to a goal.",
        tags=["Milestones"],
        security=[{"BearerAuth": []}],
        params={**GOAL_ID_PARAM, **CONTRACT_HEADER_PARAM},
        responses={
            201: {"description": "Milestone created"},
            400: {"description": "Invalid data"},
            401: {"description": "Invalid token"},
            403: {"description": "Forbidden"},
            404: {"description": "Goal not found"},
        },
    )
    @jwt_required()
    def post(self, goal_id: UUID) -> Any:
        payload = request.get_json(silent=True) or {}
        try:
            milestone = _current_service().add_milestone(goal_id, payload)
        except GoalApplicationError as exc:
            return goal_application_error_response(exc)

        return compat_success(
            legacy_payload={
                "message": "Milestone created successfully",
                "milestone": milestone,
            },
            status_code=201,
            message="Milestone created successfully",
            data={"milestone": milestone},
        )


class MilestoneResource(MethodResource):
    @doc(
        description=(
            "Updates a milestone. When every milestone of the goal ends up "
            "completed, the goal is marked completed."
        ),
        tags=["Milestones"],
        security=[{"BearerAuth": []}],
        params={**GOAL_ID_PARAM, **MILESTONE_ID_PARAM, **CONTRACT_HEADER_PARAM},
        responses={
            200: {"description": "Milestone updated"},
            400: {"description": "Invalid data"},
            401: {"description": "Invalid token"},
            403: {"description": "Forbidden"},
            404: {"description": "Goal or milestone not found"},
        },
    )
    @jwt_required()
    def patch(self, goal_id: UUID, milestone_id: UUID) -> Any:
        payload = request.get_json(silent=True) or {}
        try:
            result = _current_service().update_milestone(
                goal_id, milestone_id, payload
            )
        except GoalApplicationError as exc:
            return goal_application_error_response(exc)

        return compat_success(
            legacy_payload={"message": "Milestone updated successfully", **result},
            status_code=200,
            message="Milestone updated successfully",
            data=result,
        )

    @doc(
        description="Deletes a milestone from a goal.",
        tags=["Milestones"],
        security=[{"BearerAuth": []}],
        params={**GOAL_ID_PARAM, **MILESTONE_ID_PARAM, **CONTRACT_HEADER_PARAM},
        responses={
            200: {"description": "Milestone deleted"},
            401: {"description": "Invalid token"},
            403: {"description": "Forbidden"},
            404: {"description": "Goal or milestone not found"},
        },
    )
    @jwt_required()
    def delete(self, goal_id: UUID, milestone_id: UUID) -> Any:
        try:
            _current_service().delete_milestone(goal_id, milestone_id)
        except GoalApplicationError as exc:
            return goal_application_error_response(exc)

        return compat_success(
            legacy_payload={"message": "Milestone deleted successfully"},
            status_code=200,
            message="Milestone deleted successfully",
            data={},
        )


class QuarterCollectionResource(MethodResource):
    @doc(
        description=(
            "Returns the eight quarters of the current and the next year, "
            "each with the goals that start in it. Goals starting "
            "outside the window are listed under other_quarters."
        ),
        tags=["Quarters"],
        security=[{"BearerAuth": []}],
        params=CONTRACT_HEADER_PARAM,
        responses={
            200: {"description": "Quarter window"},
            401: {"description": "Invalid token"},
        },
    )
    @jwt_required()
    def get(self) -> Any:
        result = _current_service().list_quarters()
        return compat_success(
            legacy_payload=result,
            status_code=200,
            message="Quarters listed successfully",
            data=result,
        )


class QuarterResource(MethodResource):
    @doc(
        description="Returns one quarter, addressed as '<year>-Q<quarter>'.",
        tags=["Quarters"],
        security=[{"BearerAuth": []}],
        params={
            "quarter_key": {
                "in": "path",
                "type": "string",
                "required": True,
                "example": "2025-Q1",
            },
            **CONTRACT_HEADER_PARAM,
        },
        responses={
            200: {"description": "Quarter with its goals"},
            400: {"description": "Invalid quarter key"},
            401: {"description": "Invalid token"},
        },
    )
    @jwt_required()
    def get(self, quarter_key: str) -> Any:
        try:
            quarter = _current_service().get_quarter(quarter_key)
        except GoalApplicationError as exc:
            return goal_application_error_response(exc)

        return compat_success(
            legacy_payload={"quarter": quarter},
            status_code=200,
            message="Quarter retrieved successfully",
            data={"quarter": quarter},
        )
