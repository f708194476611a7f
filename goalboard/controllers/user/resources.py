# mypy: disable-error-code=misc

from __future__ import annotations

from typing import Any
from uuid import UUID

from flask import Response
from flask_apispec import doc
from flask_apispec.views import MethodResource
from flask_jwt_extended import get_jwt_identity, jwt_required

from goalboard.controllers.response_contract import (
    compat_error_response,
    compat_success_response,
)
from goalboard.schemas.user_schemas import UserSchema

from .dependencies import get_user_dependencies

_user_schema = UserSchema()


class UserMeResource(MethodResource):
    @doc(
        description=(
            "Returns the authenticated user's profile and goal counts.\n\n"
            "Example response:\n"
            "{ 'user': { 'id': '...', 'email': '...', 'full_name': '...', "
            "'initials': 'JD' }, 'stats': { 'total': 3, 'active': 2, 'done': 1 } }"
        ),
        tags=["User"],
        security=[{"BearerAuth": []}],
        params={
            "X-API-Contract": {
                "in": "header",
                "description": "Optional. Send 'v2' for the standard contract.",
                "type": "string",
                "required": False,
            }
        },
        responses={
            200: {"description": "User profile"},
            401: {"description": "Invalid token"},
            404: {"description": "User not found"},
        },
    )
    @jwt_required()
    def get(self) -> Response:
        user_id = UUID(get_jwt_identity())
        dependencies = get_user_dependencies()
        user = dependencies.get_user_by_id(user_id)
        if user is None:
            return compat_error_response(
                legacy_payload={"message": "User not found"},
                status_code=404,
                message="User not found",
                error_code="NOT_FOUND",
            )

        user_data: dict[str, Any] = _user_schema.dump(user)
        stats = dependencies.goal_application_service_factory(user_id).get_stats()
        return compat_success_response(
            legacy_payload={"user": user_data, "stats": stats},
            status_code=200,
            message="User retrieved successfully",
            data={"user": user_data, "stats": stats},
        )
