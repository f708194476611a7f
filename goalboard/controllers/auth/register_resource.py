# mypy: disable-error-code=misc

from __future__ import annotations

from typing import Any

from flask import Response, current_app
from flask_apispec import doc, use_kwargs
from flask_apispec.views import MethodResource

from goalboard.extensions.database import db
from goalboard.models.user import User, initials_from_name
from goalboard.schemas.user_schemas import UserRegistrationSchema

from .contracts import compat_error, compat_success, serialize_auth_user
from .dependencies import get_auth_dependencies

USER_CREATED_MESSAGE = "User created successfully"
EMAIL_CONFLICT_MESSAGE = "Email already registered"


class RegisterResource(MethodResource):
    @doc(
        description="Creates a new account and its profile.",
        tags=["Authentication"],
        params={
            "X-API-Contract": {
                "in": "header",
                "description": "Optional. Send 'v2' for the standard contract.",
                "type": "string",
                "required": False,
            }
        },
        responses={
            201: {"description": "User created"},
            400: {"description": "Validation error"},
            409: {"description": "Email already registered"},
            500: {"description": "Internal server error"},
        },
    )
    @use_kwargs(UserRegistrationSchema, location="json")
    def post(self, **validated_data: Any) -> Response:
        dependencies = get_auth_dependencies()
        if dependencies.find_user_by_email(validated_data["email"]):
            return compat_error(
                legacy_payload={"message": EMAIL_CONFLICT_MESSAGE, "data": None},
                status_code=409,
                message=EMAIL_CONFLICT_MESSAGE,
                error_code="CONFLICT",
            )

        try:
            full_name = validated_data["full_name"]
            user = User(
                email=validated_data["email"],
                full_name=full_name,
                initials=initials_from_name(full_name),
                password=dependencies.hash_password(validated_data["password"]),
            )
            db.session.add(user)
            db.session.commit()
        except Exception:
            db.session.rollback()
            current_app.logger.exception("Failed to create user.")
            return compat_error(
                legacy_payload={"message": "Failed to create user"},
                status_code=500,
                message="Failed to create user",
                error_code="INTERNAL_ERROR",
            )

        user_data = serialize_auth_user(user)
        return compat_success(
            legacy_payload={"message": USER_CREATED_MESSAGE, "data": user_data},
            status_code=201,
            message=USER_CREATED_MESSAGE,
            data={"user": user_data},
        )
