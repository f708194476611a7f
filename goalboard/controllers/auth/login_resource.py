# mypy: disable-error-code=misc

from __future__ import annotations

from typing import Any

from flask import Response, current_app
from flask_apispec import doc, marshal_with, use_kwargs
from flask_apispec.views import MethodResource

from goalboard.extensions.database import db
from goalboard.schemas.auth_schema import AuthSchema, AuthSuccessResponseSchema

from .contracts import compat_error, compat_success, serialize_auth_user
from .dependencies import get_auth_dependencies


class AuthResource(MethodResource):
    @doc(
        description="Signs a user in with email and password.",
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
            200: {"description": "Login successful"},
            400: {"description": "Missing credentials"},
            401: {"description": "Invalid credentials"},
            500: {"description": "Internal error while signing in"},
        },
    )
    @marshal_with(AuthSuccessResponseSchema, code=200)
    @use_kwargs(AuthSchema, location="json")
    def post(self, **kwargs: Any) -> Response:
        email = str(kwargs["email"])
        password = str(kwargs["password"])

        dependencies = get_auth_dependencies()
        user = dependencies.find_user_by_email(email)
        password_hash = user.password if user is not None else None
        if not dependencies.verify_password(password_hash, password) or user is None:
            return compat_error(
                legacy_payload={"message": "Invalid credentials"},
                status_code=401,
                message="Invalid credentials",
                error_code="UNAUTHORIZED",
            )

        try:
            identity = str(user.id)
            token = dependencies.create_access_token(identity)
            refresh_token = dependencies.create_refresh_token(identity)
            user.current_jti = dependencies.get_token_jti(token)
            user.current_refresh_jti = dependencies.get_token_jti(refresh_token)
            db.session.commit()
        except Exception:
            db.session.rollback()
            current_app.logger.exception("Login failed due to unexpected error.")
            return compat_error(
                legacy_payload={"message": "Login failed"},
                status_code=500,
                message="Login failed",
                error_code="INTERNAL_ERROR",
            )

        user_data = serialize_auth_user(user)
        return compat_success(
            legacy_payload={
                "message": "Login successful",
                "token": token,
                "refresh_token": refresh_token,
                "user": user_data,
            },
            status_code=200,
            message="Login successful",
            data={"token": token, "refresh_token": refresh_token, "user": user_data},
        )
