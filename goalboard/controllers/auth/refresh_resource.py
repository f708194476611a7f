# mypy: disable-error-code=misc

from __future__ import annotations

from uuid import UUID

from flask import Response
from flask_apispec import doc
from flask_apispec.views import MethodResource
from flask_jwt_extended import get_jwt_identity, jwt_required

from goalboard.extensions.database import db

from .contracts import compat_error, compat_success
from .dependencies import get_auth_dependencies


class RefreshTokenResource(MethodResource):
    @doc(
        description=(
            "Issues a new access token for the session identified by the "
            "refresh token sent as the Bearer credential."
        ),
        tags=["Authentication"],
        security=[{"BearerAuth": []}],
        responses={
            200: {"description": "Session refreshed"},
            401: {"description": "Refresh token invalid, expired or revoked"},
        },
    )
    @jwt_required(refresh=True)
    def post(self) -> Response:
        dependencies = get_auth_dependencies()
        user = dependencies.get_user_by_id(UUID(str(get_jwt_identity())))
        if user is None:
            return compat_error(
                legacy_payload={"message": "Token revoked"},
                status_code=401,
                message="Token revoked",
                error_code="UNAUTHORIZED",
            )

        token = dependencies.create_access_token(str(user.id))
        user.current_jti = dependencies.get_token_jti(token)
        db.session.commit()
        return compat_success(
            legacy_payload={"message": "Session refreshed", "token": token},
            status_code=200,
            message="Session refreshed",
            data={"token": token},
        )
