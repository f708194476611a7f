from typing import Any, Dict
from uuid import UUID

from flask import Response
from flask_jwt_extended import JWTManager

from goalboard.extensions.database import db
from goalboard.models.user import User
from goalboard.utils.api_contract import is_v2_contract_request
from goalboard.utils.response_builder import error_payload, json_response


def _jwt_error_response(message: str, *, code: str, status_code: int) -> Response:
    if is_v2_contract_request():
        return json_response(
            error_payload(message=message, code=code), status_code=status_code
        )
    return json_response({"message": message}, status_code=status_code)


def is_token_revoked(jwt_payload: Dict[str, Any]) -> bool:
    """A token is live only while it is the user's current token of its type."""
    user_id = jwt_payload.get("sub")
    jti = jwt_payload.get("jti")
    if not user_id or not jti:
        return True

    try:
        user = db.session.get(User, UUID(str(user_id)))
    except ValueError:
        return True
    if user is None:
        return True
    if jwt_payload.get("type") == "refresh":
        return bool(user.current_refresh_jti != jti)
    return bool(user.current_jti != jti)


def register_jwt_callbacks(jwt: JWTManager) -> None:
    @jwt.token_in_blocklist_loader  # type: ignore[misc]
    def check_if_token_revoked(
        jwt_header: Dict[str, Any], jwt_payload: Dict[str, Any]
    ) -> bool:
        return is_token_revoked(jwt_payload)

    @jwt.revoked_token_loader  # type: ignore[misc]
    def revoked_token_callback(
        jwt_header: Dict[str, Any], jwt_payload: Dict[str, Any]
    ) -> Response:
        return _jwt_error_response(
            "Token revoked", code="UNAUTHORIZED", status_code=401
        )

    @jwt.invalid_token_loader  # type: ignore[misc]
    def invalid_token_callback(error: str) -> Response:
        return _jwt_error_response(
            "Invalid token", code="INVALID_TOKEN", status_code=422
        )

    @jwt.expired_token_loader  # type: ignore[misc]
    def expired_token_callback(
        jwt_header: Dict[str, Any], jwt_payload: Dict[str, Any]
    ) -> Response:
        return _jwt_error_response(
            "Token expired", code="TOKEN_EXPIRED", status_code=401
        )

    @jwt.unauthorized_loader  # type: ignore[misc]
    def missing_token_callback(error: str) -> Response:
        return _jwt_error_response(
            "Missing token", code="UNAUTHORIZED", status_code=401
        )

    @jwt.needs_fresh_token_loader  # type: ignore[misc]
    def fresh_token_callback(
        jwt_header: Dict[str, Any], jwt_payload: Dict[str, Any]
    ) -> Response:
        return _jwt_error_response(
            "Fresh token required", code="UNAUTHORIZED", status_code=401
        )
