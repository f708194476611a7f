from typing import Any

from flask import Flask, request
from flask_jwt_extended import verify_jwt_in_request

OPEN_ENDPOINTS = frozenset(
    {
        "registerresource",
        "authresource",
        "refreshtokenresource",
        "healthz",
        "uploaded_image",
        "static",
        "swagger-json",
        "swagger-ui",
    }
)


def register_auth_guard(app: Flask) -> None:
    @app.before_request  # type: ignore[misc]
    def auth_guard() -> Any:
        if not request.endpoint or request.method == "OPTIONS":
            return None

        endpoint = request.endpoint.split(".")[-1]
        if endpoint in OPEN_ENDPOINTS:
            return None

        # Failures propagate to the JWT error loaders.
        verify_jwt_in_request()
        return None
