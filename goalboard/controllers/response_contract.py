from __future__ import annotations

from typing import Any, Protocol

from flask import Response

from goalboard.utils.api_contract import (
    CONTRACT_HEADER,
    CONTRACT_V2,
    is_v2_contract_request,
)
from goalboard.utils.response_builder import error_payload, json_response, success_payload


class ServiceError(Protocol):
    message: str
    code: str
    status_code: int
    details: dict[str, Any] | None


def is_v2_contract() -> bool:
    return is_v2_contract_request()


def compat_success_response(
    *,
    legacy_payload: dict[str, Any],
    status_code: int,
    message: str,
    data: dict[str, Any],
    meta: dict[str, Any] | None = None,
) -> Response:
    payload = legacy_payload
    if is_v2_contract():
        payload = success_payload(message=message, data=data, meta=meta)
    return json_response(payload, status_code=status_code)


def compat_error_response(
    *,
    legacy_payload: dict[str, Any],
    status_code: int,
    message: str,
    error_code: str,
    details: dict[str, Any] | None = None,
) -> Response:
    payload = legacy_payload
    if is_v2_contract():
        payload = error_payload(message=message, code=error_code, details=details)
    return json_response(payload, status_code=status_code)


def service_error_response(exc: ServiceError) -> Response:
    """Render a service/application error under either contract."""
    return compat_error_response(
        legacy_payload={"error": exc.message, "details": exc.details},
        status_code=exc.status_code,
        message=exc.message,
        error_code=exc.code,
        details=exc.details,
    )


__all__ = [
    "CONTRACT_HEADER",
    "CONTRACT_V2",
    "is_v2_contract",
    "compat_success_response",
    "compat_error_response",
    "service_error_response",
]
