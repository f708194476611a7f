from __future__ import annotations

from typing import Any, NoReturn

from flask import abort, jsonify, make_response
from webargs import ValidationError as WebargsValidationError
from webargs.flaskparser import parser

from goalboard.utils.response_builder import error_payload

from .contracts import is_v2_contract


@parser.error_handler
def handle_webargs_error(
    err: WebargsValidationError,
    req: Any,
    schema: Any = None,
    *,
    error_status_code: Any = None,
    error_headers: Any = None,
    **kwargs: Any,
) -> NoReturn:
    """Turn webargs/marshmallow 422 errors into a 400 JSON response."""
    error_message = "Validation error"
    messages = err.messages if isinstance(err.messages, dict) else {}
    field_messages = messages.get("json", messages)
    if isinstance(field_messages, dict) and "password" in field_messages:
        error_message = "Invalid password: it must be between 8 and 128 characters."

    payload: dict[str, Any] = {
        "message": error_message,
        "errors": err.messages,
    }
    if is_v2_contract():
        payload = error_payload(
            message=error_message,
            code="VALIDATION_ERROR",
            details={"errors": err.messages},
        )

    abort(make_response(jsonify(payload), 400))
