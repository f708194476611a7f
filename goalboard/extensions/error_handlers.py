from flask import Flask, Response
from werkzeug.exceptions import HTTPException

from goalboard.utils.response_builder import error_payload, json_response

_HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    413: "PAYLOAD_TOO_LARGE",
    415: "UNSUPPORTED_MEDIA_TYPE",
    429: "TOO_MANY_REQUESTS",
}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)  # type: ignore[misc]
    def handle_http_exception(e: HTTPException) -> Response:
        status_code = e.code or 500
        return json_response(
            error_payload(
                message=e.description or e.name,
                code=_HTTP_ERROR_CODES.get(status_code, "HTTP_ERROR"),
            ),
            status_code=status_code,
        )

    @app.errorhandler(Exception)  # type: ignore[misc]
    def handle_generic_exception(e: Exception) -> Response:
        app.logger.exception("Unhandled exception: %s", e)
        return json_response(
            error_payload(
                message="An unexpected error occurred.",
                code="INTERNAL_ERROR",
            ),
            status_code=500,
        )
