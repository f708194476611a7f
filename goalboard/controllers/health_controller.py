"""
Health endpoints.

`GET /healthz` is a public liveness probe for containers, reverse proxies and
load balancers. It does not touch the database.
"""

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from flask_apispec import doc

health_bp = Blueprint("health", __name__)


@health_bp.get("/healthz")
@doc(
    description="Public liveness endpoint for infrastructure probes.",
    tags=["Health"],
    responses={200: {"description": "Service healthy"}},
)
def healthz() -> tuple[Response, int]:
    """Liveness probe endpoint (public)."""

    return jsonify({"status": "ok"}), 200
