"""Resolve which response contract the current request asked for.

Clients opt into the standard envelope (``success``/``message``/``data``) by
sending ``X-API-Contract: v2``; everything else gets the legacy payloads.
"""

from __future__ import annotations

from flask import has_request_context, request

CONTRACT_HEADER = "X-API-Contract"
CONTRACT_V2 = "v2"


def is_v2_contract_request() -> bool:
    if not has_request_context():
        return False
    header_value = str(request.headers.get(CONTRACT_HEADER, "")).strip().lower()
    return header_value == CONTRACT_V2
