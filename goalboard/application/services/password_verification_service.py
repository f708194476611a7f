from __future__ import annotations

import secrets
from functools import lru_cache

from werkzeug.security import check_password_hash, generate_password_hash


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    return generate_password_hash(secrets.token_urlsafe(16))


def verify_password(*, password_hash: str | None, plain_password: str) -> bool:
    """Check a password, spending comparable time when the account is unknown."""
    if password_hash:
        return check_password_hash(password_hash, plain_password)

    check_password_hash(_dummy_password_hash(), plain_password)
    return False
