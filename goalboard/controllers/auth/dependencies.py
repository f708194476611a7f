from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, cast
from uuid import UUID

from flask import Flask, current_app
from flask_jwt_extended import create_access_token, create_refresh_token, get_jti
from werkzeug.security import generate_password_hash

from goalboard.application.services.password_verification_service import (
    verify_password,
)
from goalboard.models.user import User

AUTH_DEPENDENCIES_EXTENSION_KEY = "auth_dependencies"


@dataclass(frozen=True)
class AuthDependencies:
    verify_password: Callable[[str | None, str], bool]
    hash_password: Callable[[str], str]
    create_access_token: Callable[[str], str]
    create_refresh_token: Callable[[str], str]
    get_token_jti: Callable[[str], str]
    find_user_by_email: Callable[[str], User | None]
    get_user_by_id: Callable[[UUID], User | None]


def _find_user_by_email(email: str) -> User | None:
    return cast(User | None, User.query.filter_by(email=email.lower()).first())


def _get_user_by_id(user_id: UUID) -> User | None:
    return cast(User | None, User.query.filter_by(id=user_id).first())


def _create_access_token(identity: str) -> str:
    return cast(str, create_access_token(identity=identity))


def _create_refresh_token(identity: str) -> str:
    return cast(str, create_refresh_token(identity=identity))


def _verify_password(password_hash: str | None, plain_password: str) -> bool:
    return verify_password(password_hash=password_hash, plain_password=plain_password)


def _get_token_jti(token: str) -> str:
    jti = get_jti(token)
    if not jti:
        raise RuntimeError("Token JTI is missing.")
    return str(jti)


def _default_dependencies() -> AuthDependencies:
    return AuthDependencies(
        verify_password=_verify_password,
        hash_password=generate_password_hash,
        create_access_token=_create_access_token,
        create_refresh_token=_create_refresh_token,
        get_token_jti=_get_token_jti,
        find_user_by_email=_find_user_by_email,
        get_user_by_id=_get_user_by_id,
    )


def register_auth_dependencies(
    app: Flask,
    dependencies: AuthDependencies | None = None,
) -> None:
    if dependencies is None:
        dependencies = _default_dependencies()
    app.extensions.setdefault(AUTH_DEPENDENCIES_EXTENSION_KEY, dependencies)


def get_auth_dependencies() -> AuthDependencies:
    configured = current_app.extensions.get(AUTH_DEPENDENCIES_EXTENSION_KEY)
    if isinstance(configured, AuthDependencies):
        return configured
    fallback = _default_dependencies()
    current_app.extensions[AUTH_DEPENDENCIES_EXTENSION_KEY] = fallback
    return fallback
