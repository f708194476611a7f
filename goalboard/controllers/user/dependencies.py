from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, cast
from uuid import UUID

from flask import Flask, current_app

from goalboard.application.services.goal_application_service import (
    GoalApplicationService,
)
from goalboard.extensions.database import db
from goalboard.models.user import User

USER_DEPENDENCIES_EXTENSION_KEY = "user_dependencies"


@dataclass(frozen=True)
class UserDependencies:
    get_user_by_id: Callable[[UUID], User | None]
    goal_application_service_factory: Callable[[UUID], GoalApplicationService]


def _get_user_by_id(user_id: UUID) -> User | None:
    return cast(User | None, db.session.get(User, user_id))


def _default_dependencies() -> UserDependencies:
    return UserDependencies(
        get_user_by_id=_get_user_by_id,
        goal_application_service_factory=GoalApplicationService.with_defaults,
    )


def register_user_dependencies(
    app: Flask,
    dependencies: UserDependencies | None = None,
) -> None:
    if dependencies is None:
        dependencies = _default_dependencies()
    app.extensions.setdefault(USER_DEPENDENCIES_EXTENSION_KEY, dependencies)


def get_user_dependencies() -> UserDependencies:
    configured = current_app.extensions.get(USER_DEPENDENCIES_EXTENSION_KEY)
    if isinstance(configured, UserDependencies):
        return configured
    fallback = _default_dependencies()
    current_app.extensions[USER_DEPENDENCIES_EXTENSION_KEY] = fallback
    return fallback
