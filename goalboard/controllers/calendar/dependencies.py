from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
from uuid import UUID

from flask import Flask, current_app

from goalboard.application.services.calendar_application_service import (
    CalendarApplicationService,
)

CALENDAR_DEPENDENCIES_EXTENSION_KEY = "calendar_dependencies"


@dataclass(frozen=True)
class CalendarDependencies:
    calendar_application_service_factory: Callable[
        [UUID], CalendarApplicationService
    ]


def _default_dependencies() -> CalendarDependencies:
    return CalendarDependencies(
        calendar_application_service_factory=CalendarApplicationService.with_defaults,
    )


def register_calendar_dependencies(
    app: Flask,
    dependencies: CalendarDependencies | None = None,
) -> None:
    if dependencies is None:
        dependencies = _default_dependencies()
    app.extensions.setdefault(CALENDAR_DEPENDENCIES_EXTENSION_KEY, dependencies)


def get_calendar_dependencies() -> CalendarDependencies:
    configured = current_app.extensions.get(CALENDAR_DEPENDENCIES_EXTENSION_KEY)
    if isinstance(configured, CalendarDependencies):
        return configured
    fallback = _default_dependencies()
    current_app.extensions[CALENDAR_DEPENDENCIES_EXTENSION_KEY] = fallback
    return fallback
