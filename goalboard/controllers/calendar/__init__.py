from . import routes as _routes  # noqa: F401
from .blueprint import calendar_bp
from .dependencies import (
    CalendarDependencies,
    get_calendar_dependencies,
    register_calendar_dependencies,
)
from .resources import CalendarDayResource, CalendarMonthResource

__all__ = [
    "calendar_bp",
    "CalendarDependencies",
    "register_calendar_dependencies",
    "get_calendar_dependencies",
    "CalendarMonthResource",
    "CalendarDayResource",
]
