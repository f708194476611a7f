from __future__ import annotations

from .blueprint import calendar_bp
from .resources import CalendarDayResource, CalendarMonthResource

_ROUTES_REGISTERED = False


def register_calendar_routes() -> None:
    global _ROUTES_REGISTERED
    if _ROUTES_REGISTERED:
        return

    calendar_bp.add_url_rule(
        "/month",
        view_func=CalendarMonthResource.as_view("calendar_month"),
        methods=["GET"],
    )
    calendar_bp.add_url_rule(
        "/day",
        view_func=CalendarDayResource.as_view("calendar_day"),
        methods=["GET"],
    )
    _ROUTES_REGISTERED = True


register_calendar_routes()
