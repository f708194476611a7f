from goalboard.application.services.calendar_application_service import (
    CalendarApplicationError,
    CalendarApplicationService,
)
from goalboard.application.services.goal_application_service import (
    GoalApplicationError,
    GoalApplicationService,
)

__all__ = [
    "CalendarApplicationError",
    "CalendarApplicationService",
    "GoalApplicationError",
    "GoalApplicationService",
]
