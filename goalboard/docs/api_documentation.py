"""
API documentation metadata for Goalboard.

General information rendered by the Swagger UI.
"""

API_INFO = {
    "title": "Goalboard",
    "version": "1.0.0",
    "description": (
        "Personal goal tracking API.\n\n"
        "- Goals with start and due dates, milestones and progress.\n"
        "- Quarter planning view covering the current and the next year.\n"
        "- Calendar month grid and day agenda built from goal dates.\n"
        "- Vision board image uploads.\n"
        "- JWT authentication with refresh tokens."
    ),
    "contact": {"name": "Goalboard maintainers"},
    "license": {"name": "MIT", "url": "https://opensource.org/licenses/MIT"},
}

TAGS = [
    {
        "name": "Authentication",
        "description": "Registration, login, session refresh and logout",
    },
    {"name": "User", "description": "Authenticated user profile"},
    {"name": "Goals", "description": "Create, edit and list goals"},
    {"name": "Milestones", "description": "Ordered checklist items of a goal"},
    {"name": "Quarters", "description": "Goals grouped by start-date quarter"},
    {
        "name": "Calendar",
        "description": "Month grid and day agenda derived from goal dates",
    },
    {"name": "Vision board", "description": "Motivational image uploads"},
    {"name": "Health", "description": "Infrastructure probes"},
]

EXAMPLES = {
    "goal_create": {
        "summary": "Goal with two initial milestones",
        "value": {
            "title": "Run a half marathon",
            "description": "Training plan\n- Run 10 km\n- Run 15 km",
            "start_date": "2025-01-15",
            "due_date": "2025-03-20",
            "accountability_partner": "Alex",
        },
    },
    "milestone_toggle": {
        "summary": "Mark a milestone as done",
        "value": {"completed": True},
    },
}
