from __future__ import annotations

from .blueprint import goal_bp
from .resources import (
    GoalCollectionResource,
    GoalResource,
    MilestoneCollectionResource,
    MilestoneResource,
    QuarterCollectionResource,
    QuarterResource,
)

_ROUTES_REGISTERED = False


def register_goal_routes() -> None:
    global _ROUTES_REGISTERED
    if _ROUTES_REGISTERED:
        return

    goal_bp.add_url_rule(
        "",
        view_func=GoalCollectionResource.as_view("goal_collection"),
        methods=["GET", "POST"],
    )
    goal_bp.add_url_rule(
        "/quarters",
        view_func=QuarterCollectionResource.as_view("quarter_collection"),
        methods=["GET"],
    )
    goal_bp.add_url_rule(
        "/quarters/<string:quarter_key>",
        view_func=QuarterResource.as_view("quarter_resource"),
        methods=["GET"],
    )
    goal_bp.add_url_rule(
        "/<uuid:goal_id>",
        view_func=GoalResource.as_view("goal_resource"),
        methods=["GET", "PUT", "DELETE"],
    )
    goal_bp.add_url_rule(
        "/<uuid:goal_id>/milestones",
        view_func=MilestoneCollectionResource.as_view("milestone_collection"),
        methods=["GET", "POST"],
    )
    goal_bp.add_url_rule(
        "/<uuid:goal_id>/milestones/<uuid:milestone_id>",
        view_func=MilestoneResource.as_view("milestone_resource"),
        methods=["PATCH", "DELETE"],
    )

    _ROUTES_REGISTERED = True


register_goal_routes()
