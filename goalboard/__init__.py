from typing import Any, Mapping

from apispec import APISpec
from apispec.ext.marshmallow import MarshmallowPlugin
from flask import Flask
from flask_apispec import FlaskApiSpec
from flask_jwt_extended import JWTManager
from flask_marshmallow import Marshmallow
from flask_migrate import Migrate

from goalboard.controllers import all_blueprints
from goalboard.controllers.auth import (
    AuthResource,
    LogoutResource,
    RefreshTokenResource,
    RegisterResource,
    register_auth_dependencies,
)
from goalboard.controllers.calendar import (
    CalendarDayResource,
    CalendarMonthResource,
    register_calendar_dependencies,
)
from goalboard.controllers.goal import (
    GoalCollectionResource,
    GoalResource,
    MilestoneCollectionResource,
    MilestoneResource,
    QuarterCollectionResource,
    QuarterResource,
    register_goal_dependencies,
)
from goalboard.controllers.user import UserMeResource, register_user_dependencies
from goalboard.controllers.vision_board import (
    VisionBoardImageCollectionResource,
    VisionBoardImageResource,
    register_vision_board_dependencies,
)
from goalboard.docs.api_documentation import API_INFO, TAGS
from goalboard.extensions.database import db
from goalboard.extensions.error_handlers import register_error_handlers
from goalboard.extensions.jwt_callbacks import register_jwt_callbacks
from goalboard.middleware.auth_guard import register_auth_guard
from goalboard.models import Goal, Milestone, User, VisionBoardImage  # noqa: F401

jwt = JWTManager()
ma = Marshmallow()

_DOCUMENTED_RESOURCES = (
    (RegisterResource, "auth", "registerresource"),
    (AuthResource, "auth", "authresource"),
    (RefreshTokenResource, "auth", "refreshtokenresource"),
    (LogoutResource, "auth", "logoutresource"),
    (UserMeResource, "user", "usermeresource"),
    (GoalCollectionResource, "goal", "goal_collection"),
    (GoalResource, "goal", "goal_resource"),
    (MilestoneCollectionResource, "goal", "milestone_collection"),
    (MilestoneResource, "goal", "milestone_resource"),
    (QuarterCollectionResource, "goal", "quarter_collection"),
    (QuarterResource, "goal", "quarter_resource"),
    (CalendarMonthResource, "calendar", "calendar_month"),
    (CalendarDayResource, "calendar", "calendar_day"),
    (VisionBoardImageCollectionResource, "vision_board", "image_collection"),
    (VisionBoardImageResource, "vision_board", "image_resource"),
)


def create_app(config_overrides: Mapping[str, Any] | None = None) -> Flask:
    from config import build_config, validate_security_configuration

    validate_security_configuration()

    app = Flask(__name__, instance_relative_config=True)
    app.config.from_mapping(build_config())

    # FLASK_-prefixed environment variables win over the defaults
    app.config.from_prefixed_env()
    if config_overrides:
        app.config.from_mapping(config_overrides)

    db.init_app(app)
    ma.init_app(app)
    Migrate(app, db)
    jwt.init_app(app)

    # Development convenience; production schemas come from the migrations.
    with app.app_context():
        db.create_all()

    app.config.update(
        {
            "APISPEC_SPEC": APISpec(
                title=API_INFO["title"],
                version=API_INFO["version"],
                openapi_version="3.0.2",
                plugins=[MarshmallowPlugin()],
                info={
                    "description": API_INFO["description"],
                    "contact": API_INFO["contact"],
                    "license": API_INFO["license"],
                },
                components={
                    "securitySchemes": {
                        "BearerAuth": {
                            "type": "http",
                            "scheme": "bearer",
                            "bearerFormat": "JWT",
                            "description": "JWT obtained from /auth/login",
                        }
                    }
                },
                tags=TAGS,
            ),
            "APISPEC_SWAGGER_URL": "/docs/swagger/",
            "APISPEC_SWAGGER_UI_URL": "/docs/",
        }
    )

    docs = FlaskApiSpec(app)

    register_error_handlers(app)

    # Blueprints must be registered before their endpoints are documented
    for blueprint in all_blueprints:
        app.register_blueprint(blueprint)

    for resource, blueprint_name, endpoint in _DOCUMENTED_RESOURCES:
        docs.register(resource, blueprint=blueprint_name, endpoint=endpoint)

    register_auth_dependencies(app)
    register_user_dependencies(app)
    register_goal_dependencies(app)
    register_calendar_dependencies(app)
    register_vision_board_dependencies(app)

    register_auth_guard(app)
    register_jwt_callbacks(jwt)

    app.logger.info("Goalboard application created")
    return app


__all__ = ["create_app"]
