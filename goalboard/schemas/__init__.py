"""
Marshmallow schemas used for request validation, response serialization and
the OpenAPI documentation.
"""

from .auth_schema import AuthSchema, AuthSuccessResponseSchema
from .goal_schema import GoalSchema
from .milestone_schema import MilestoneSchema
from .user_schemas import UserRegistrationSchema, UserSchema
from .vision_board_schema import VisionBoardImageSchema

__all__ = [
    "AuthSchema",
    "AuthSuccessResponseSchema",
    "GoalSchema",
    "MilestoneSchema",
    "UserRegistrationSchema",
    "UserSchema",
    "VisionBoardImageSchema",
]
