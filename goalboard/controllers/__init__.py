from .auth import auth_bp
from .calendar import calendar_bp
from .goal import goal_bp
from .health_controller import health_bp
from .user import user_bp
from .vision_board import vision_board_bp

all_blueprints = [
    auth_bp,
    user_bp,
    goal_bp,
    calendar_bp,
    vision_board_bp,
    health_bp,
]
