from .goal import Goal
from .milestone import Milestone
from .user import User
from .vision_board_image import VisionBoardImage

__all__ = ["User", "Goal", "Milestone", "VisionBoardImage"]
