from . import routes as _routes  # noqa: F401
from .blueprint import vision_board_bp
from .dependencies import (
    VisionBoardDependencies,
    get_vision_board_dependencies,
    register_vision_board_dependencies,
)
from .resources import VisionBoardImageCollectionResource, VisionBoardImageResource

__all__ = [
    "vision_board_bp",
    "VisionBoardDependencies",
    "register_vision_board_dependencies",
    "get_vision_board_dependencies",
    "VisionBoardImageCollectionResource",
    "VisionBoardImageResource",
]
