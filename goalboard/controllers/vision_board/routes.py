from __future__ import annotations

from goalboard.services.image_storage import VISION_BOARD_BUCKET

from .blueprint import vision_board_bp
from .resources import (
    VisionBoardImageCollectionResource,
    VisionBoardImageResource,
    uploaded_image,
)

_ROUTES_REGISTERED = False


def register_vision_board_routes() -> None:
    global _ROUTES_REGISTERED
    if _ROUTES_REGISTERED:
        return

    vision_board_bp.add_url_rule(
        "/vision-board/images",
        view_func=VisionBoardImageCollectionResource.as_view("image_collection"),
        methods=["GET", "POST"],
    )
    vision_board_bp.add_url_rule(
        "/vision-board/images/<uuid:image_id>",
        view_func=VisionBoardImageResource.as_view("image_resource"),
        methods=["DELETE"],
    )
    vision_board_bp.add_url_rule(
        f"/uploads/{VISION_BOARD_BUCKET}/<path:path>",
        endpoint="uploaded_image",
        view_func=uploaded_image,
        methods=["GET"],
    )
    _ROUTES_REGISTERED = True


register_vision_board_routes()
