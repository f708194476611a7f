# mypy: disable-error-code=misc

from __future__ import annotations

from typing import Any
from uuid import UUID

from flask import abort, request, send_from_directory
from flask_apispec import doc
from flask_apispec.views import MethodResource
from flask_jwt_extended import get_jwt_identity, jwt_required

from goalboard.controllers.response_contract import (
    compat_success_response,
    service_error_response,
)
from goalboard.services.vision_board_service import (
    ALLOWED_FILENAME_EXTENSIONS,
    VisionBoardService,
    VisionBoardServiceError,
)

from .dependencies import get_vision_board_dependencies

CONTRACT_HEADER_PARAM = {
    "X-API-Contract": {
        "in": "header",
        "description": "Optional. Send 'v2' for the standard contract.",
        "type": "string",
        "required": False,
    }
}


def _current_service() -> VisionBoardService:
    user_id = UUID(get_jwt_identity())
    dependencies = get_vision_board_dependencies()
    return dependencies.vision_board_service_factory(user_id)


class VisionBoardImageCollectionResource(MethodResource):
    @doc(
        description="Lists the authenticated user's vision board, newest first.",
        tags=["Vision board"],
        security=[{"BearerAuth": []}],
        params=CONTRACT_HEADER_PARAM,
        responses={
            200: {"description": "Image list"},
            401: {"description": "Invalid token"},
        },
    )
    @jwt_required()
    def get(self) -> Any:
        service = _current_service()
        items = [service.serialize(image) for image in service.list_images()]
        return compat_success_response(
            legacy_payload={"items": items},
            status_code=200,
            message="Images listed successfully",
            data={"items": items},
        )

    @doc(
        description=(
            "Uploads an image to the vision board. Send multipart/form-data "
            "with the file in the 'image' field."
        ),
        tags=["Vision board"],
        security=[{"BearerAuth": []}],
        params=CONTRACT_HEADER_PARAM,
        responses={
            201: {"description": "Image uploaded"},
            400: {"description": "Missing or non-image file"},
            401: {"description": "Invalid token"},
            413: {"description": "Image too large"},
            502: {"description": "Storage failure"},
        },
    )
    @jwt_required()
    def post(self) -> Any:
        service = _current_service()
        try:
            image = service.upload_image(request.files.get("image"))
        except VisionBoardServiceError as exc:
            return service_error_response(exc)

        image_data = service.serialize(image)
        return compat_success_response(
            legacy_payload={
                "message": "Image uploaded successfully",
                "image": image_data,
            },
            status_code=201,
            message="Image uploaded successfully",
            data={"image": image_data},
        )


class VisionBoardImageResource(MethodResource):
    @doc(
        description="Removes an image from the vision board and from storage.",
        tags=["Vision board"],
        security=[{"BearerAuth": []}],
        params={
            "image_id": {"in": "path", "type": "string", "required": True},
            **CONTRACT_HEADER_PARAM,
        },
        responses={
            200: {"description": "Image deleted"},
            401: {"description": "Invalid token"},
            403: {"description": "Forbidden"},
            404: {"description": "Image not found"},
        },
    )
    @jwt_required()
    def delete(self, image_id: UUID) -> Any:
        try:
            _current_service().delete_image(image_id)
        except VisionBoardServiceError as exc:
            return service_error_response(exc)

        return compat_success_response(
            legacy_payload={"message": "Image deleted successfully"},
            status_code=200,
            message="Image deleted successfully",
            data={},
        )


def uploaded_image(path: str) -> Any:
    """Serve a stored vision board image (public)."""
    if path.rsplit(".", 1)[-1].lower() not in ALLOWED_FILENAME_EXTENSIONS:
        abort(404)
    storage = get_vision_board_dependencies().storage_factory()
    return send_from_directory(storage.bucket_root, path)
