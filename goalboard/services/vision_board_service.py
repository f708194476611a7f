from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, cast
from uuid import UUID

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from goalboard.extensions.database import db
from goalboard.models.vision_board_image import VisionBoardImage
from goalboard.schemas.vision_board_schema import VisionBoardImageSchema
from goalboard.services.image_storage import (
    ImageStorage,
    ImageStorageError,
    path_from_public_url,
)
from goalboard.utils.datetime_utils import utc_now

DEFAULT_MAX_IMAGE_BYTES = 10 * 1024 * 1024
IMAGE_EXTENSIONS_BY_MIMETYPE = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/gif": "gif",
    "image/webp": "webp",
}
ALLOWED_FILENAME_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "webp"})


@dataclass
class VisionBoardServiceError(Exception):
    message: str
    code: str
    status_code: int
    details: dict[str, Any] | None = None


def _stream_size(upload: FileStorage) -> int:
    stream = upload.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


def _filename_extension(upload: FileStorage) -> str | None:
    filename = secure_filename(upload.filename or "")
    if "." not in filename:
        return None
    return filename.rsplit(".", 1)[-1].lower()


class VisionBoardService:
    def __init__(
        self,
        user_id: UUID,
        *,
        storage: ImageStorage,
        max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
        now_provider: Callable[[], datetime] | None = None,
    ) -> None:
        self.user_id = user_id
        self._storage = storage
        self._max_image_bytes = max_image_bytes
        self._now_provider = now_provider or utc_now
        self._schema = VisionBoardImageSchema()

    def list_images(self) -> list[VisionBoardImage]:
        return cast(
            list[VisionBoardImage],
            VisionBoardImage.query.filter_by(user_id=self.user_id)
            .order_by(VisionBoardImage.created_at.desc())
            .all(),
        )

    def upload_image(self, upload: FileStorage | None) -> VisionBoardImage:
        if upload is None or not upload.filename:
            raise VisionBoardServiceError(
                message="An image file is required.",
                code="VALIDATION_ERROR",
                status_code=400,
            )
        extension = IMAGE_EXTENSIONS_BY_MIMETYPE.get((upload.mimetype or "").lower())
        filename_extension = _filename_extension(upload)
        if extension is None or (
            filename_extension is not None
            and filename_extension not in ALLOWED_FILENAME_EXTENSIONS
        ):
            raise VisionBoardServiceError(
                message="Please select an image file.",
                code="VALIDATION_ERROR",
                status_code=400,
                details={
                    "content_type": upload.mimetype,
                    "allowed_types": sorted(IMAGE_EXTENSIONS_BY_MIMETYPE),
                },
            )
        size = _stream_size(upload)
        if size > self._max_image_bytes:
            raise VisionBoardServiceError(
                message="Image is too large.",
                code="PAYLOAD_TOO_LARGE",
                status_code=413,
                details={"max_bytes": self._max_image_bytes, "size": size},
            )

        millis = int(self._now_provider().timestamp() * 1000)
        path = f"{self.user_id}/{millis}.{extension}"
        try:
            self._storage.upload(path, upload.stream)
        except (ImageStorageError, OSError) as exc:
            current_app.logger.exception("Failed to store vision board image.")
            raise VisionBoardServiceError(
                message="Error uploading image. Please try again.",
                code="STORAGE_ERROR",
                status_code=502,
            ) from exc

        image = VisionBoardImage(
            user_id=self.user_id,
            image_url=self._storage.public_url(path),
        )
        db.session.add(image)
        try:
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.exception("Failed to save vision board image %s.", path)
            self._remove_stored(path)
            raise VisionBoardServiceError(
                message="Error uploading image. Please try again.",
                code="INTERNAL_ERROR",
                status_code=500,
            ) from exc
        current_app.logger.info("Stored vision board image %s at %s", image.id, path)
        return image

    def get_image(self, image_id: UUID) -> VisionBoardImage:
        image = cast(
            VisionBoardImage | None,
            VisionBoardImage.query.filter_by(id=image_id).first(),
        )
        if image is None:
            raise VisionBoardServiceError(
                message="Image not found.",
                code="NOT_FOUND",
                status_code=404,
            )
        if str(image.user_id) != str(self.user_id):
            raise VisionBoardServiceError(
                message="You do not have permission to access this image.",
                code="FORBIDDEN",
                status_code=403,
            )
        return image

    def delete_image(self, image_id: UUID) -> None:
        image = self.get_image(image_id)
        image_url = image.image_url
        db.session.delete(image)
        db.session.commit()

        path = path_from_public_url(image_url, self._storage.bucket)
        if path is not None:
            self._remove_stored(path)

    def _remove_stored(self, path: str) -> None:
        try:
            self._storage.remove([path])
        except (ImageStorageError, OSError):
            current_app.logger.warning(
                "Failed to remove stored image %s.", path, exc_info=True
            )

    def serialize(self, image: VisionBoardImage) -> dict[str, Any]:
        return cast(dict[str, Any], self._schema.dump(image))
