from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
from uuid import UUID

from flask import Flask, current_app

from goalboard.services.image_storage import LocalImageStorage
from goalboard.services.vision_board_service import (
    DEFAULT_MAX_IMAGE_BYTES,
    VisionBoardService,
)

VISION_BOARD_DEPENDENCIES_EXTENSION_KEY = "vision_board_dependencies"


@dataclass(frozen=True)
class VisionBoardDependencies:
    storage_factory: Callable[[], LocalImageStorage]
    vision_board_service_factory: Callable[[UUID], VisionBoardService]


def _build_storage() -> LocalImageStorage:
    config = current_app.config
    return LocalImageStorage(
        root=config["VISION_BOARD_UPLOAD_FOLDER"],
        public_url_prefix=config.get("VISION_BOARD_PUBLIC_URL_PREFIX", "/uploads"),
    )


def _build_vision_board_service(user_id: UUID) -> VisionBoardService:
    return VisionBoardService(
        user_id,
        storage=_build_storage(),
        max_image_bytes=int(
            current_app.config.get(
                "VISION_BOARD_MAX_IMAGE_BYTES", DEFAULT_MAX_IMAGE_BYTES
            )
        ),
    )


def _default_dependencies() -> VisionBoardDependencies:
    return VisionBoardDependencies(
        storage_factory=_build_storage,
        vision_board_service_factory=_build_vision_board_service,
    )


def register_vision_board_dependencies(
    app: Flask,
    dependencies: VisionBoardDependencies | None = None,
) -> None:
    if dependencies is None:
        dependencies = _default_dependencies()
    app.extensions.setdefault(VISION_BOARD_DEPENDENCIES_EXTENSION_KEY, dependencies)


def get_vision_board_dependencies() -> VisionBoardDependencies:
    configured = current_app.extensions.get(VISION_BOARD_DEPENDENCIES_EXTENSION_KEY)
    if isinstance(configured, VisionBoardDependencies):
        return configured
    fallback = _default_dependencies()
    current_app.extensions[VISION_BOARD_DEPENDENCIES_EXTENSION_KEY] = fallback
    return fallback
