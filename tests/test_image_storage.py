from __future__ import annotations

from io import BytesIO

import pytest

from goalboard.services.image_storage import (
    ImageStorageError,
    LocalImageStorage,
    path_from_public_url,
)


def test_path_from_public_url_uses_segments_after_bucket() -> None:
    assert (
        path_from_public_url("https://cdn.example.com/storage/vision-board/u1/1700.png")
        == "u1/1700.png"
    )
    assert path_from_public_url("/uploads/vision-board/u1/1700.png") == "u1/1700.png"


def test_path_from_public_url_uses_last_bucket_segment() -> None:
    url = "https://example.com/vision-board/cdn/vision-board/u1/1.png"
    assert path_from_public_url(url) == "u1/1.png"


def test_path_from_public_url_without_bucket() -> None:
    assert path_from_public_url("https://cdn.example.com/other/u1/1.png") is None
    assert path_from_public_url("/uploads/vision-board/") is None


def test_local_storage_upload_and_remove(tmp_path) -> None:
    storage = LocalImageStorage(root=tmp_path, public_url_prefix="/uploads/")

    storage.upload("u1/1.png", BytesIO(b"data"))

    stored = tmp_path / "vision-board" / "u1" / "1.png"
    assert stored.read_bytes() == b"data"
    assert storage.public_url("u1/1.png") == "/uploads/vision-board/u1/1.png"

    storage.remove(["u1/1.png", "u1/missing.png"])
    assert not stored.exists()


def test_local_storage_refuses_overwrite_and_escape(tmp_path) -> None:
    storage = LocalImageStorage(root=tmp_path, public_url_prefix="/uploads")
    storage.upload("u1/1.png", BytesIO(b"data"))

    with pytest.raises(ImageStorageError):
        storage.upload("u1/1.png", BytesIO(b"other"))
    with pytest.raises(ImageStorageError):
        storage.upload("../escape.png", BytesIO(b"data"))
