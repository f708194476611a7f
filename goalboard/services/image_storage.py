"""Binary storage for vision board images.

Objects are addressed by a relative path inside a named bucket
(``<user_id>/<millis>.<ext>``). The public URL of an object always contains
the bucket name as a path segment followed by the object path, which is how
a stored path is recovered from a URL on deletion.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import BinaryIO, Protocol

VISION_BOARD_BUCKET = "vision-board"


class ImageStorageError(Exception):
    pass


class ImageStorage(Protocol):
    bucket: str

    def upload(self, path: str, stream: BinaryIO) -> None:
        raise NotImplementedError

    def public_url(self, path: str) -> str:
        raise NotImplementedError

    def remove(self, paths: list[str]) -> None:
        raise NotImplementedError


def path_from_public_url(url: str, bucket: str = VISION_BOARD_BUCKET) -> str | None:
    parts = url.split("/")
    if bucket not in parts:
        return None
    bucket_index = len(parts) - 1 - parts[::-1].index(bucket)
    path = "/".join(parts[bucket_index + 1 :])
    return path or None


class LocalImageStorage:
    def __init__(
        self,
        *,
        root: str | Path,
        public_url_prefix: str,
        bucket: str = VISION_BOARD_BUCKET,
    ) -> None:
        self.bucket = bucket
        self._root = Path(root)
        self._public_url_prefix = public_url_prefix.rstrip("/")

    def _resolve(self, path: str) -> Path:
        bucket_root = (self._root / self.bucket).resolve()
        target = (bucket_root / path).resolve()
        if bucket_root not in target.parents:
            raise ImageStorageError(f"Path escapes storage bucket: {path}")
        return target

    @property
    def bucket_root(self) -> Path:
        return (self._root / self.bucket).resolve()

    def upload(self, path: str, stream: BinaryIO) -> None:
        target = self._resolve(path)
        if target.exists():
            raise ImageStorageError(f"Object already exists: {path}")
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("wb") as handle:
            shutil.copyfileobj(stream, handle)

    def public_url(self, path: str) -> str:
        return f"{self._public_url_prefix}/{self.bucket}/{path}"

    def remove(self, paths: list[str]) -> None:
        for path in paths:
            target = self._resolve(path)
            try:
                target.unlink()
            except FileNotFoundError:
                continue
