# mypy: disable-error-code=name-defined

from __future__ import annotations

from uuid import uuid4

from sqlalchemy.dialects.postgresql import UUID

from goalboard.extensions.database import db
from goalboard.utils.datetime_utils import utc_now_naive


class VisionBoardImage(db.Model):
    __tablename__ = "vision_board_images"

    id = db.Column(UUID(as_uuid=True), primary_key=True, default=uuid4)
    user_id = db.Column(UUID(as_uuid=True), db.ForeignKey("users.id"), nullable=False)
    image_url = db.Column(db.String(1024), nullable=False)
    created_at = db.Column(db.DateTime, default=utc_now_naive, nullable=False)

    def __repr__(self) -> str:
        return f"<VisionBoardImage id={self.id} image_url={self.image_url!r}>"
