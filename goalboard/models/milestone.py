# mypy: disable-error-code=name-defined

from __future__ import annotations

from uuid import uuid4

from sqlalchemy import false
from sqlalchemy.dialects.postgresql import UUID

from goalboard.extensions.database import db
from goalboard.utils.datetime_utils import utc_now_naive


class Milestone(db.Model):
    __tablename__ = "milestones"

    id = db.Column(UUID(as_uuid=True), primary_key=True, default=uuid4)
    goal_id = db.Column(
        UUID(as_uuid=True),
        db.ForeignKey("goals.id", ondelete="CASCADE"),
        nullable=False,
    )
    title = db.Column(db.String(256), nullable=False)
    completed = db.Column(
        db.Boolean, nullable=False, default=False, server_default=false()
    )
    order_index = db.Column(db.Integer, nullable=False, default=0, server_default="0")

    created_at = db.Column(db.DateTime, default=utc_now_naive, nullable=False)
    updated_at = db.Column(
        db.DateTime,
        default=utc_now_naive,
        onupdate=utc_now_naive,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<Milestone id={self.id} title={self.title!r} "
            f"completed={self.completed} order_index={self.order_index}>"
        )
