# mypy: disable-error-code=name-defined

from __future__ import annotations

from uuid import uuid4

from sqlalchemy.dialects.postgresql import UUID

from goalboard.extensions.database import db
from goalboard.utils.datetime_utils import utc_now_naive


class Goal(db.Model):
    __tablename__ = "goals"

    id = db.Column(UUID(as_uuid=True), primary_key=True, default=uuid4)
    user_id = db.Column(UUID(as_uuid=True), db.ForeignKey("users.id"), nullable=False)

    title = db.Column(db.String(128), nullable=False)
    description = db.Column(db.String(2000), nullable=True)
    status = db.Column(
        db.String(24),
        nullable=False,
        default="active",
        server_default="active",
    )
    start_date = db.Column(db.Date, nullable=False)
    due_date = db.Column(db.Date, nullable=False)
    accountability_partner = db.Column(db.String(128), nullable=True)

    created_at = db.Column(db.DateTime, default=utc_now_naive, nullable=False)
    updated_at = db.Column(
        db.DateTime,
        default=utc_now_naive,
        onupdate=utc_now_naive,
        nullable=False,
    )

    milestones = db.relationship(
        "Milestone",
        backref="goal",
        lazy=True,
        cascade="all, delete-orphan",
        order_by="Milestone.order_index",
    )

    __table_args__ = (
        db.CheckConstraint(
            "status IN ('active', 'completed', 'done')",
            name="ck_goals_status",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<Goal id={self.id} title={self.title!r} "
            f"start_date={self.start_date} due_date={self.due_date} "
            f"status={self.status!r}>"
        )
