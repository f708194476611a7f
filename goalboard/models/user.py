# mypy: disable-error-code=name-defined

import uuid

from sqlalchemy.dialects.postgresql import UUID

from goalboard.extensions.database import db
from goalboard.utils.datetime_utils import utc_now_naive


def initials_from_name(full_name: str) -> str:
    words = [word for word in full_name.split() if word]
    return "".join(word[0] for word in words).upper()[:2]


class User(db.Model):
    __tablename__ = "users"
    id = db.Column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, nullable=False
    )
    email = db.Column(db.String(128), nullable=False, unique=True)
    full_name = db.Column(db.String(128), nullable=False)
    initials = db.Column(db.String(2), nullable=True)
    password = db.Column(db.String(256), nullable=False)
    created_at = db.Column(db.DateTime, default=utc_now_naive, nullable=False)
    updated_at = db.Column(
        db.DateTime,
        default=utc_now_naive,
        onupdate=utc_now_naive,
        nullable=False,
    )
    current_jti = db.Column(db.String(128), nullable=True)
    current_refresh_jti = db.Column(db.String(128), nullable=True)

    goals = db.relationship(
        "Goal",
        backref="user",
        lazy=True,
        cascade="all, delete-orphan",
    )
    vision_board_images = db.relationship(
        "VisionBoardImage",
        backref="user",
        lazy=True,
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User {self.email}>"
