from __future__ import annotations

from typing import Any

from marshmallow import Schema, ValidationError, fields, pre_load, validate
from marshmallow import validates_schema

from goalboard.schemas.milestone_schema import MilestoneSchema
from goalboard.schemas.sanitization import sanitize_string_fields
from goalboard.services.goal_progress_service import GOAL_STATUSES


class GoalSchema(Schema):
    class Meta:
        name = "Goal"

    id = fields.UUID(dump_only=True)
    user_id = fields.UUID(dump_only=True)
    title = fields.Str(required=True, validate=validate.Length(min=1, max=128))
    description = fields.Str(allow_none=True, validate=validate.Length(max=2000))
    status = fields.Str(
        load_default="active",
        validate=validate.OneOf(GOAL_STATUSES),
    )
    start_date = fields.Date(required=True)
    due_date = fields.Date(required=True)
    accountability_partner = fields.Str(
        allow_none=True,
        validate=validate.Length(max=128),
    )
    milestones = fields.List(fields.Nested(MilestoneSchema), dump_only=True)
    created_at = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)

    @pre_load
    def sanitize_input(self, data: object, **kwargs: object) -> object:
        sanitized = sanitize_string_fields(
            data,
            {"title", "description", "status", "accountability_partner"},
            blank_as_none={"description", "accountability_partner"},
        )
        if isinstance(sanitized, dict) and isinstance(sanitized.get("status"), str):
            sanitized["status"] = str(sanitized["status"]).lower()
        return sanitized

    @validates_schema  # type: ignore[misc]
    def validate_date_range(self, data: dict[str, Any], **kwargs: object) -> None:
        start_date = data.get("start_date")
        due_date = data.get("due_date")
        if start_date is not None and due_date is not None and due_date < start_date:
            raise ValidationError(
                "Due date must not be earlier than start date.",
                field_name="due_date",
            )
