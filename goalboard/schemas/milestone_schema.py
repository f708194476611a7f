from __future__ import annotations

from marshmallow import Schema, fields, pre_load, validate

from goalboard.schemas.sanitization import sanitize_string_fields


class MilestoneSchema(Schema):
    class Meta:
        name = "Milestone"

    id = fields.UUID(dump_only=True)
    goal_id = fields.UUID(dump_only=True)
    title = fields.Str(required=True, validate=validate.Length(min=1, max=256))
    completed = fields.Bool(load_default=False)
    order_index = fields.Int(validate=validate.Range(min=0))
    created_at = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)

    @pre_load
    def sanitize_input(self, data: object, **kwargs: object) -> object:
        return sanitize_string_fields(data, {"title"})
