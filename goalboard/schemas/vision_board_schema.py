from __future__ import annotations

from marshmallow import Schema, fields


class VisionBoardImageSchema(Schema):
    class Meta:
        name = "VisionBoardImage"

    id = fields.UUID(dump_only=True)
    user_id = fields.UUID(dump_only=True)
    image_url = fields.Str(dump_only=True)
    created_at = fields.DateTime(dump_only=True)
