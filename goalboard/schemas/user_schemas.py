from marshmallow import Schema, fields, pre_load, validate

from goalboard.schemas.sanitization import sanitize_string_fields


class UserRegistrationSchema(Schema):
    """New account registration"""

    full_name = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=128),
        metadata={"description": "User full name", "example": "Jane Doe"},
    )
    email = fields.Email(
        required=True,
        metadata={"description": "Unique email address", "example": "jane@email.com"},
    )
    password = fields.Str(
        required=True,
        load_only=True,
        validate=validate.Length(
            min=8,
            max=128,
            error="Password must be between 8 and 128 characters.",
        ),
        metadata={
            "description": "User password (at least 8 characters)",
            "example": "MyPassword@123",
        },
    )

    @pre_load
    def sanitize_input(self, data: object, **kwargs: object) -> object:
        sanitized = sanitize_string_fields(data, {"full_name", "email"})
        if isinstance(sanitized, dict) and isinstance(sanitized.get("email"), str):
            sanitized["email"] = str(sanitized["email"]).lower()
        return sanitized


class UserSchema(Schema):
    class Meta:
        name = "User"

    id = fields.UUID(dump_only=True)
    email = fields.Email(dump_only=True)
    full_name = fields.Str(dump_only=True)
    initials = fields.Str(dump_only=True)
    created_at = fields.DateTime(dump_only=True)
