from marshmallow import Schema, fields


class AuthSchema(Schema):
    """Login credentials"""

    email = fields.Email(
        required=True,
        metadata={"description": "User email address", "example": "jane@email.com"},
    )
    password = fields.String(
        required=True,
        metadata={"description": "User password", "example": "MyPassword@123"},
    )


class AuthSuccessResponseSchema(Schema):
    """Successful login response"""

    message = fields.String(
        required=True,
        metadata={"description": "Success message", "example": "Login successful"},
    )
    token = fields.String(
        required=True,
        metadata={"description": "JWT access token"},
    )
    refresh_token = fields.String(
        required=True,
        metadata={"description": "JWT refresh token used to renew the session"},
    )
    user = fields.Dict(
        required=True,
        keys=fields.String(),
        values=fields.String(),
        metadata={"description": "Basic data of the authenticated user"},
    )
