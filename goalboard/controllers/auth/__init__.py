from . import routes as _routes  # noqa: F401
from .blueprint import auth_bp
from .dependencies import (
    AuthDependencies,
    get_auth_dependencies,
    register_auth_dependencies,
)
from .error_handlers import handle_webargs_error
from .login_resource import AuthResource
from .logout_resource import LogoutResource
from .refresh_resource import RefreshTokenResource
from .register_resource import RegisterResource

__all__ = [
    "auth_bp",
    "AuthDependencies",
    "register_auth_dependencies",
    "get_auth_dependencies",
    "RegisterResource",
    "AuthResource",
    "RefreshTokenResource",
    "LogoutResource",
    "handle_webargs_error",
]
