from . import routes as _routes  # noqa: F401
from .blueprint import user_bp
from .dependencies import (
    UserDependencies,
    get_user_dependencies,
    register_user_dependencies,
)
from .resources import UserMeResource

__all__ = [
    "user_bp",
    "UserDependencies",
    "register_user_dependencies",
    "get_user_dependencies",
    "UserMeResource",
]
