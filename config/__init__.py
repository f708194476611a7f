import os
from datetime import timedelta
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]


def _read_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _read_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(
            f"Invalid runtime configuration: {name} must be an integer."
        ) from exc


def _is_secret_weak(secret: str) -> bool:
    normalized = secret.strip().lower()
    return normalized in {"", "dev", "super-secret-key", "changeme"} or len(secret) < 32


def _runtime_environment_name() -> str:
    for env_name in ("GOALBOARD_ENV", "APP_ENV", "FLASK_ENV"):
        raw = os.getenv(env_name)
        if raw is not None and raw.strip():
            return raw.strip().lower()
    return ""


def validate_security_configuration() -> None:
    enforce = _read_bool_env("SECURITY_ENFORCE_STRONG_SECRETS", True)

    is_debug = _read_bool_env("FLASK_DEBUG", False)
    is_testing = _read_bool_env("FLASK_TESTING", False)
    runtime_environment = _runtime_environment_name()
    secure_runtime = not is_debug and not is_testing

    if not enforce:
        if secure_runtime:
            raise RuntimeError(
                "Invalid runtime configuration: SECURITY_ENFORCE_STRONG_SECRETS "
                "must be true when FLASK_DEBUG=false and FLASK_TESTING=false."
            )
        return

    if runtime_environment in {"prod", "production"} and is_debug:
        raise RuntimeError(
            "Invalid runtime configuration: FLASK_DEBUG must be false in production."
        )

    if is_testing or is_debug:
        return

    secret_key = os.getenv("SECRET_KEY", "dev")
    jwt_secret_key = os.getenv("JWT_SECRET_KEY", "super-secret-key")
    weak = []
    if _is_secret_weak(secret_key):
        weak.append("SECRET_KEY")
    if _is_secret_weak(jwt_secret_key):
        weak.append("JWT_SECRET_KEY")

    if weak:
        raise RuntimeError(
            "Weak/invalid secrets for production runtime: "
            + ", ".join(weak)
            + ". Configure strong values in environment variables."
        )


def _database_uri() -> str:
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url
    return (
        f"postgresql://{os.getenv('DB_USER')}:{os.getenv('DB_PASS')}@"
        f"{os.getenv('DB_HOST')}:{os.getenv('DB_PORT')}/{os.getenv('DB_NAME')}"
    )


def build_config() -> dict:
    """Resolve runtime settings from the environment at app creation time."""
    max_image_bytes = _read_int_env("VISION_BOARD_MAX_IMAGE_BYTES", 10 * 1024 * 1024)
    return {
        "SECRET_KEY": os.getenv("SECRET_KEY", "dev"),
        "JWT_SECRET_KEY": os.getenv("JWT_SECRET_KEY", "super-secret-key"),
        "JWT_TOKEN_LOCATION": ["headers"],
        "JWT_HEADER_TYPE": "Bearer",
        "JWT_ACCESS_TOKEN_EXPIRES": timedelta(
            seconds=_read_int_env("JWT_ACCESS_TOKEN_EXPIRES_SECONDS", 3600)
        ),
        "JWT_REFRESH_TOKEN_EXPIRES": timedelta(
            seconds=_read_int_env("JWT_REFRESH_TOKEN_EXPIRES_SECONDS", 30 * 24 * 3600)
        ),
        "DEBUG": _read_bool_env("FLASK_DEBUG", False),
        "TESTING": _read_bool_env("FLASK_TESTING", False),
        "SQLALCHEMY_DATABASE_URI": _database_uri(),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        # Vision board storage
        "VISION_BOARD_UPLOAD_FOLDER": os.getenv(
            "VISION_BOARD_UPLOAD_FOLDER", str(BASE_DIR / "instance" / "uploads")
        ),
        "VISION_BOARD_PUBLIC_URL_PREFIX": os.getenv(
            "VISION_BOARD_PUBLIC_URL_PREFIX", "/uploads"
        ),
        "VISION_BOARD_MAX_IMAGE_BYTES": max_image_bytes,
        # multipart overhead on top of the image itself
        "MAX_CONTENT_LENGTH": max_image_bytes + 1024 * 1024,
    }
