import os
import sys
from pathlib import Path
from typing import Generator

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

TEST_ENV_OVERRIDES = {
    "SECRET_KEY": "test-secret",
    "JWT_SECRET_KEY": "test-jwt-secret",
    "FLASK_DEBUG": "false",
    "FLASK_TESTING": "true",
    "SECURITY_ENFORCE_STRONG_SECRETS": "false",
}


@pytest.fixture(autouse=True)
def isolate_test_env() -> Generator[None, None, None]:
    tracked_keys = set(TEST_ENV_OVERRIDES.keys()) | {
        "DATABASE_URL",
        "VISION_BOARD_UPLOAD_FOLDER",
    }
    original_values = {key: os.environ.get(key) for key in tracked_keys}
    yield
    for key, value in original_values.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value


@pytest.fixture
def app(tmp_path: Path):
    test_db_path = tmp_path / "test.sqlite3"
    os.environ["DATABASE_URL"] = f"sqlite:///{test_db_path}"
    os.environ["VISION_BOARD_UPLOAD_FOLDER"] = str(tmp_path / "uploads")
    for key, value in TEST_ENV_OVERRIDES.items():
        os.environ[key] = value

    from goalboard import create_app
    from goalboard.extensions.database import db

    app = create_app()
    app.config["TESTING"] = True

    with app.app_context():
        db.drop_all()
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()
    if test_db_path.exists():
        test_db_path.unlink()


@pytest.fixture
def client(app) -> Generator:
    yield app.test_client()
