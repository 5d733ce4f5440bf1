from pathlib import Path
import sys
import os

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Safety default for any module-level app creation during test imports.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from namevote import create_app
from namevote.extensions import db
from namevote.models import Name

ADMIN_SECRET = "letmein"

CHROME_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) Chrome/126.0 Safari/537.36",
    "Accept-Language": "en-US,en;q=0.9",
    "Sec-CH-UA": '"Chromium";v="126", "Google Chrome";v="126"',
    "Sec-CH-UA-Platform": '"Windows"',
}


@pytest.fixture()
def app(tmp_path: Path):
    db_file = tmp_path / "test.sqlite3"
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_file}",
            "SQLALCHEMY_ENGINE_OPTIONS": {},
            "ADMIN_SECRET": ADMIN_SECRET,
            "FINGERPRINT_SECRET": "fp-secret",
        }
    )

    with app.app_context():
        driver = db.engine.url.drivername
        if driver != "sqlite":
            raise RuntimeError(
                f"Test database must be SQLite, got '{driver}'. Refusing to run destructive test setup."
            )
        db.drop_all()
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_session(app):
    with app.app_context():
        yield db.session


@pytest.fixture()
def alice(db_session):
    name = Name(name="Alice")
    db_session.add(name)
    db_session.commit()
    return name


@pytest.fixture()
def bob(db_session):
    name = Name(name="Bob")
    db_session.add(name)
    db_session.commit()
    return name


@pytest.fixture()
def admin_key(app):
    return app.config["ADMIN_SECRET"]


@pytest.fixture()
def chrome_headers():
    return dict(CHROME_HEADERS)
