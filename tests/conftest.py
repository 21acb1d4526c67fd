from pathlib import Path
import sys
import os

import pytest
from flask import g
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Safety default for any module-level app creation during test imports.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from app import create_app
from app.extensions import db
from app.services.ledger import advance_block_height, init_chain_state
from app.services.security import generate_principal_token


@pytest.fixture()
def app(tmp_path: Path):
    db_file = tmp_path / "test.sqlite3"
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_file}",
            "SECRET_KEY": "test-secret",
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
        init_chain_state()
        yield app
        db.session.remove()
        db.drop_all()


class _PerRequestPrincipalClient(FlaskClient):
    # Requests reuse the fixture's outer app context, so drop Flask-Login's
    # cached user to make each request authenticate from its own headers.
    def open(self, *args, **kwargs):
        g.pop("_login_user", None)
        return super().open(*args, **kwargs)


@pytest.fixture()
def client(app):
    app.test_client_class = _PerRequestPrincipalClient
    return app.test_client()


@pytest.fixture()
def db_session(app):
    with app.app_context():
        yield db.session


@pytest.fixture()
def auth_headers(app):
    def build(principal):
        token = generate_principal_token(principal)
        return {"Authorization": f"Bearer {token}"}

    return build


@pytest.fixture()
def set_block(app):
    def advance(height):
        return advance_block_height(height)

    return advance
