import os
import tempfile

# Config refuses to load without a secret; logs go to a throwaway directory.
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="investapro-logs-"))

import pytest

from app import create_app
from config import TestingConfig
from extensions import db
from security import create_token


@pytest.fixture(scope="function")
def app():
    """Fresh app with an empty in-memory database for each test."""
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


def signup(client, email="a@x.com", password="p", full_name="A", phone="1"):
    return client.post("/auth/signup", json={
        "full_name": full_name,
        "email": email,
        "phone": phone,
        "password": password,
    })


def login(client, email="a@x.com", password="p"):
    return client.post("/auth/login", json={"email": email, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def user(client):
    """A signed-up user: returns (user_id, auth headers)."""
    assert signup(client).status_code == 200
    body = login(client).get_json()
    return body["user_id"], bearer(body["token"])


@pytest.fixture(scope="function")
def make_token(app):
    def _make(user_id, **kwargs):
        with app.app_context():
            return create_token(user_id, **kwargs)
    return _make
