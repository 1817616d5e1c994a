"""Shared fixtures: an app on in-memory SQLite with the two default users."""

import pytest

from config import TestConfig
from lockedin import create_app, db
from lockedin.repository import seed_users


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        seed_users(app.config["SEED_USERS"])
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    resp = client.post("/api/auth/unlock", json={"passphrase": TestConfig.APP_PASSPHRASE})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.get_json()['token']}"}


@pytest.fixture
def users(app):
    from lockedin.repository import list_users

    return list_users()
