from datetime import datetime, timedelta, timezone

import pytest

from app import create_app
from config import TestConfig
from models import db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def iso(dt):
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def donation_payload(**overrides):
    now = datetime.now(timezone.utc)
    body = {
        "foodType": "Vegetable biryani",
        "servingsTotal": 250,
        "dietaryCategory": "VEG",
        "pickupWindowStart": iso(now + timedelta(hours=1)),
        "pickupWindowEnd": iso(now + timedelta(hours=3)),
        "expiryAt": iso(now + timedelta(hours=6)),
        "city": "Pune",
    }
    body.update(overrides)
    return body


def register(client, email, role, password="pass-1234"):
    return client.post("/register", json={"email": email, "password": password, "role": role})


def login(client, email, password="pass-1234"):
    return client.post("/login", json={"email": email, "password": password})


@pytest.fixture
def make_user(app):
    """Register + log in on a fresh test client; returns that client."""
    def _make(email, role="DONOR"):
        c = app.test_client()
        assert register(c, email, role).status_code == 201
        assert login(c, email).status_code == 200
        return c
    return _make


@pytest.fixture
def donor(make_user):
    return make_user("donor@example.org", "DONOR")
