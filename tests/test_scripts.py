from list_users import user_lines
from models import User
from seed_admin import seed_admin
from tests.conftest import login, register


def test_seed_admin_creates_then_resets(app, client):
    with app.app_context():
        user, created = seed_admin("admin@example.org", "first-pass")
        assert created
        assert user.role == "ADMIN"

        user, created = seed_admin("admin@example.org", "second-pass")
        assert not created
        assert User.query.filter_by(email="admin@example.org").count() == 1

    assert login(client, "admin@example.org", password="first-pass").status_code == 401
    resp = login(client, "admin@example.org", password="second-pass")
    assert resp.get_json()["role"] == "ADMIN"


def test_list_users(app, client):
    register(client, "a@example.org", "DONOR")
    register(client, "b@example.org", "NGO")
    with app.app_context():
        lines = user_lines()
    assert [line.split()[1:] for line in lines] == [["a@example.org", "DONOR"], ["b@example.org", "NGO"]]
