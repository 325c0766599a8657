import pytest

from auth import SessionUser, require_role, require_session
from errors import Forbidden, Unauthenticated
from models import Role


def test_require_role_returns_role():
    assert require_role(SessionUser(email="a@b.c", role="DONOR"), [Role.DONOR]) == "DONOR"
    assert require_role(SessionUser(email="a@b.c", role="ADMIN"), [Role.DONOR, Role.ADMIN]) == "ADMIN"


@pytest.mark.parametrize("role", [None, "", "NGO", "donor"])
def test_require_role_forbidden(role):
    with pytest.raises(Forbidden):
        require_role(SessionUser(email="a@b.c", role=role), [Role.DONOR])


def test_require_role_without_session():
    with pytest.raises(Forbidden):
        require_role(None, [Role.DONOR])


def test_require_session_empty(app):
    with app.test_request_context("/"):
        with pytest.raises(Unauthenticated):
            require_session()


def test_require_session_after_login(app, donor):
    with donor.session_transaction() as sess:
        assert sess["user_email"] == "donor@example.org"
        assert sess["user_role"] == "DONOR"
