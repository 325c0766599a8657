# auth.py
from dataclasses import dataclass
from functools import wraps

from flask import g, session

from errors import Forbidden, Unauthenticated


@dataclass(frozen=True)
class SessionUser:
    email: str
    role: str = None
    user_id: int = None


def start_session(user):
    session.clear()
    session["user_id"] = user.id
    session["user_email"] = user.email
    session["user_role"] = user.role


def end_session():
    session.clear()


def require_session():
    email = session.get("user_email")
    if not email:
        raise Unauthenticated()
    return SessionUser(email=email, role=session.get("user_role"), user_id=session.get("user_id"))


def require_role(current, allowed):
    """Return the session's role, or raise Forbidden if it is not allowed."""
    role = getattr(current, "role", None)
    if not role or role not in {getattr(r, "value", r) for r in allowed}:
        raise Forbidden()
    return role


def roles_required(*roles):
    """View decorator: session plus role check, the current user lands on ``g.session_user``."""
    def decorator(f):
        @wraps(f)
        def wrapped(*args, **kwargs):
            current = require_session()
            require_role(current, roles)
            g.session_user = current
            return f(*args, **kwargs)
        return wrapped
    return decorator
