# seed_admin.py
"""Create the ADMIN account, or reset its password.

Registration only hands out DONOR and NGO roles, so this is the way in for
operators::

    python seed_admin.py admin@example.org 's3cret'

Falls back to ADMIN_EMAIL / ADMIN_PASSWORD from the environment.
"""
import os
import sys

from accounts import hash_password
from app import create_app
from models import Role, User, db


def seed_admin(email, password):
    """Returns (user, created)."""
    u = User.query.filter_by(email=email).first()
    created = u is None
    if created:
        u = User(email=email, role=Role.ADMIN.value)
        db.session.add(u)
    u.role = Role.ADMIN.value
    u.password_hash = hash_password(password)
    db.session.commit()
    return u, created


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    email = argv[0] if len(argv) > 0 else os.getenv("ADMIN_EMAIL")
    password = argv[1] if len(argv) > 1 else os.getenv("ADMIN_PASSWORD")
    if not email or not password:
        print("usage: seed_admin.py EMAIL PASSWORD (or set ADMIN_EMAIL / ADMIN_PASSWORD)")
        return 2

    app = create_app()
    with app.app_context():
        u, created = seed_admin(email, password)
        if created:
            print(f"[OK] Created admin '{u.email}'")
        else:
            print(f"[OK] Reset password for '{u.email}' (role now {u.role})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
