# accounts.py
from flask import Blueprint, current_app, jsonify, request
from flask_bcrypt import Bcrypt
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

from auth import end_session, start_session
from errors import AppError, Conflict, Internal, Unauthenticated, ValidationError
from models import Role, User, db

accounts_bp = Blueprint("accounts", __name__)
bcrypt = Bcrypt()

SELF_SERVICE_ROLES = (Role.DONOR.value, Role.NGO.value)


def hash_password(password):
    # cost comes from BCRYPT_LOG_ROUNDS
    return bcrypt.generate_password_hash(password).decode("utf-8")


def find_user(email):
    return User.query.filter_by(email=email).first()


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@accounts_bp.errorhandler(AppError)
def handle_app_error(e):
    message = e.code if isinstance(e, Internal) else e.message
    return jsonify({"error": message}), e.status_code


@accounts_bp.errorhandler(Exception)
def handle_unexpected(e):
    if isinstance(e, HTTPException):
        return e
    current_app.logger.exception("unhandled error on %s %s", request.method, request.path)
    return jsonify({"error": Internal.code}), 500


# ==========================================
# REGISTRATION
# ==========================================
@accounts_bp.route("/register", methods=["POST"])
def register():
    data = _json_body()
    email = data.get("email")
    password = data.get("password")
    role = data.get("role")

    if not email or not password or not role:
        raise ValidationError("Missing fields")
    if role not in SELF_SERVICE_ROLES:
        current_app.logger.warning("registration rejected for %s: role %r", email, role)
        raise ValidationError("Invalid role")

    if find_user(email):
        raise Conflict("Email already exists")

    user = User(email=email, password_hash=hash_password(password), role=role)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # lost a race against a concurrent registration
        db.session.rollback()
        raise Conflict("Email already exists") from None

    current_app.logger.info("registered user %s (%s)", user.id, user.role)
    return jsonify(user.to_public()), 201


# ==========================================
# LOGIN / LOGOUT
# ==========================================
@accounts_bp.route("/login", methods=["POST"])
def login():
    data = _json_body()
    email = data.get("email")
    password = data.get("password")
    if not email or not password:
        raise ValidationError("Missing fields")

    user = find_user(email)
    if not user or not bcrypt.check_password_hash(user.password_hash, password):
        current_app.logger.warning("failed login for %s", email)
        raise Unauthenticated("Invalid credentials")

    start_session(user)
    current_app.logger.info("user %s logged in", user.id)
    return jsonify(user.to_public())


@accounts_bp.route("/logout", methods=["POST"])
def logout():
    end_session()
    return jsonify({"ok": True})
