# config.py
import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

    # ----- PostgreSQL or SQLite auto configure -----
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or f"sqlite:///{os.path.join(BASE_DIR, 'instance', 'foodlots.db')}"
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    BCRYPT_LOG_ROUNDS = int(os.getenv("BCRYPT_LOG_ROUNDS", 12))
    # pre-hash passwords past bcrypt's 72-byte limit instead of failing
    BCRYPT_HANDLE_LONG_PASSWORDS = True
    DONATION_LIST_LIMIT = int(os.getenv("DONATION_LIST_LIMIT", 30))

    # None lets Flask-SocketIO pick the best installed async server
    SOCKETIO_ASYNC_MODE = os.getenv("SOCKETIO_ASYNC_MODE") or None

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PORT = int(os.getenv("PORT", 5000))


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    BCRYPT_LOG_ROUNDS = 4
    SOCKETIO_ASYNC_MODE = "threading"
    LOG_LEVEL = "DEBUG"
