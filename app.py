# ============================
# IMPORTS
# ============================
import os

from flask import Flask

from accounts import accounts_bp, bcrypt
from config import Config
from donations import donations_bp
from events import socketio
from models import db


# ============================
# APP FACTORY
# ============================
def create_app(config=Config):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite:///"):
        os.makedirs(app.instance_path, exist_ok=True)

    db.init_app(app)
    bcrypt.init_app(app)
    socketio.init_app(app, async_mode=app.config["SOCKETIO_ASYNC_MODE"])

    app.register_blueprint(accounts_bp)
    app.register_blueprint(donations_bp)

    with app.app_context():
        db.create_all()

    return app


# ============================
# RUN
# ============================
def allow_dev_server(app):
    """The Werkzeug server is only acceptable in debug or without eventlet/gevent."""
    return app.debug or socketio.async_mode == "threading"


if __name__ == "__main__":
    app = create_app()
    app.logger.info("foodlots server starting on port %s", app.config["PORT"])
    socketio.run(app, host="0.0.0.0", port=app.config["PORT"], allow_unsafe_werkzeug=allow_dev_server(app))
