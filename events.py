# events.py
from flask import current_app, session
from flask_socketio import SocketIO, join_room

from models import Role

NGO_ROOM = "ngo"

socketio = SocketIO()


@socketio.on("connect")
def on_connect(auth=None):
    if not session.get("user_email"):
        return False
    if session.get("user_role") == Role.NGO.value:
        join_room(NGO_ROOM)
    current_app.logger.debug("socket connected for %s", session.get("user_email"))


def announce_donation(donation, lots):
    """Tell connected NGOs that new lots are open for claiming."""
    socketio.emit(
        "donation_posted",
        {"donation": donation.to_public(), "lots": [lot.to_public() for lot in lots]},
        to=NGO_ROOM,
    )
