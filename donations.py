# donations.py
from datetime import datetime, timezone

from flask import Blueprint, current_app, g, jsonify, request
from werkzeug.exceptions import HTTPException

from auth import roles_required
from errors import AppError, Forbidden, Internal, Unauthenticated, ValidationError
from events import announce_donation
from models import Donation, DonationLot, Role, User, db, to_utc
from splitting import split_into_lots
from validators import validate_donation

donations_bp = Blueprint("donations", __name__)


def check_timeline(start, end, expiry, now=None):
    """Pickup window must close before expiry, and expiry must lie ahead."""
    now = now or datetime.now(timezone.utc)
    if not start < end:
        raise ValidationError("pickupWindowStart must be before pickupWindowEnd")
    if not end <= expiry:
        raise ValidationError("pickupWindowEnd must be on/before expiryAt")
    if expiry <= now:
        raise ValidationError("expiryAt must be in the future")


def acting_user(email):
    user = User.query.filter_by(email=email).first()
    if user is None:
        raise Unauthenticated()
    return user


# ============================
# ERROR TRANSLATION
# ============================
@donations_bp.errorhandler(AppError)
def handle_app_error(e):
    message = e.code if isinstance(e, Internal) else e.message
    return jsonify({"ok": False, "error": message}), e.status_code


@donations_bp.errorhandler(Exception)
def handle_unexpected(e):
    if isinstance(e, HTTPException):
        return e
    current_app.logger.exception("unhandled error on %s %s", request.method, request.path)
    return jsonify({"ok": False, "error": Internal.code}), 500


# ============================
# ROUTES
# ============================
@donations_bp.route("/donations", methods=["POST"])
@roles_required(Role.DONOR)
def create_donation():
    data = validate_donation(request.get_json(silent=True))
    check_timeline(data.pickup_window_start, data.pickup_window_end, data.expiry_at)

    # session role may be stale; the stored role decides
    user = acting_user(g.session_user.email)
    if user.role != Role.DONOR.value:
        raise Forbidden()

    lot_sizes = split_into_lots(data.servings_total, data.lot_size)

    try:
        donation = Donation(
            donor_id=user.id,
            food_type=data.food_type,
            servings_total=data.servings_total,
            dietary_category=data.dietary_category.value,
            pickup_window_start=to_utc(data.pickup_window_start),
            pickup_window_end=to_utc(data.pickup_window_end),
            expiry_at=to_utc(data.expiry_at),
            location_text=data.location_text,
            city=data.city,
            zone=data.zone,
        )
        db.session.add(donation)
        db.session.flush()

        db.session.add_all([DonationLot(donation_id=donation.id, servings=s) for s in lot_sizes])
        db.session.flush()

        lots = (
            DonationLot.query.filter_by(donation_id=donation.id)
            .order_by(DonationLot.created_at.asc(), DonationLot.id.asc())
            .all()
        )
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info(
        "donation %s posted by user %s: %s servings in %s lot(s)",
        donation.id, user.id, donation.servings_total, len(lots),
    )
    announce_donation(donation, lots)

    return jsonify({
        "ok": True,
        "donation": donation.to_public(),
        "lots": [lot.to_public() for lot in lots],
    }), 201


@donations_bp.route("/donations", methods=["GET"])
@roles_required(Role.DONOR, Role.ADMIN)
def list_donations():
    user = acting_user(g.session_user.email)

    query = Donation.query
    if user.role != Role.ADMIN.value:
        query = query.filter_by(donor_id=user.id)

    rows = (
        query.order_by(Donation.created_at.desc(), Donation.id.desc())
        .limit(current_app.config["DONATION_LIST_LIMIT"])
        .all()
    )
    return jsonify({"ok": True, "donations": [d.to_public(with_created=True) for d in rows]})
