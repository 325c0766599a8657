# models.py
import enum
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc(dt):
    """Aware datetime -> naive UTC, the form every column stores."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def isoformat(dt):
    if dt is None:
        return None
    return to_utc(dt).isoformat(timespec="milliseconds") + "Z"


class Role(str, enum.Enum):
    DONOR = "DONOR"
    NGO = "NGO"
    ADMIN = "ADMIN"


class DietaryCategory(str, enum.Enum):
    VEG = "VEG"
    NON_VEG = "NON_VEG"
    BOTH = "BOTH"
    JAIN = "JAIN"
    VEGAN = "VEGAN"


class User(db.Model):
    __tablename__ = "user"
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(254), unique=True, index=True, nullable=False)
    password_hash = db.Column(db.String(128), nullable=False)
    role = db.Column(db.String(16), nullable=False)  # DONOR, NGO, ADMIN
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    donations = db.relationship("Donation", backref="donor", lazy=True)

    def to_public(self):
        return {"id": self.id, "email": self.email, "role": self.role}


class Donation(db.Model):
    __tablename__ = "donation"
    id = db.Column(db.Integer, primary_key=True)
    donor_id = db.Column(db.Integer, db.ForeignKey("user.id"), nullable=False, index=True)
    food_type = db.Column(db.String(120), nullable=False)
    servings_total = db.Column(db.Integer, nullable=False)
    dietary_category = db.Column(db.String(16), nullable=False)
    pickup_window_start = db.Column(db.DateTime, nullable=False)
    pickup_window_end = db.Column(db.DateTime, nullable=False)
    expiry_at = db.Column(db.DateTime, nullable=False)
    location_text = db.Column(db.String(200), nullable=True)
    city = db.Column(db.String(60), nullable=True)
    zone = db.Column(db.String(60), nullable=True)
    status = db.Column(db.String(32), default="POSTED", nullable=False)  # claim flow moves it on
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)

    lots = db.relationship(
        "DonationLot",
        backref="donation",
        lazy=True,
        order_by="DonationLot.id",
    )

    def to_public(self, with_created=False):
        out = {
            "id": self.id,
            "status": self.status,
            "foodType": self.food_type,
            "servingsTotal": self.servings_total,
            "dietaryCategory": self.dietary_category,
            "pickupWindowStart": isoformat(self.pickup_window_start),
            "pickupWindowEnd": isoformat(self.pickup_window_end),
            "expiryAt": isoformat(self.expiry_at),
            "city": self.city,
            "zone": self.zone,
        }
        if with_created:
            out["createdAt"] = isoformat(self.created_at)
        return out


class DonationLot(db.Model):
    __tablename__ = "donation_lot"
    id = db.Column(db.Integer, primary_key=True)
    donation_id = db.Column(db.Integer, db.ForeignKey("donation.id"), nullable=False, index=True)
    servings = db.Column(db.Integer, nullable=False)
    status = db.Column(db.String(32), default="OPEN", nullable=False)  # OPEN until claimed
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    __table_args__ = (db.CheckConstraint("servings > 0", name="ck_lot_servings_positive"),)

    def to_public(self):
        return {"id": self.id, "servings": self.servings, "status": self.status}
