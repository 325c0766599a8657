# validators.py
import re
from datetime import datetime, timezone
from typing import Optional

import pydantic
from pydantic import BaseModel, Field, field_validator

from errors import ValidationError
from models import DietaryCategory

TIMESTAMP_FIELDS = ("pickup_window_start", "pickup_window_end", "expiry_at")
OPTIONAL_FIELDS = ("location_text", "city", "zone", "lot_size")

# extended ISO 8601 date-time: 'T' separator, mandatory 'Z' or +HH:MM offset
ISO_DATETIME = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?(Z|[+-]\d{2}:\d{2})$"
)
BAD_TIMESTAMP = "must be an ISO 8601 date-time string with timezone (e.g. '2030-01-01T10:00:00Z')"


class CreateDonationRequest(BaseModel):
    food_type: str = Field(..., alias="foodType", min_length=2, max_length=120, strict=True)
    servings_total: int = Field(..., alias="servingsTotal", ge=1, le=5000, strict=True)
    dietary_category: DietaryCategory = Field(..., alias="dietaryCategory")
    pickup_window_start: datetime = Field(..., alias="pickupWindowStart")
    pickup_window_end: datetime = Field(..., alias="pickupWindowEnd")
    expiry_at: datetime = Field(..., alias="expiryAt")
    location_text: Optional[str] = Field(None, alias="locationText", min_length=2, max_length=200, strict=True)
    city: Optional[str] = Field(None, min_length=2, max_length=60, strict=True)
    zone: Optional[str] = Field(None, min_length=2, max_length=60, strict=True)

    # Without lotSize the donation becomes a single lot.
    lot_size: Optional[int] = Field(None, alias="lotSize", ge=1, le=5000, strict=True)

    @field_validator(*OPTIONAL_FIELDS, mode="before")
    @classmethod
    def reject_null(cls, value):
        # optional means "may be omitted", not "may be null"
        if value is None:
            raise ValueError("must be omitted rather than null")
        return value

    @field_validator(*TIMESTAMP_FIELDS, mode="before")
    @classmethod
    def parse_timestamp(cls, value):
        if not isinstance(value, str) or not ISO_DATETIME.match(value):
            raise ValueError(BAD_TIMESTAMP)
        try:
            return datetime.fromisoformat(value).astimezone(timezone.utc)
        except (ValueError, OverflowError):
            raise ValueError(BAD_TIMESTAMP) from None


def _describe(error):
    field = ".".join(str(part) for part in error["loc"]) or "body"
    if error["type"] == "value_error":
        reason = str(error["ctx"]["error"])
    else:
        reason = error["msg"]
    return f"{field}: {reason}"


def validate_donation(body):
    """Check an untyped request body and return the typed request.

    Raises ValidationError listing every violated field.
    """
    if not isinstance(body, dict):
        raise ValidationError("body: must be a JSON object")
    try:
        return CreateDonationRequest.model_validate(body)
    except pydantic.ValidationError as e:
        raise ValidationError([_describe(err) for err in e.errors()]) from None
