# handout_tracker/utils/validators.py
import math
from datetime import datetime
from typing import Optional

from handout_tracker.core.errors import ValidationError
from handout_tracker.core.messages import (
    CUSTOMER_REQUIRED_MSG,
    DATE_REQUIRED_MSG,
    HANDOUT_REQUIRED_MSG,
    INVALID_AMOUNT_MSG,
    INVALID_MOBILE_MSG,
    NAME_REQUIRED_MSG,
)

MOBILE_MIN = 1_000_000_000
MOBILE_MAX = 9_999_999_999

# amount columns are Numeric(12, 2)
AMOUNT_LIMIT = 10_000_000_000

DEFAULT_HANDOUT_STATUS = "ACTIVE"


def is_valid_mobile(mobile: int) -> bool:
    return MOBILE_MIN <= mobile <= MOBILE_MAX


def is_valid_amount(amount: float) -> bool:
    return math.isfinite(amount) and 0 < amount < AMOUNT_LIMIT


def is_zero_date(value: Optional[datetime]) -> bool:
    # 0001-01-01 is what clients send for an unset date
    return value is None or (value.year == 1 and value.month == 1 and value.day == 1)


def validate_customer(payload) -> None:
    if not payload.name or not payload.name.strip():
        raise ValidationError(NAME_REQUIRED_MSG)
    if not is_valid_mobile(payload.mobile):
        raise ValidationError(INVALID_MOBILE_MSG)


def validate_handout(payload) -> None:
    if payload.customer_id == 0:
        raise ValidationError(CUSTOMER_REQUIRED_MSG)
    if is_zero_date(payload.date):
        raise ValidationError(DATE_REQUIRED_MSG)
    if not is_valid_amount(payload.amount):
        raise ValidationError(INVALID_AMOUNT_MSG)


def validate_collection(payload) -> None:
    if payload.handout_id == 0:
        raise ValidationError(HANDOUT_REQUIRED_MSG)
    if is_zero_date(payload.date):
        raise ValidationError(DATE_REQUIRED_MSG)
    if not is_valid_amount(payload.amount):
        raise ValidationError(INVALID_AMOUNT_MSG)


def handout_status(status: Optional[str]) -> str:
    return status or DEFAULT_HANDOUT_STATUS


def handout_bond(bond: Optional[bool]) -> bool:
    return True if bond is None else bond
