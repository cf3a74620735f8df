# handout_tracker/schemas/customer_schemas.py
from datetime import datetime
from typing import Optional

from handout_tracker.schemas.common import CamelModel


class CustomerBase(CamelModel):
    # zero values mean "not given"; the router reports which field is wrong
    name: str = ""
    mobile: int = 0
    address: str = ""
    info: str = ""


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(CustomerBase):
    """Full-row replace. referred_by is managed through the referral endpoints."""
    pass


class CustomerOut(CustomerBase):
    id: int
    referred_by: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class ReferralLink(CamelModel):
    referred_by: int = 0
