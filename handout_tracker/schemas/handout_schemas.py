# handout_tracker/schemas/handout_schemas.py
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from handout_tracker.schemas.common import CamelModel


class HandoutBase(CamelModel):
    amount: float = 0
    date: Optional[datetime] = None
    status: Optional[str] = None
    bond: Optional[bool] = None
    customer_id: int = 0

    @field_validator("status", mode="before")
    def empty_to_none(cls, v):
        if v is None:
            return None
        v = str(v).strip()
        return v or None


class HandoutCreate(HandoutBase):
    pass


class HandoutUpdate(HandoutBase):
    pass


class HandoutOut(CamelModel):
    id: int
    amount: float
    date: datetime
    status: str
    bond: bool
    customer_id: int
    created_at: datetime
    updated_at: datetime


class HandoutDetailOut(HandoutOut):
    collected_total: float = 0
    balance: float = 0


class HandoutCustomerOut(CamelModel):
    id: int
    name: str
    mobile: int


class HandoutWithCustomerOut(CamelModel):
    handout: HandoutOut
    customer: HandoutCustomerOut
