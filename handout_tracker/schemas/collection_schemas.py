# handout_tracker/schemas/collection_schemas.py
from datetime import datetime
from typing import Optional

from handout_tracker.schemas.common import CamelModel


class CollectionBase(CamelModel):
    amount: float = 0
    date: Optional[datetime] = None
    handout_id: int = 0


class CollectionCreate(CollectionBase):
    pass


class CollectionUpdate(CollectionBase):
    pass


class CollectionOut(CamelModel):
    id: int
    amount: float
    date: datetime
    handout_id: int
    created_at: datetime
    updated_at: datetime
