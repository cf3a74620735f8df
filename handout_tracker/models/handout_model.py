# handout_tracker/models/handout_model.py
from sqlalchemy import (
    Column,
    Integer,
    String,
    Boolean,
    DateTime,
    Numeric,
    ForeignKey,
    Index,
)
from sqlalchemy.sql import func

from handout_tracker.utils.database import Base


class Handout(Base):
    __tablename__ = "handouts"

    __table_args__ = (
        Index("ix_handouts_customer_date", "customer_id", "date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)

    # free text, ACTIVE unless told otherwise
    status = Column(String(30), nullable=False, server_default="ACTIVE", default="ACTIVE")
    bond = Column(Boolean, nullable=False, server_default="true", default=True)

    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
