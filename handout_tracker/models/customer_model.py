# handout_tracker/models/customer_model.py
from sqlalchemy import Column, Integer, BigInteger, String, Text, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.sql import func

from handout_tracker.utils.database import Base


class Customer(Base):
    __tablename__ = "customers"

    __table_args__ = (
        CheckConstraint("referred_by IS NULL OR referred_by <> id", name="ck_customers_no_self_referral"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), nullable=False)
    mobile = Column(BigInteger, nullable=False)
    address = Column(Text, nullable=False, default="")
    info = Column(Text, nullable=False, default="")

    referred_by = Column(
        Integer,
        ForeignKey("customers.id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, name={self.name})>"
