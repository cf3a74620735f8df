# handout_tracker/services/referrals.py
"""
Referral links between customers.

A customer points at (at most) one referrer through ``customers.referred_by``.
The link never points at the customer itself and always names a customer that
exists at the time it is written.
"""
import logging
from typing import List, Optional

from sqlalchemy import exists, func
from sqlalchemy.orm import Session

from handout_tracker.core.errors import NotFoundError, ValidationError
from handout_tracker.core.messages import (
    CUSTOMER_NOT_FOUND_MSG,
    DANGLING_REFERRER_MSG,
    NO_REFERRER_MSG,
    REFERRER_NOT_FOUND_MSG,
    SAME_CUSTOMER_LINK_MSG,
)
from handout_tracker.models.customer_model import Customer

logger = logging.getLogger(__name__)


class SelfReferenceError(ValidationError):
    default_message = SAME_CUSTOMER_LINK_MSG


class NoReferrerError(NotFoundError):
    default_message = NO_REFERRER_MSG


def customer_exists(db: Session, customer_id: int) -> bool:
    return db.query(exists().where(Customer.id == customer_id)).scalar()


def get_customer_or_404(db: Session, customer_id: int) -> Customer:
    customer = db.query(Customer).filter(Customer.id == customer_id).first()
    if not customer:
        raise NotFoundError(CUSTOMER_NOT_FOUND_MSG)
    return customer


def has_referrer(customer: Customer) -> bool:
    # legacy rows may carry 0 / -1 instead of NULL
    return customer.referred_by is not None and customer.referred_by > 0


def link_referral(db: Session, customer_id: int, referred_by_id: int) -> Customer:
    if customer_id == referred_by_id:
        raise SelfReferenceError()

    customer_found = customer_exists(db, customer_id)
    referrer_found = customer_exists(db, referred_by_id)

    if not customer_found:
        raise NotFoundError(CUSTOMER_NOT_FOUND_MSG)
    if not referrer_found:
        raise NotFoundError(REFERRER_NOT_FOUND_MSG)

    updated = (
        db.query(Customer)
        .filter(Customer.id == customer_id)
        .update(
            {Customer.referred_by: referred_by_id, Customer.updated_at: func.now()},
            synchronize_session=False,
        )
    )
    if not updated:
        # deleted between the check and the update
        db.rollback()
        raise NotFoundError(CUSTOMER_NOT_FOUND_MSG)

    db.commit()
    logger.info("Customer %s linked to referrer %s", customer_id, referred_by_id)
    return get_customer_or_404(db, customer_id)


def unlink_referral(db: Session, customer_id: int) -> Customer:
    customer = get_customer_or_404(db, customer_id)
    if not has_referrer(customer):
        raise NoReferrerError()

    customer.referred_by = None
    db.commit()
    db.refresh(customer)
    return customer


def get_referrer(db: Session, customer_id: int) -> Customer:
    customer = get_customer_or_404(db, customer_id)
    if not has_referrer(customer):
        raise NoReferrerError()

    referrer: Optional[Customer] = (
        db.query(Customer).filter(Customer.id == customer.referred_by).first()
    )
    if not referrer:
        raise NotFoundError(DANGLING_REFERRER_MSG)
    return referrer


def list_referrals(db: Session, customer_id: int) -> List[Customer]:
    if not customer_exists(db, customer_id):
        raise NotFoundError(CUSTOMER_NOT_FOUND_MSG)

    return (
        db.query(Customer)
        .filter(Customer.referred_by == customer_id)
        .order_by(Customer.id.desc())
        .all()
    )
