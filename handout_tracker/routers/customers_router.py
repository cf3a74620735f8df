# handout_tracker/routers/customers_router.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import exists
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette import status

from handout_tracker.core.deps import get_current_admin
from handout_tracker.core.errors import NotFoundError, ReferentialIntegrityError
from handout_tracker.core.messages import (
    CUSTOMER_CREATED_MSG,
    CUSTOMER_DELETED_MSG,
    CUSTOMER_HANDOUT_LINK_ERROR_MSG,
    CUSTOMER_NOT_FOUND_MSG,
    CUSTOMER_REFERRAL_LINK_ERROR_MSG,
    CUSTOMER_UPDATED_MSG,
    REFERRAL_LINKED_SUCCESS_MSG,
    REFERRAL_UNLINKED_SUCCESS_MSG,
    SUCCESS_MSG,
)
from handout_tracker.models.customer_model import Customer
from handout_tracker.models.handout_model import Handout
from handout_tracker.schemas import (
    CustomerCreate,
    CustomerOut,
    CustomerUpdate,
    DataResp,
    HandoutOut,
    MessageResp,
    ReferralLink,
)
from handout_tracker.services import referrals
from handout_tracker.utils.database import get_db, is_foreign_key_violation
from handout_tracker.utils.validators import validate_customer

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/customers",
    tags=["Customers"],
    dependencies=[Depends(get_current_admin)],
)


# CREATE
@router.post("", response_model=DataResp[CustomerOut], status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreate, db: Session = Depends(get_db)):
    validate_customer(payload)

    customer = Customer(
        name=payload.name.strip(),
        mobile=payload.mobile,
        address=payload.address,
        info=payload.info,
    )
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return {"data": customer, "message": CUSTOMER_CREATED_MSG}


# READ ALL
@router.get("", response_model=DataResp[list[CustomerOut]])
def list_customers(db: Session = Depends(get_db)):
    customers = db.query(Customer).order_by(Customer.id.desc()).all()
    return {"data": customers, "message": SUCCESS_MSG}


# READ ONE
@router.get("/{customer_id}", response_model=DataResp[CustomerOut])
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    customer = referrals.get_customer_or_404(db, customer_id)
    return {"data": customer, "message": SUCCESS_MSG}


# UPDATE (full row)
@router.put("/{customer_id}", response_model=DataResp[CustomerOut])
def update_customer(customer_id: int, payload: CustomerUpdate, db: Session = Depends(get_db)):
    validate_customer(payload)

    if not referrals.customer_exists(db, customer_id):
        raise NotFoundError(CUSTOMER_NOT_FOUND_MSG)

    updated = (
        db.query(Customer)
        .filter(Customer.id == customer_id)
        .update(
            {
                Customer.name: payload.name.strip(),
                Customer.mobile: payload.mobile,
                Customer.address: payload.address,
                Customer.info: payload.info,
            },
            synchronize_session=False,
        )
    )
    if not updated:
        db.rollback()
        raise NotFoundError(CUSTOMER_NOT_FOUND_MSG)

    db.commit()
    customer = referrals.get_customer_or_404(db, customer_id)
    return {"data": customer, "message": CUSTOMER_UPDATED_MSG}


# DELETE
@router.delete("/{customer_id}", response_model=MessageResp)
def delete_customer(customer_id: int, db: Session = Depends(get_db)):
    if not referrals.customer_exists(db, customer_id):
        raise NotFoundError(CUSTOMER_NOT_FOUND_MSG)

    try:
        deleted = (
            db.query(Customer)
            .filter(Customer.id == customer_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if not is_foreign_key_violation(exc):
            raise

        has_handouts = db.query(exists().where(Handout.customer_id == customer_id)).scalar()
        message = CUSTOMER_HANDOUT_LINK_ERROR_MSG if has_handouts else CUSTOMER_REFERRAL_LINK_ERROR_MSG
        logger.warning("Delete of customer %s blocked: %s", customer_id, message)
        raise ReferentialIntegrityError(message)

    if not deleted:
        raise NotFoundError(CUSTOMER_NOT_FOUND_MSG)

    return {"message": CUSTOMER_DELETED_MSG}


# =================================================
# Referrals
# =================================================
@router.post("/{customer_id}/referral", response_model=DataResp[CustomerOut])
def link_customer_referral(customer_id: int, payload: ReferralLink, db: Session = Depends(get_db)):
    customer = referrals.link_referral(db, customer_id, payload.referred_by)
    return {"data": customer, "message": REFERRAL_LINKED_SUCCESS_MSG}


@router.delete("/{customer_id}/referral", response_model=DataResp[CustomerOut])
def unlink_customer_referral(customer_id: int, db: Session = Depends(get_db)):
    customer = referrals.unlink_referral(db, customer_id)
    return {"data": customer, "message": REFERRAL_UNLINKED_SUCCESS_MSG}


@router.get("/{customer_id}/referred-by", response_model=DataResp[CustomerOut])
def get_referred_by_customer(customer_id: int, db: Session = Depends(get_db)):
    referrer = referrals.get_referrer(db, customer_id)
    return {"data": referrer, "message": SUCCESS_MSG}


@router.get("/{customer_id}/referrals", response_model=DataResp[list[CustomerOut]])
def list_customer_referrals(customer_id: int, db: Session = Depends(get_db)):
    referred = referrals.list_referrals(db, customer_id)
    return {"data": referred, "message": SUCCESS_MSG}


# =================================================
# Handouts of a customer
# =================================================
@router.get("/{customer_id}/handouts", response_model=DataResp[list[HandoutOut]])
def get_customer_handouts(customer_id: int, db: Session = Depends(get_db)):
    handouts = (
        db.query(Handout)
        .filter(Handout.customer_id == customer_id)
        .order_by(Handout.date.desc())
        .all()
    )
    return {"data": handouts, "message": SUCCESS_MSG}
