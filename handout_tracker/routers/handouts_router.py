# handout_tracker/routers/handouts_router.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import exists, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette import status

from handout_tracker.core.deps import get_current_admin
from handout_tracker.core.errors import NotFoundError, ReferentialIntegrityError
from handout_tracker.core.messages import (
    CUSTOMER_NOT_FOUND_MSG,
    HANDOUT_COLLECTION_LINK_ERROR_MSG,
    HANDOUT_CREATED_MSG,
    HANDOUT_DELETED_MSG,
    HANDOUT_NOT_FOUND_MSG,
    HANDOUT_UPDATED_MSG,
    SUCCESS_MSG,
)
from handout_tracker.models.collection_model import Collection
from handout_tracker.models.customer_model import Customer
from handout_tracker.models.handout_model import Handout
from handout_tracker.schemas import (
    CollectionOut,
    DataResp,
    HandoutCreate,
    HandoutDetailOut,
    HandoutOut,
    HandoutUpdate,
    HandoutWithCustomerOut,
    MessageResp,
)
from handout_tracker.utils.database import get_db, is_foreign_key_violation
from handout_tracker.utils.validators import handout_bond, handout_status, validate_handout

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/handouts",
    tags=["Handouts"],
    dependencies=[Depends(get_current_admin)],
)


# -------------------------------------------------
# Helpers
# -------------------------------------------------
def get_handout_or_404(db: Session, handout_id: int) -> Handout:
    handout = db.query(Handout).filter(Handout.id == handout_id).first()
    if not handout:
        raise NotFoundError(HANDOUT_NOT_FOUND_MSG)
    return handout


def collected_total(db: Session, handout_id: int) -> float:
    total = (
        db.query(func.coalesce(func.sum(Collection.amount), 0))
        .filter(Collection.handout_id == handout_id)
        .scalar()
    )
    return float(total or 0)


def _raise_missing_customer(db: Session, exc: IntegrityError) -> None:
    # customer_id is only checked by the FK, so a bad one surfaces here
    db.rollback()
    if is_foreign_key_violation(exc):
        raise NotFoundError(CUSTOMER_NOT_FOUND_MSG)
    raise exc


# CREATE
@router.post("", response_model=DataResp[HandoutOut], status_code=status.HTTP_201_CREATED)
def create_handout(payload: HandoutCreate, db: Session = Depends(get_db)):
    validate_handout(payload)

    handout = Handout(
        date=payload.date,
        amount=payload.amount,
        status=handout_status(payload.status),
        bond=handout_bond(payload.bond),
        customer_id=payload.customer_id,
    )
    db.add(handout)
    try:
        db.commit()
    except IntegrityError as exc:
        _raise_missing_customer(db, exc)
    db.refresh(handout)
    return {"data": handout, "message": HANDOUT_CREATED_MSG}


# READ ALL (with customer summary)
@router.get("", response_model=DataResp[list[HandoutWithCustomerOut]])
def list_handouts(db: Session = Depends(get_db)):
    rows = (
        db.query(Handout, Customer)
        .join(Customer, Handout.customer_id == Customer.id)
        .order_by(Handout.created_at.desc(), Handout.id.desc())
        .all()
    )
    data = [{"handout": h, "customer": c} for h, c in rows]
    return {"data": data, "message": SUCCESS_MSG}


# READ ONE
@router.get("/{handout_id}", response_model=DataResp[HandoutDetailOut])
def get_handout(handout_id: int, db: Session = Depends(get_db)):
    handout = get_handout_or_404(db, handout_id)
    collected = collected_total(db, handout_id)

    out = HandoutDetailOut.model_validate(handout)
    out.collected_total = collected
    out.balance = round(out.amount - collected, 2)
    return {"data": out, "message": SUCCESS_MSG}


# UPDATE (full row)
@router.put("/{handout_id}", response_model=DataResp[HandoutOut])
def update_handout(handout_id: int, payload: HandoutUpdate, db: Session = Depends(get_db)):
    validate_handout(payload)

    if not db.query(exists().where(Handout.id == handout_id)).scalar():
        raise NotFoundError(HANDOUT_NOT_FOUND_MSG)

    try:
        updated = (
            db.query(Handout)
            .filter(Handout.id == handout_id)
            .update(
                {
                    Handout.date: payload.date,
                    Handout.amount: payload.amount,
                    Handout.status: handout_status(payload.status),
                    Handout.bond: handout_bond(payload.bond),
                    Handout.customer_id: payload.customer_id,
                },
                synchronize_session=False,
            )
        )
    except IntegrityError as exc:
        _raise_missing_customer(db, exc)

    if not updated:
        db.rollback()
        raise NotFoundError(HANDOUT_NOT_FOUND_MSG)

    db.commit()
    handout = get_handout_or_404(db, handout_id)
    return {"data": handout, "message": HANDOUT_UPDATED_MSG}


# DELETE
@router.delete("/{handout_id}", response_model=MessageResp)
def delete_handout(handout_id: int, db: Session = Depends(get_db)):
    try:
        deleted = (
            db.query(Handout)
            .filter(Handout.id == handout_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if not is_foreign_key_violation(exc):
            raise
        logger.warning("Delete of handout %s blocked by collections", handout_id)
        raise ReferentialIntegrityError(HANDOUT_COLLECTION_LINK_ERROR_MSG)

    if not deleted:
        raise NotFoundError(HANDOUT_NOT_FOUND_MSG)

    return {"message": HANDOUT_DELETED_MSG}


# =================================================
# Collections of a handout
# =================================================
@router.get("/{handout_id}/collections", response_model=DataResp[list[CollectionOut]])
def get_handout_collections(handout_id: int, db: Session = Depends(get_db)):
    collections = (
        db.query(Collection)
        .filter(Collection.handout_id == handout_id)
        .order_by(Collection.date.desc())
        .all()
    )
    return {"data": collections, "message": SUCCESS_MSG}
