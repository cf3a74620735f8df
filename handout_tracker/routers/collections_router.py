# handout_tracker/routers/collections_router.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import exists
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette import status

from handout_tracker.core.deps import get_current_admin
from handout_tracker.core.errors import NotFoundError
from handout_tracker.core.messages import (
    COLLECTION_CREATED_MSG,
    COLLECTION_DELETED_MSG,
    COLLECTION_NOT_FOUND_MSG,
    COLLECTION_UPDATED_MSG,
    HANDOUT_NOT_FOUND_MSG,
    SUCCESS_MSG,
)
from handout_tracker.models.collection_model import Collection
from handout_tracker.schemas import (
    CollectionCreate,
    CollectionOut,
    CollectionUpdate,
    DataResp,
    MessageResp,
)
from handout_tracker.utils.database import get_db, is_foreign_key_violation
from handout_tracker.utils.validators import validate_collection

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/collections",
    tags=["Collections"],
    dependencies=[Depends(get_current_admin)],
)


def get_collection_or_404(db: Session, collection_id: int) -> Collection:
    collection = db.query(Collection).filter(Collection.id == collection_id).first()
    if not collection:
        raise NotFoundError(COLLECTION_NOT_FOUND_MSG)
    return collection


def _raise_missing_handout(db: Session, exc: IntegrityError) -> None:
    db.rollback()
    if is_foreign_key_violation(exc):
        raise NotFoundError(HANDOUT_NOT_FOUND_MSG)
    raise exc


# CREATE
@router.post("", response_model=DataResp[CollectionOut], status_code=status.HTTP_201_CREATED)
def create_collection(payload: CollectionCreate, db: Session = Depends(get_db)):
    validate_collection(payload)

    collection = Collection(
        date=payload.date,
        amount=payload.amount,
        handout_id=payload.handout_id,
    )
    db.add(collection)
    try:
        db.commit()
    except IntegrityError as exc:
        _raise_missing_handout(db, exc)
    db.refresh(collection)
    return {"data": collection, "message": COLLECTION_CREATED_MSG}


# READ ALL
@router.get("", response_model=DataResp[list[CollectionOut]])
def list_collections(db: Session = Depends(get_db)):
    collections = db.query(Collection).order_by(Collection.id.desc()).all()
    return {"data": collections, "message": SUCCESS_MSG}


# READ ONE
@router.get("/{collection_id}", response_model=DataResp[CollectionOut])
def get_collection(collection_id: int, db: Session = Depends(get_db)):
    collection = get_collection_or_404(db, collection_id)
    return {"data": collection, "message": SUCCESS_MSG}


# UPDATE (full row)
@router.put("/{collection_id}", response_model=DataResp[CollectionOut])
def update_collection(collection_id: int, payload: CollectionUpdate, db: Session = Depends(get_db)):
    validate_collection(payload)

    if not db.query(exists().where(Collection.id == collection_id)).scalar():
        raise NotFoundError(COLLECTION_NOT_FOUND_MSG)

    try:
        updated = (
            db.query(Collection)
            .filter(Collection.id == collection_id)
            .update(
                {
                    Collection.date: payload.date,
                    Collection.amount: payload.amount,
                    Collection.handout_id: payload.handout_id,
                },
                synchronize_session=False,
            )
        )
    except IntegrityError as exc:
        _raise_missing_handout(db, exc)

    if not updated:
        db.rollback()
        raise NotFoundError(COLLECTION_NOT_FOUND_MSG)

    db.commit()
    collection = get_collection_or_404(db, collection_id)
    return {"data": collection, "message": COLLECTION_UPDATED_MSG}


# DELETE
@router.delete("/{collection_id}", response_model=MessageResp)
def delete_collection(collection_id: int, db: Session = Depends(get_db)):
    deleted = (
        db.query(Collection)
        .filter(Collection.id == collection_id)
        .delete(synchronize_session=False)
    )
    db.commit()

    if not deleted:
        raise NotFoundError(COLLECTION_NOT_FOUND_MSG)

    return {"message": COLLECTION_DELETED_MSG}
