# handout_tracker/routers/admins_router.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette import status

from handout_tracker.core.config import ROLES, Settings
from handout_tracker.core.deps import AuthenticatedAdmin, get_current_admin, get_settings, require_role
from handout_tracker.core.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from handout_tracker.core.messages import (
    ADMIN_DELETED_MSG,
    ADMIN_NOT_FOUND_MSG,
    ADMIN_REGISTERED_MSG,
    ADMIN_RETRIEVED_MSG,
    ADMIN_UPDATED_MSG,
    ADMINS_RETRIEVED_MSG,
    CREDENTIALS_REQUIRED_MSG,
    INVALID_ROLE_MSG,
    NO_FIELDS_TO_UPDATE_MSG,
    ONLY_ADMINS_DELETE_MSG,
    ONLY_ADMINS_REGISTER_MSG,
    ONLY_ADMINS_UPDATE_MSG,
    ONLY_ADMINS_VIEW_MSG,
    PASSWORD_TOO_LONG_MSG,
    PASSWORD_TOO_SHORT_MSG,
    SELF_DELETE_MSG,
    SUPER_ADMIN_DELETE_MSG,
    SUPER_ADMIN_MODIFY_MSG,
    SUPER_ADMIN_RENAME_MSG,
    USERNAME_EMPTY_MSG,
    USERNAME_TAKEN_MSG,
)
from handout_tracker.core.security import hash_password, password_too_long
from handout_tracker.models.admin_model import Admin
from handout_tracker.schemas import (
    AdminInfo,
    AdminOut,
    AdminUpdate,
    DataResp,
    MessageResp,
    RegisterAdminRequest,
)
from handout_tracker.utils.database import get_db, is_unique_violation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admins", tags=["Admins"])

MIN_PASSWORD_LENGTH = 6


def get_admin_or_404(db: Session, admin_id: int) -> Admin:
    admin = db.query(Admin).filter(Admin.id == admin_id).first()
    if not admin:
        raise NotFoundError(ADMIN_NOT_FOUND_MSG)
    return admin


def _check_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(PASSWORD_TOO_SHORT_MSG)
    if password_too_long(password):
        raise ValidationError(PASSWORD_TOO_LONG_MSG)


def _check_role(role: str) -> None:
    if role not in ROLES:
        raise ValidationError(INVALID_ROLE_MSG)


def _commit_or_conflict(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_unique_violation(exc):
            raise ConflictError(USERNAME_TAKEN_MSG)
        raise


# REGISTER
@router.post("/register", response_model=DataResp[AdminInfo], status_code=status.HTTP_201_CREATED)
def register_admin(
    payload: RegisterAdminRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current: AuthenticatedAdmin = Depends(require_role("admin", ONLY_ADMINS_REGISTER_MSG)),
):
    username = payload.username.strip()
    if not username or not payload.password:
        raise ValidationError(CREDENTIALS_REQUIRED_MSG)

    _check_password(payload.password)
    role = payload.role or "admin"
    _check_role(role)

    admin = Admin(
        username=username,
        password_hash=hash_password(payload.password, settings.bcrypt_rounds),
        role=role,
        active=True,
    )
    db.add(admin)
    _commit_or_conflict(db)
    db.refresh(admin)

    logger.info("Admin %s registered %r with role %s", current.admin_id, admin.username, role)
    return {"data": admin, "message": ADMIN_REGISTERED_MSG}


# CURRENT
@router.get("/me", response_model=DataResp[AdminOut])
def get_current_admin_info(
    current: AuthenticatedAdmin = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    admin = get_admin_or_404(db, current.admin_id)
    return {"data": admin, "message": ADMIN_RETRIEVED_MSG}


# READ ALL
@router.get("", response_model=DataResp[list[AdminOut]])
def list_admins(
    db: Session = Depends(get_db),
    _: AuthenticatedAdmin = Depends(require_role("admin", ONLY_ADMINS_VIEW_MSG)),
):
    admins = db.query(Admin).order_by(Admin.id.asc()).all()
    return {"data": admins, "message": ADMINS_RETRIEVED_MSG}


# UPDATE (partial)
@router.api_route("/{admin_id}", methods=["PUT", "PATCH"], response_model=DataResp[AdminOut])
def update_admin(
    admin_id: int,
    payload: AdminUpdate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current: AuthenticatedAdmin = Depends(require_role("admin", ONLY_ADMINS_UPDATE_MSG)),
):
    admin = get_admin_or_404(db, admin_id)

    if admin.username == settings.super_admin_username:
        if payload.role is not None or payload.active is not None:
            raise AuthorizationError(SUPER_ADMIN_MODIFY_MSG)
        if payload.username is not None and payload.username.strip() != admin.username:
            raise AuthorizationError(SUPER_ADMIN_RENAME_MSG)

    changes = payload.model_dump(exclude_none=True)
    if not changes:
        raise ValidationError(NO_FIELDS_TO_UPDATE_MSG)

    if payload.username is not None:
        if not payload.username.strip():
            raise ValidationError(USERNAME_EMPTY_MSG)
        admin.username = payload.username.strip()

    if payload.password is not None:
        _check_password(payload.password)
        admin.password_hash = hash_password(payload.password, settings.bcrypt_rounds)

    if payload.role is not None:
        _check_role(payload.role)
        admin.role = payload.role

    if payload.active is not None:
        admin.active = payload.active

    _commit_or_conflict(db)
    db.refresh(admin)

    logger.info("Admin %s updated admin %s (%s)", current.admin_id, admin_id, ", ".join(sorted(changes)))
    return {"data": admin, "message": ADMIN_UPDATED_MSG}


# DELETE
@router.delete("/{admin_id}", response_model=MessageResp)
def delete_admin(
    admin_id: int,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current: AuthenticatedAdmin = Depends(require_role("admin", ONLY_ADMINS_DELETE_MSG)),
):
    admin = get_admin_or_404(db, admin_id)

    if admin.username == settings.super_admin_username:
        raise AuthorizationError(SUPER_ADMIN_DELETE_MSG)

    if current.admin_id == admin_id:
        raise ValidationError(SELF_DELETE_MSG)

    deleted = db.query(Admin).filter(Admin.id == admin_id).delete(synchronize_session=False)
    db.commit()
    if not deleted:
        raise NotFoundError(ADMIN_NOT_FOUND_MSG)

    logger.info("Admin %s deleted admin %s", current.admin_id, admin_id)
    return {"message": ADMIN_DELETED_MSG}
