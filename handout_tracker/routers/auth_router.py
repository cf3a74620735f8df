# handout_tracker/routers/auth_router.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from handout_tracker.core.config import Settings
from handout_tracker.core.deps import get_settings
from handout_tracker.core.errors import AuthenticationError, ValidationError
from handout_tracker.core.messages import (
    ADMIN_INACTIVE_MSG,
    CREDENTIALS_REQUIRED_MSG,
    INVALID_CREDENTIALS_MSG,
    LOGIN_SUCCESS_MSG,
)
from handout_tracker.core.security import issue_token, verify_password
from handout_tracker.models.admin_model import Admin
from handout_tracker.schemas import DataResp, LoginRequest, LoginResponse
from handout_tracker.utils.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/login", response_model=DataResp[LoginResponse])
def admin_login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    if not payload.username or not payload.password:
        raise ValidationError(CREDENTIALS_REQUIRED_MSG)

    admin = db.query(Admin).filter(Admin.username == payload.username).first()
    if not admin:
        logger.info("Login failed for unknown username %r", payload.username)
        raise AuthenticationError(INVALID_CREDENTIALS_MSG)

    if not admin.active:
        logger.info("Login refused for inactive admin %s", admin.id)
        raise AuthenticationError(ADMIN_INACTIVE_MSG)

    if not verify_password(payload.password, admin.password_hash):
        logger.info("Login failed for admin %s: bad password", admin.id)
        raise AuthenticationError(INVALID_CREDENTIALS_MSG)

    token, expires_at = issue_token(admin.id, admin.username, admin.role, settings)
    logger.info("Admin %s logged in", admin.id)

    return {
        "data": {
            "token": token,
            "expires_at": expires_at,
            "admin": {"id": admin.id, "username": admin.username, "role": admin.role},
        },
        "message": LOGIN_SUCCESS_MSG,
    }
