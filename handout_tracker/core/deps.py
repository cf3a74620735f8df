# handout_tracker/core/deps.py
import logging
from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from handout_tracker.core.config import Settings
from handout_tracker.core.errors import AuthenticationError, AuthorizationError
from handout_tracker.core.messages import (
    ADMIN_INACTIVE_MSG,
    AUTH_FORMAT_MSG,
    AUTH_HEADER_REQUIRED_MSG,
    INVALID_TOKEN_MSG,
)
from handout_tracker.core.security import InvalidTokenError, verify_token
from handout_tracker.models.admin_model import Admin
from handout_tracker.utils.database import get_db

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class AuthenticatedAdmin:
    admin_id: int
    username: str
    role: str


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_admin(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedAdmin:
    header = request.headers.get("Authorization")
    if not header:
        raise AuthenticationError(AUTH_HEADER_REQUIRED_MSG)

    if not header.startswith(BEARER_PREFIX):
        raise AuthenticationError(AUTH_FORMAT_MSG)

    try:
        claims = verify_token(header[len(BEARER_PREFIX):].strip(), settings)
    except InvalidTokenError as exc:
        logger.info("Rejected token on %s: %s", request.url.path, exc)
        raise AuthenticationError(INVALID_TOKEN_MSG)

    # tokens outlive deactivation, so re-check the row every time
    active = db.query(Admin.active).filter(Admin.id == claims.admin_id).scalar()
    if not active:
        raise AuthenticationError(ADMIN_INACTIVE_MSG)

    return AuthenticatedAdmin(admin_id=claims.admin_id, username=claims.username, role=claims.role)


def require_role(role: str, message: str):
    def _check(admin: AuthenticatedAdmin = Depends(get_current_admin)) -> AuthenticatedAdmin:
        if admin.role != role:
            raise AuthorizationError(message)
        return admin

    return _check
