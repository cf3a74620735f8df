# handout_tracker/core/security.py
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Tuple

import bcrypt
import jwt

from handout_tracker.core.config import Settings, TOKEN_ISSUER

logger = logging.getLogger(__name__)

# bcrypt only reads this many bytes; newer releases raise past it
MAX_PASSWORD_BYTES = 72


class InvalidTokenError(Exception):
    """Bad signature, expired, wrong issuer or not a JWT at all."""


@dataclass(frozen=True)
class TokenClaims:
    admin_id: int
    username: str
    role: str
    issued_at: datetime
    expires_at: datetime


# -------------------------------------------------
# Passwords
# -------------------------------------------------
def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str, rounds: int = 14) -> str:
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


# -------------------------------------------------
# Tokens
# -------------------------------------------------
def issue_token(admin_id: int, username: str, role: str, settings: Settings) -> Tuple[str, datetime]:
    now = datetime.now(timezone.utc)
    expires_at = now + timedelta(hours=settings.token_ttl_hours)

    payload = {
        "admin_id": admin_id,
        "username": username,
        "role": role,
        "iat": now,
        "exp": expires_at,
        "iss": TOKEN_ISSUER,
    }
    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algo)
    return token, expires_at


def verify_token(token: str, settings: Settings) -> TokenClaims:
    if not token:
        raise InvalidTokenError("empty token")

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algo],
            issuer=TOKEN_ISSUER,
            options={"require": ["exp", "iat", "iss"]},
        )
    except jwt.PyJWTError as exc:
        raise InvalidTokenError(str(exc)) from exc

    try:
        return TokenClaims(
            admin_id=int(payload["admin_id"]),
            username=str(payload["username"]),
            role=str(payload["role"]),
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidTokenError("missing claims") from exc
