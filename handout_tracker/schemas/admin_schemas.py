# handout_tracker/schemas/admin_schemas.py
from datetime import datetime
from typing import Optional

from handout_tracker.schemas.common import CamelModel


class LoginRequest(CamelModel):
    username: str = ""
    password: str = ""


class AdminInfo(CamelModel):
    id: int
    username: str
    role: str


class LoginResponse(CamelModel):
    token: str
    expires_at: datetime
    admin: AdminInfo


class RegisterAdminRequest(CamelModel):
    username: str = ""
    password: str = ""
    role: str = ""  # defaults to "admin"


class AdminUpdate(CamelModel):
    """Patch-style: only the fields that are sent get changed."""
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None
    active: Optional[bool] = None


class AdminOut(CamelModel):
    id: int
    username: str
    role: str
    active: bool
    created_at: datetime
    updated_at: datetime
