# handout_tracker/initial_data.py
import logging

from sqlalchemy.orm import Session

from handout_tracker.core.config import Settings
from handout_tracker.core.security import hash_password
from handout_tracker.models.admin_model import Admin

logger = logging.getLogger(__name__)


def seed_super_admin(db: Session, settings: Settings) -> bool:
    """Create the super admin on an empty admins table. Returns True if one was created."""
    if not settings.admin_password:
        return False

    if db.query(Admin.id).first() is not None:
        return False

    db.add(
        Admin(
            username=settings.super_admin_username,
            password_hash=hash_password(settings.admin_password, settings.bcrypt_rounds),
            role="admin",
            active=True,
        )
    )
    db.commit()
    logger.info("Seeded super admin %r", settings.super_admin_username)
    return True


def init_seed(session_factory, settings: Settings) -> None:
    db = session_factory()
    try:
        seed_super_admin(db, settings)
    finally:
        db.close()
