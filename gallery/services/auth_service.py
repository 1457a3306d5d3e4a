"""Admin account business logic: login, bootstrap account, password changes."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, func, select

from gallery.config import settings
from gallery.errors import ConflictError
from gallery.models.admin import AdminUser
from gallery.utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def get_admin_by_username(username: str, session: Session) -> AdminUser | None:
    return session.exec(select(AdminUser).where(AdminUser.username == username)).first()


def create_admin(username: str, password: str, session: Session) -> AdminUser:
    """Create an admin account. Raises ConflictError if the username is taken."""
    if get_admin_by_username(username, session):
        raise ConflictError(f"Admin already exists: {username}")

    admin = AdminUser(username=username, password=hash_password(password, settings.bcrypt_rounds))
    session.add(admin)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise ConflictError(f"Admin already exists: {username}")
    session.refresh(admin)
    return admin


def authenticate_admin(username: str, password: str, session: Session) -> AdminUser | None:
    """Return the admin if the credentials match, else None."""
    admin = get_admin_by_username(username, session)
    if not admin:
        return None
    if not verify_password(password, admin.password):
        logger.info("Failed login for admin %r", username)
        return None
    return admin


def ensure_default_admin(session: Session) -> AdminUser | None:
    """Provision the bootstrap admin if no admin exists yet.

    Returns the created account, or None when admins already exist.
    """
    existing = session.exec(select(func.count()).select_from(AdminUser)).one()
    if existing:
        return None

    admin = create_admin(settings.default_admin_username, settings.default_admin_password, session)
    logger.warning(
        "Created default admin %r with the bootstrap password; change it after first login",
        admin.username,
    )
    return admin


def change_password(admin: AdminUser, new_password: str, session: Session) -> None:
    admin.password = hash_password(new_password, settings.bcrypt_rounds)
    session.add(admin)
    session.commit()
