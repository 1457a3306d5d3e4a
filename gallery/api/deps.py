"""Common API dependencies: session tokens, current admin extraction."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from gallery.config import settings
from gallery.database import get_session
from gallery.models.admin import AdminUser
from gallery.utils.security import SessionTokens

bearer_scheme = HTTPBearer(auto_error=False)

session_tokens = SessionTokens.from_settings(settings)


def get_session_tokens() -> SessionTokens:
    return session_tokens


def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: SessionTokens = Depends(get_session_tokens),
    session: Session = Depends(get_session),
) -> AdminUser:
    """Extract and validate the admin from a bearer session token."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication token",
        )

    payload = tokens.validate(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    admin = session.get(AdminUser, payload.user_id)
    if not admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin not found",
        )
    return admin
