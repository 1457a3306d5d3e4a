"""Security utilities: password hashing, admin session tokens."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from gallery.config import Settings


# --- Password Hashing ---

def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), hashed.encode())
    except ValueError:
        # Not a bcrypt hash
        return False


# --- Session Tokens ---

@dataclass(frozen=True)
class TokenPayload:
    user_id: int
    username: str
    issued_at: datetime
    expires_at: datetime


class SessionTokens:
    """Issues and validates signed admin session tokens.

    The secret is fixed for the lifetime of the instance; rotating it
    invalidates every token issued before.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_days: int = 7):
        if not secret:
            raise ValueError("Session token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self.lifetime = timedelta(days=expire_days)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SessionTokens":
        return cls(settings.jwt_secret, settings.jwt_algorithm, settings.token_expire_days)

    def issue(self, user_id: int, username: str, now: datetime | None = None) -> str:
        issued = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "username": username,
            "iat": issued,
            "exp": issued + self.lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate(self, token: str) -> TokenPayload | None:
        """Return the token's payload, or None if it is tampered, malformed or expired."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
            return TokenPayload(
                user_id=int(payload["sub"]),
                username=str(payload["username"]),
                issued_at=datetime.fromtimestamp(payload["iat"], timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], timezone.utc),
            )
        except (jwt.PyJWTError, KeyError, TypeError, ValueError):
            return None
