"""Admin user model."""

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class AdminUser(SQLModel, table=True):
    __tablename__ = "admin_users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True)
    password: str  # bcrypt hash
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
