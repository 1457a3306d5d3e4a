"""PhotoSet model."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import CheckConstraint
from sqlmodel import Field, SQLModel

PHOTOSET_STATUSES = ("draft", "published", "archived")


class PhotoSet(SQLModel, table=True):
    __tablename__ = "photosets"
    __table_args__ = (
        CheckConstraint(
            "status IN ('draft', 'published', 'archived')",
            name="ck_photosets_status",
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    category_id: int = Field(foreign_key="categories.id", index=True)
    tags: Optional[str] = None  # comma-delimited
    image_urls: str  # JSON array, first element is the cover
    view_count: int = Field(default=0, index=True)
    published_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: str = Field(default="published", index=True)  # 'draft' | 'published' | 'archived'
    is_featured: bool = Field(default=False, index=True)
    slug: str = Field(unique=True, index=True)
