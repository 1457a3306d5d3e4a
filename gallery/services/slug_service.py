"""Unique slug allocation against a table's slug column."""

from typing import Optional

from sqlmodel import Session, SQLModel, col, select

from gallery.utils.slug import fallback_slug, slugify


def slug_taken(model: type[SQLModel], slug: str, session: Session, exclude_id: Optional[int] = None) -> bool:
    query = select(model.id).where(model.slug == slug)  # type: ignore[attr-defined]
    if exclude_id is not None:
        query = query.where(col(model.id) != exclude_id)  # type: ignore[attr-defined]
    return session.exec(query).first() is not None


def unique_slug(
    model: type[SQLModel],
    text: str,
    session: Session,
    fallback_prefix: str = "item",
    exclude_id: Optional[int] = None,
) -> str:
    """Slugify ``text`` and append -1, -2, ... until no other row uses it.

    This probe is advisory: the unique index on the slug column is what
    guarantees uniqueness when writers race.
    """
    base = slugify(text) or fallback_slug(fallback_prefix)
    slug = base
    counter = 1
    while slug_taken(model, slug, session, exclude_id):
        slug = f"{base}-{counter}"
        counter += 1
    return slug
