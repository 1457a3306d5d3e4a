"""Category lookup, creation and deletion."""

import logging

from sqlalchemy import and_
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, func, select

from gallery.errors import ConflictError
from gallery.models.category import Category
from gallery.models.photoset import PhotoSet
from gallery.schemas.category import CategoryResponse
from gallery.services.slug_service import slug_taken, unique_slug

logger = logging.getLogger(__name__)


def _published_join():
    return and_(col(PhotoSet.category_id) == col(Category.id), col(PhotoSet.status) == "published")


def list_categories(session: Session) -> list[Category]:
    """All categories sorted by name. Use list_categories_with_count for photo set counts."""
    return list(session.exec(select(Category).order_by(col(Category.name))).all())


def list_categories_with_count(session: Session) -> list[CategoryResponse]:
    """All categories sorted by name, each with its number of published photo sets."""
    rows = session.exec(
        select(Category, func.count(col(PhotoSet.id)))
        .join(PhotoSet, _published_join(), isouter=True)
        .group_by(col(Category.id))
        .order_by(col(Category.name))
    ).all()
    return [
        CategoryResponse(id=c.id, name=c.name, slug=c.slug, count=count)
        for c, count in rows
    ]


def get_category(category_id: int, session: Session) -> Category | None:
    return session.get(Category, category_id)


def get_category_by_slug(slug: str, session: Session) -> Category | None:
    return session.exec(select(Category).where(Category.slug == slug)).first()


def get_category_by_name(name: str, session: Session) -> Category | None:
    return session.exec(select(Category).where(Category.name == name)).first()


def count_published(category_id: int, session: Session) -> int:
    return session.exec(
        select(func.count()).select_from(PhotoSet).where(
            PhotoSet.category_id == category_id,
            PhotoSet.status == "published",
        )
    ).one()


def get_or_create_category(name: str, session: Session, commit: bool = True) -> Category:
    """Find a category by exact name, inserting it with a fresh slug if absent.

    With ``commit=False`` the new row is only flushed so it joins the
    caller's transaction.
    """
    category = get_category_by_name(name, session)
    if category:
        return category

    category = Category(name=name, slug=unique_slug(Category, name, session, fallback_prefix="category"))
    session.add(category)
    if commit:
        session.commit()
        session.refresh(category)
    else:
        session.flush()
    logger.info("Created category %r (slug=%s)", name, category.slug)
    return category


def create_category(name: str, session: Session, slug: str | None = None) -> Category:
    """Insert a category. Raises ConflictError if the name or slug is taken."""
    if get_category_by_name(name, session):
        raise ConflictError(f"Category name already exists: {name}")
    if slug:
        if slug_taken(Category, slug, session):
            raise ConflictError(f"Category slug already exists: {slug}")
    else:
        slug = unique_slug(Category, name, session, fallback_prefix="category")

    category = Category(name=name, slug=slug)
    session.add(category)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise ConflictError(f"Category already exists: {name}")
    session.refresh(category)
    logger.info("Created category %r (slug=%s)", name, slug)
    return category


def update_category(category_id: int, name: str, session: Session) -> bool:
    """Rename a category and regenerate its slug. False if it does not exist."""
    category = session.get(Category, category_id)
    if not category:
        return False

    other = get_category_by_name(name, session)
    if other and other.id != category_id:
        raise ConflictError(f"Category name already exists: {name}")

    category.name = name
    category.slug = unique_slug(Category, name, session, fallback_prefix="category", exclude_id=category_id)
    session.add(category)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise ConflictError(f"Category already exists: {name}")
    return True


def delete_category(category_id: int, session: Session) -> bool:
    """Delete a category that no photo set references.

    Returns False if it does not exist; raises ConflictError while any photo
    set (of any status) still points at it.
    """
    category = session.get(Category, category_id)
    if not category:
        return False
    name = category.name

    in_use = session.exec(
        select(func.count()).select_from(PhotoSet).where(PhotoSet.category_id == category_id)
    ).one()
    if in_use:
        raise ConflictError(f"Category {name!r} still has {in_use} photo set(s)")

    session.delete(category)
    try:
        session.commit()
    except IntegrityError:
        # A photo set was attached between the check and the delete
        session.rollback()
        raise ConflictError(f"Category {name!r} still has photo sets")
    logger.info("Deleted category %r", name)
    return True
