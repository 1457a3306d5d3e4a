"""Photo set listing, lookup and write operations."""

import logging
from datetime import datetime, timezone

from sqlalchemy import or_, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, func, select

from gallery.errors import ConflictError, ValidationError
from gallery.models.category import Category
from gallery.models.photoset import PhotoSet
from gallery.schemas.photoset import (
    AdminPhotoSetDetail,
    AdminPhotoSetItem,
    AdminPhotoSetQuery,
    PhotoSetCreateRequest,
    PhotoSetDetail,
    PhotoSetListItem,
    PhotoSetQuery,
    PhotoSetStatus,
    PhotoSetUpdateRequest,
    SortOrder,
)
from gallery.services.category_service import get_or_create_category
from gallery.services.slug_service import unique_slug
from gallery.utils.codec import decode_images, decode_tags, encode_images, encode_tags
from gallery.utils.pagination import calculate_pagination

logger = logging.getLogger(__name__)

# Inserts retried after losing a slug race to a concurrent writer
SLUG_RETRY_ATTEMPTS = 5

# Ties are broken by id in the same direction
SORT_ORDERS = {
    SortOrder.PUBLISHED_AT_DESC: (col(PhotoSet.published_at).desc(), col(PhotoSet.id).desc()),
    SortOrder.PUBLISHED_AT_ASC: (col(PhotoSet.published_at).asc(), col(PhotoSet.id).asc()),
    SortOrder.VIEW_COUNT_DESC: (col(PhotoSet.view_count).desc(), col(PhotoSet.id).desc()),
    SortOrder.VIEW_COUNT_ASC: (col(PhotoSet.view_count).asc(), col(PhotoSet.id).asc()),
}

_CATEGORY_JOIN = col(PhotoSet.category_id) == col(Category.id)


# --- Row conversion ---

def _list_item(photoset: PhotoSet, category: Category) -> PhotoSetListItem:
    images = decode_images(photoset.image_urls)
    return PhotoSetListItem(
        id=photoset.id,
        title=photoset.title,
        description=photoset.description,
        category=category.name,
        category_slug=category.slug,
        tags=decode_tags(photoset.tags),
        cover_image=images[0] if images else "",
        view_count=photoset.view_count,
        published_at=photoset.published_at,
        slug=photoset.slug,
    )


def _admin_item(photoset: PhotoSet, category: Category) -> AdminPhotoSetItem:
    return AdminPhotoSetItem(
        id=photoset.id,
        title=photoset.title,
        description=photoset.description,
        category=category.name,
        category_slug=category.slug,
        tags=decode_tags(photoset.tags),
        image_count=len(decode_images(photoset.image_urls)),
        view_count=photoset.view_count,
        published_at=photoset.published_at,
        updated_at=photoset.updated_at,
        status=PhotoSetStatus(photoset.status),
        is_featured=bool(photoset.is_featured),
        slug=photoset.slug,
    )


# --- Queries ---

def _apply_filters(query, params: PhotoSetQuery, status: str | None):
    """AND together the status, category, tag and search predicates."""
    if status is not None:
        query = query.where(PhotoSet.status == status)
    if params.category:
        query = query.where(Category.slug == params.category)
    if params.tag:
        # Substring match on the encoded column: "sea" also matches "seaside"
        query = query.where(col(PhotoSet.tags).contains(params.tag, autoescape=True))
    if params.search:
        query = query.where(or_(
            col(PhotoSet.title).contains(params.search, autoescape=True),
            col(PhotoSet.description).contains(params.search, autoescape=True),
            col(PhotoSet.tags).contains(params.search, autoescape=True),
        ))
    return query


def _query_page(params: PhotoSetQuery, status: str | None, session: Session):
    """Fetch one page of (PhotoSet, Category) rows and the unpaginated total."""
    offset, limit = calculate_pagination(params.page, params.limit)

    count_query = _apply_filters(
        select(func.count(col(PhotoSet.id))).select_from(PhotoSet).join(Category, _CATEGORY_JOIN),
        params,
        status,
    )
    total = session.exec(count_query).one()

    query = _apply_filters(select(PhotoSet, Category).join(Category, _CATEGORY_JOIN), params, status)
    query = query.order_by(*SORT_ORDERS[params.sort]).offset(offset).limit(limit)
    rows = session.exec(query).all()
    return rows, total


def list_photosets(params: PhotoSetQuery, session: Session) -> tuple[list[PhotoSetListItem], int]:
    """List published photo sets. Returns (page rows, total matching rows)."""
    rows, total = _query_page(params, PhotoSetStatus.PUBLISHED.value, session)
    return [_list_item(p, c) for p, c in rows], total


def list_admin_photosets(
    params: AdminPhotoSetQuery, session: Session
) -> tuple[list[AdminPhotoSetItem], int]:
    """List photo sets of every status, or of ``params.status`` when given."""
    status = params.status.value if params.status else None
    rows, total = _query_page(params, status, session)
    return [_admin_item(p, c) for p, c in rows], total


def get_top_photosets(session: Session, limit: int = 10) -> list[PhotoSetListItem]:
    """Most viewed published photo sets."""
    items, _ = list_photosets(PhotoSetQuery(page=1, limit=limit, sort=SortOrder.VIEW_COUNT_DESC), session)
    return items


def get_photoset_by_slug(slug: str, session: Session) -> PhotoSetDetail | None:
    """Fetch a photo set for display, counting the view.

    The increment is a single UPDATE ... RETURNING, and the returned detail
    carries the post-increment count.
    """
    bumped = session.exec(
        update(PhotoSet)
        .where(col(PhotoSet.slug) == slug)
        .values(view_count=col(PhotoSet.view_count) + 1)
        .returning(col(PhotoSet.id), col(PhotoSet.view_count))
    ).first()
    if bumped is None:
        return None
    photoset_id, view_count = bumped
    session.commit()

    photoset, category = session.exec(
        select(PhotoSet, Category).join(Category, _CATEGORY_JOIN).where(PhotoSet.id == photoset_id)
    ).one()
    return PhotoSetDetail(
        id=photoset.id,
        title=photoset.title,
        description=photoset.description,
        category=category.name,
        category_slug=category.slug,
        tags=decode_tags(photoset.tags),
        image_urls=decode_images(photoset.image_urls),
        view_count=view_count,
        published_at=photoset.published_at,
        slug=photoset.slug,
    )


def get_photoset_by_id(photoset_id: int, session: Session) -> AdminPhotoSetDetail | None:
    """Admin view of a photo set of any status. Does not count as a view."""
    row = session.exec(
        select(PhotoSet, Category).join(Category, _CATEGORY_JOIN).where(PhotoSet.id == photoset_id)
    ).first()
    if row is None:
        return None
    photoset, category = row
    return AdminPhotoSetDetail(
        id=photoset.id,
        title=photoset.title,
        description=photoset.description,
        category=category.name,
        category_slug=category.slug,
        tags=decode_tags(photoset.tags),
        image_urls=decode_images(photoset.image_urls),
        view_count=photoset.view_count,
        published_at=photoset.published_at,
        updated_at=photoset.updated_at,
        status=PhotoSetStatus(photoset.status),
        is_featured=bool(photoset.is_featured),
        slug=photoset.slug,
    )


# --- Writes ---

def create_photoset(data: PhotoSetCreateRequest, session: Session) -> PhotoSet:
    """Create a photo set, creating its category by name if needed.

    The slug is derived from the title; a taken slug gets -1, -2, ...
    appended. Losing a race on a unique index (slug, or the name of a
    category created concurrently) rolls back and retries.
    """
    if not data.title.strip():
        raise ValidationError("Photo set title must not be empty")
    if not data.image_urls:
        raise ValidationError("A photo set needs at least one image")

    for attempt in range(1, SLUG_RETRY_ATTEMPTS + 1):
        slug = None
        try:
            category = get_or_create_category(data.category_name, session, commit=False)
            slug = unique_slug(PhotoSet, data.title, session, fallback_prefix="set")
            photoset = PhotoSet(
                title=data.title,
                description=data.description or None,
                category_id=category.id,
                tags=encode_tags(data.tags) or None,
                image_urls=encode_images(data.image_urls),
                is_featured=data.is_featured,
                status=PhotoSetStatus(data.status).value,
                slug=slug,
            )
            session.add(photoset)
            session.commit()
        except IntegrityError:
            session.rollback()
            logger.warning(
                "Concurrent write on category %r or slug %s (attempt %d)",
                data.category_name, slug, attempt,
            )
            continue
        session.refresh(photoset)
        logger.info("Created photo set %d (slug=%s)", photoset.id, photoset.slug)
        return photoset

    raise ConflictError(f"Could not allocate a unique slug for {data.title!r}")


def update_photoset(photoset_id: int, data: PhotoSetUpdateRequest, session: Session) -> bool:
    """Apply the fields present in ``data``. False if the photo set does not exist.

    A new title regenerates the slug, skipping slugs held by other photo sets.
    Input is checked before the row is touched, so a rejected update changes
    nothing.
    """
    photoset = session.get(PhotoSet, photoset_id)
    if not photoset:
        return False

    changes = data.model_dump(exclude_unset=True)
    if "image_urls" in changes and not changes["image_urls"]:
        raise ValidationError("A photo set needs at least one image")
    if changes.get("title") is not None and not changes["title"].strip():
        raise ValidationError("Photo set title must not be empty")

    try:
        if changes.get("title") is not None:
            photoset.title = changes["title"]
            photoset.slug = unique_slug(
                PhotoSet, changes["title"], session, fallback_prefix="set", exclude_id=photoset_id
            )
        if "description" in changes:
            photoset.description = changes["description"] or None
        if changes.get("category_name") is not None:
            photoset.category_id = get_or_create_category(changes["category_name"], session, commit=False).id
        if changes.get("tags") is not None:
            photoset.tags = encode_tags(changes["tags"]) or None
        if changes.get("image_urls") is not None:
            photoset.image_urls = encode_images(changes["image_urls"])
        if changes.get("is_featured") is not None:
            photoset.is_featured = changes["is_featured"]
        if changes.get("status") is not None:
            photoset.status = PhotoSetStatus(changes["status"]).value

        photoset.updated_at = datetime.now(timezone.utc)
        session.add(photoset)
        session.commit()
    except IntegrityError:
        session.rollback()
        raise ConflictError(f"Photo set {photoset_id} conflicts with an existing slug or category")
    return True


def delete_photoset(photoset_id: int, session: Session) -> bool:
    photoset = session.get(PhotoSet, photoset_id)
    if not photoset:
        return False
    session.delete(photoset)
    session.commit()
    logger.info("Deleted photo set %d", photoset_id)
    return True
