"""Public photo set API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from gallery.database import get_session
from gallery.schemas.photoset import (
    PhotoSetDetail,
    PhotoSetListItem,
    PhotoSetListResponse,
    PhotoSetQuery,
    SortOrder,
)
from gallery.services.photoset_service import (
    get_photoset_by_slug,
    get_top_photosets,
    list_photosets,
)
from gallery.utils.pagination import MAX_LIMIT, build_pagination

router = APIRouter(tags=["photosets"])


@router.get("/photosets", response_model=PhotoSetListResponse)
def list_published(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=MAX_LIMIT),
    category: Optional[str] = Query(default=None, min_length=1, max_length=100),
    tag: Optional[str] = Query(default=None, min_length=1, max_length=50),
    search: Optional[str] = Query(default=None, min_length=1, max_length=200),
    sort: SortOrder = Query(default=SortOrder.PUBLISHED_AT_DESC),
    session: Session = Depends(get_session),
):
    """List published photo sets with filters, sorting and pagination."""
    params = PhotoSetQuery(page=page, limit=limit, category=category, tag=tag, search=search, sort=sort)
    items, total = list_photosets(params, session)
    return PhotoSetListResponse(data=items, pagination=build_pagination(page, limit, total))


@router.get("/photosets/{slug}", response_model=PhotoSetDetail)
def get_photoset(slug: str, session: Session = Depends(get_session)):
    """Photo set detail. Each call counts one view."""
    photoset = get_photoset_by_slug(slug, session)
    if photoset is None:
        raise HTTPException(status_code=404, detail="Photo set not found")
    return photoset


@router.get("/hot", response_model=list[PhotoSetListItem])
def hot_photosets(
    limit: int = Query(default=10, ge=1, le=50),
    session: Session = Depends(get_session),
):
    """Most viewed published photo sets."""
    return get_top_photosets(session, limit=limit)
