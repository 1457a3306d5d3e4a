"""Public category and tag API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from gallery.database import get_session
from gallery.schemas.category import CategoryPageResponse, CategoryResponse
from gallery.schemas.photoset import PhotoSetQuery, SortOrder
from gallery.schemas.tag import TagResponse
from gallery.services.category_service import (
    count_published,
    get_category_by_slug,
    list_categories_with_count,
)
from gallery.services.photoset_service import list_photosets
from gallery.services.tag_service import get_popular_tags
from gallery.utils.pagination import MAX_LIMIT, build_pagination

router = APIRouter(tags=["categories"])


@router.get("/categories", response_model=list[CategoryResponse])
def list_categories(session: Session = Depends(get_session)):
    """All categories with their published photo set counts."""
    return list_categories_with_count(session)


@router.get("/categories/{slug}", response_model=CategoryPageResponse)
def category_page(
    slug: str,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=MAX_LIMIT),
    sort: SortOrder = Query(default=SortOrder.PUBLISHED_AT_DESC),
    session: Session = Depends(get_session),
):
    """A category and one page of its published photo sets."""
    category = get_category_by_slug(slug, session)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")

    items, total = list_photosets(
        PhotoSetQuery(page=page, limit=limit, category=slug, sort=sort), session
    )
    return CategoryPageResponse(
        category=CategoryResponse(
            id=category.id,
            name=category.name,
            slug=category.slug,
            count=count_published(category.id, session),
        ),
        data=items,
        pagination=build_pagination(page, limit, total),
    )


@router.get("/tags", response_model=list[TagResponse])
def list_tags(
    limit: int = Query(default=50, ge=1, le=200),
    session: Session = Depends(get_session),
):
    """Most used tags across published photo sets."""
    return get_popular_tags(session, limit=limit)
