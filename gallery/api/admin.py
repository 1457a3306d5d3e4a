"""Admin console API endpoints: login and photo set / category / tag management."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from gallery.api.deps import get_current_admin, get_session_tokens
from gallery.database import get_session
from gallery.errors import ConflictError, ValidationError
from gallery.models.admin import AdminUser
from gallery.schemas.auth import (
    AdminProfile,
    LoginRequest,
    LoginResponse,
    PasswordChangeRequest,
)
from gallery.schemas.category import (
    CategoryCreateRequest,
    CategoryCreateResponse,
    CategoryResponse,
    CategoryUpdateRequest,
)
from gallery.schemas.photoset import (
    AdminPhotoSetDetail,
    AdminPhotoSetListResponse,
    AdminPhotoSetQuery,
    PhotoSetCreateRequest,
    PhotoSetCreateResponse,
    PhotoSetStatus,
    PhotoSetUpdateRequest,
    SortOrder,
)
from gallery.schemas.stats import DashboardStats
from gallery.schemas.tag import TagDeleteResponse, TagResponse
from gallery.services.auth_service import authenticate_admin, change_password
from gallery.services.category_service import (
    create_category,
    delete_category,
    list_categories_with_count,
    update_category,
)
from gallery.services.photoset_service import (
    create_photoset,
    delete_photoset,
    get_photoset_by_id,
    list_admin_photosets,
    update_photoset,
)
from gallery.services.stats_service import get_dashboard_stats
from gallery.services.tag_service import delete_tag, get_all_tags, get_popular_tags
from gallery.utils.pagination import MAX_LIMIT, build_pagination
from gallery.utils.security import SessionTokens, verify_password

router = APIRouter(prefix="/admin", tags=["admin"])


# --- Login ---

@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    session: Session = Depends(get_session),
    tokens: SessionTokens = Depends(get_session_tokens),
):
    """Verify admin credentials and issue a session token."""
    admin = authenticate_admin(request.username, request.password, session)
    if not admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    return LoginResponse(
        token=tokens.issue(admin.id, admin.username),
        expires_in=int(tokens.lifetime.total_seconds()),
        user=AdminProfile(id=admin.id, username=admin.username),
    )


@router.get("/api/me", response_model=AdminProfile)
def me(admin: AdminUser = Depends(get_current_admin)):
    return AdminProfile(id=admin.id, username=admin.username)


@router.post("/api/password", status_code=status.HTTP_204_NO_CONTENT)
def update_password(
    request: PasswordChangeRequest,
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    """Change the current admin's password."""
    if not verify_password(request.current_password, admin.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Current password is incorrect",
        )
    change_password(admin, request.new_password, session)


# --- Dashboard ---

@router.get("/api/dashboard-stats", response_model=DashboardStats)
def dashboard_stats(
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    return get_dashboard_stats(session)


# --- Photo sets ---

@router.get("/api/photosets", response_model=AdminPhotoSetListResponse)
def admin_list_photosets(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=MAX_LIMIT),
    category: Optional[str] = Query(default=None),
    tag: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    sort: SortOrder = Query(default=SortOrder.PUBLISHED_AT_DESC),
    status_filter: Optional[PhotoSetStatus] = Query(default=None, alias="status"),
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    """List photo sets of every status."""
    params = AdminPhotoSetQuery(
        page=page,
        limit=limit,
        category=category or None,
        tag=tag or None,
        search=search or None,
        sort=sort,
        status=status_filter,
    )
    items, total = list_admin_photosets(params, session)
    return AdminPhotoSetListResponse(data=items, pagination=build_pagination(page, limit, total))


@router.get("/api/photosets/{photoset_id}", response_model=AdminPhotoSetDetail)
def admin_get_photoset(
    photoset_id: int,
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    photoset = get_photoset_by_id(photoset_id, session)
    if photoset is None:
        raise HTTPException(status_code=404, detail="Photo set not found")
    return photoset


@router.post("/api/photosets", response_model=PhotoSetCreateResponse, status_code=201)
def admin_create_photoset(
    request: PhotoSetCreateRequest,
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    """Create a photo set. The category is created if the name is new."""
    try:
        photoset = create_photoset(request, session)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return PhotoSetCreateResponse(id=photoset.id, slug=photoset.slug)


@router.put("/api/photosets/{photoset_id}", status_code=status.HTTP_204_NO_CONTENT)
def admin_update_photoset(
    photoset_id: int,
    request: PhotoSetUpdateRequest,
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    """Update only the fields present in the request body."""
    try:
        updated = update_photoset(photoset_id, request, session)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not updated:
        raise HTTPException(status_code=404, detail="Photo set not found")


@router.delete("/api/photosets/{photoset_id}", status_code=status.HTTP_204_NO_CONTENT)
def admin_delete_photoset(
    photoset_id: int,
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    if not delete_photoset(photoset_id, session):
        raise HTTPException(status_code=404, detail="Photo set not found")


# --- Categories ---

@router.get("/api/categories", response_model=list[CategoryResponse])
def admin_list_categories(
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    return list_categories_with_count(session)


@router.post("/api/categories", response_model=CategoryCreateResponse, status_code=201)
def admin_create_category(
    request: CategoryCreateRequest,
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    try:
        category = create_category(request.name, session, slug=request.slug)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return CategoryCreateResponse(id=category.id, slug=category.slug)


@router.put("/api/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def admin_update_category(
    category_id: int,
    request: CategoryUpdateRequest,
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    """Rename a category (its slug is regenerated)."""
    try:
        updated = update_category(category_id, request.name, session)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not updated:
        raise HTTPException(status_code=404, detail="Category not found")


@router.delete("/api/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def admin_delete_category(
    category_id: int,
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    """Delete a category. Fails with 409 while photo sets still use it."""
    try:
        deleted = delete_category(category_id, session)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Category not found")


# --- Tags ---

@router.get("/api/tags", response_model=list[TagResponse])
def admin_list_tags(
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    return get_all_tags(session)


@router.get("/api/tags/popular", response_model=list[TagResponse])
def admin_popular_tags(
    limit: int = Query(default=50, ge=1, le=200),
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    return get_popular_tags(session, limit=limit)


@router.delete("/api/tags/{name}", response_model=TagDeleteResponse)
def admin_delete_tag(
    name: str,
    admin: AdminUser = Depends(get_current_admin),
    session: Session = Depends(get_session),
):
    """Remove a tag from every photo set that carries it."""
    if not name.strip():
        raise HTTPException(status_code=400, detail="Tag name must not be empty")
    return TagDeleteResponse(name=name.strip(), updated=delete_tag(name, session))
