"""Photo set request/response schemas."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Optional

import pydantic
from pydantic import AfterValidator, BaseModel, Field, HttpUrl, TypeAdapter

from gallery.utils.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, Pagination

MAX_TAGS = 10
MAX_IMAGES = 50

_http_url = TypeAdapter(HttpUrl)


def _check_image_url(value: str) -> str:
    """Accept only absolute http(s) URLs, keeping the string exactly as sent."""
    try:
        _http_url.validate_python(value)
    except pydantic.ValidationError:
        raise ValueError(f"not a valid image URL: {value!r}")
    return value


Tag = Annotated[str, Field(min_length=1, max_length=50)]
ImageUrl = Annotated[str, AfterValidator(_check_image_url)]


class PhotoSetStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class SortOrder(str, Enum):
    PUBLISHED_AT_DESC = "published_at_desc"
    PUBLISHED_AT_ASC = "published_at_asc"
    VIEW_COUNT_DESC = "view_count_desc"
    VIEW_COUNT_ASC = "view_count_asc"


# --- Queries ---

class PhotoSetQuery(BaseModel):
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    category: Optional[str] = None  # category slug
    tag: Optional[str] = None
    search: Optional[str] = None
    sort: SortOrder = SortOrder.PUBLISHED_AT_DESC


class AdminPhotoSetQuery(PhotoSetQuery):
    status: Optional[PhotoSetStatus] = None


# --- Requests ---

class PhotoSetCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    category_name: str = Field(min_length=1, max_length=100)
    tags: list[Tag] = Field(default=[], max_length=MAX_TAGS)
    image_urls: list[ImageUrl] = Field(min_length=1, max_length=MAX_IMAGES)
    is_featured: bool = False
    status: PhotoSetStatus = PhotoSetStatus.PUBLISHED


class PhotoSetUpdateRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    category_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    tags: Optional[list[Tag]] = Field(default=None, max_length=MAX_TAGS)
    image_urls: Optional[list[ImageUrl]] = Field(default=None, min_length=1, max_length=MAX_IMAGES)
    is_featured: Optional[bool] = None
    status: Optional[PhotoSetStatus] = None


# --- Responses ---

class PhotoSetListItem(BaseModel):
    id: int
    title: str
    description: Optional[str]
    category: str
    category_slug: str
    tags: list[str]
    cover_image: str
    view_count: int
    published_at: datetime
    slug: str


class AdminPhotoSetItem(BaseModel):
    id: int
    title: str
    description: Optional[str]
    category: str
    category_slug: str
    tags: list[str]
    image_count: int
    view_count: int
    published_at: datetime
    updated_at: datetime
    status: PhotoSetStatus
    is_featured: bool
    slug: str


class PhotoSetDetail(BaseModel):
    id: int
    title: str
    description: Optional[str]
    category: str
    category_slug: str
    tags: list[str]
    image_urls: list[str]
    view_count: int
    published_at: datetime
    slug: str


class AdminPhotoSetDetail(PhotoSetDetail):
    updated_at: datetime
    status: PhotoSetStatus
    is_featured: bool


class PhotoSetListResponse(BaseModel):
    data: list[PhotoSetListItem]
    pagination: Pagination


class AdminPhotoSetListResponse(BaseModel):
    data: list[AdminPhotoSetItem]
    pagination: Pagination


class PhotoSetCreateResponse(BaseModel):
    id: int
    slug: str
