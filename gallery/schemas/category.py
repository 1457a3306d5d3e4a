"""Category request/response schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from gallery.schemas.photoset import PhotoSetListItem
from gallery.utils.pagination import Pagination


class CategoryCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=100, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class CategoryUpdateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class CategoryResponse(BaseModel):
    id: int
    name: str
    slug: str
    count: int = 0  # published photo sets


class CategoryPageResponse(BaseModel):
    category: CategoryResponse
    data: list[PhotoSetListItem]
    pagination: Pagination


class CategoryCreateResponse(BaseModel):
    id: int
    slug: str
