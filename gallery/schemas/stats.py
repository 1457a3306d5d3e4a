"""Admin dashboard schemas."""

from pydantic import BaseModel

from gallery.schemas.photoset import PhotoSetListItem


class TopCategory(BaseModel):
    id: int
    name: str
    slug: str
    count: int
    total_views: int


class DashboardStats(BaseModel):
    total_photosets: int
    total_categories: int
    total_views: int
    top_photosets: list[PhotoSetListItem]
    top_categories: list[TopCategory]
