"""Page/limit arithmetic shared by every paginated listing."""

import math

from pydantic import BaseModel

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int
    has_next: bool
    has_prev: bool


def calculate_pagination(page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> tuple[int, int]:
    """Convert (page, limit) into (offset, limit). Pages start at 1."""
    return (page - 1) * limit, limit


def page_count(total: int, limit: int) -> int:
    if total <= 0:
        return 0
    return math.ceil(total / limit)


def build_pagination(page: int, limit: int, total: int) -> Pagination:
    pages = page_count(total, limit)
    return Pagination(
        page=page,
        limit=limit,
        total=total,
        pages=pages,
        has_next=page < pages,
        has_prev=page > 1,
    )
