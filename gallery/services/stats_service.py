"""Admin dashboard figures."""

from sqlalchemy import and_
from sqlmodel import Session, col, func, select

from gallery.models.category import Category
from gallery.models.photoset import PhotoSet
from gallery.schemas.stats import DashboardStats, TopCategory
from gallery.services.photoset_service import get_top_photosets

TOP_N = 5


def get_top_categories(session: Session, limit: int = TOP_N) -> list[TopCategory]:
    """Categories ranked by the summed views of their published photo sets."""
    total_views = func.coalesce(func.sum(col(PhotoSet.view_count)), 0)
    rows = session.exec(
        select(Category, func.count(col(PhotoSet.id)), total_views)
        .join(
            PhotoSet,
            and_(col(PhotoSet.category_id) == col(Category.id), col(PhotoSet.status) == "published"),
            isouter=True,
        )
        .group_by(col(Category.id))
        .order_by(total_views.desc(), col(Category.name))
        .limit(limit)
    ).all()
    return [
        TopCategory(id=c.id, name=c.name, slug=c.slug, count=count, total_views=views)
        for c, count, views in rows
    ]


def get_dashboard_stats(session: Session) -> DashboardStats:
    total_photosets = session.exec(
        select(func.count()).select_from(PhotoSet).where(PhotoSet.status == "published")
    ).one()
    total_categories = session.exec(select(func.count()).select_from(Category)).one()
    total_views = session.exec(
        select(func.coalesce(func.sum(PhotoSet.view_count), 0)).where(PhotoSet.status == "published")
    ).one()

    return DashboardStats(
        total_photosets=total_photosets,
        total_categories=total_categories,
        total_views=total_views,
        top_photosets=get_top_photosets(session, limit=TOP_N),
        top_categories=get_top_categories(session, limit=TOP_N),
    )
