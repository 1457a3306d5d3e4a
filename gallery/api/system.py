"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlmodel import Session, func, select

from gallery.database import get_session
from gallery.models.category import Category

router = APIRouter(tags=["system"])


@router.get("/health")
def health(session: Session = Depends(get_session)):
    """Liveness plus a trivial database round trip."""
    categories = session.exec(select(func.count()).select_from(Category)).one()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": {"connected": True, "categories_count": categories},
    }
