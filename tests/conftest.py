"""Shared pytest fixtures for gallery tests."""

import os
import tempfile

# Setup environment before the app reads its settings
os.environ["GALLERY_DATA_DIR"] = tempfile.mkdtemp()
os.environ["GALLERY_JWT_SECRET"] = "test-secret-with-enough-bytes-for-hs256"
os.environ["GALLERY_BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from gallery.database import create_db_engine, get_session, seed_defaults
from gallery.models.photoset import PhotoSet
from gallery.schemas.photoset import PhotoSetCreateRequest, PhotoSetStatus
from gallery.services.auth_service import ensure_default_admin
from gallery.services.photoset_service import create_photoset


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across connections of one test."""
    test_engine = create_db_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def make_photoset(session):
    """Factory creating a photo set, optionally forcing its view count."""

    def _make(
        title: str,
        category: str = "Landscape",
        tags: list[str] | None = None,
        images: list[str] | None = None,
        status: PhotoSetStatus = PhotoSetStatus.PUBLISHED,
        views: int = 0,
        description: str | None = None,
    ) -> PhotoSet:
        photoset = create_photoset(
            PhotoSetCreateRequest(
                title=title,
                description=description,
                category_name=category,
                tags=tags or [],
                image_urls=images or [f"https://img.example.com/{len(title)}/1.jpg"],
                status=status,
            ),
            session,
        )
        if views:
            photoset.view_count = views
            session.add(photoset)
            session.commit()
            session.refresh(photoset)
        return photoset

    return _make


@pytest.fixture
def client(engine):
    """TestClient bound to the in-memory engine, with default data seeded."""
    from gallery.main import app

    def _get_session():
        with Session(engine) as db_session:
            yield db_session

    with Session(engine) as db_session:
        seed_defaults(db_session)
        ensure_default_admin(db_session)

    app.dependency_overrides[get_session] = _get_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client):
    r = client.post("/admin/login", json={"username": "admin", "password": "admin123"})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['token']}"}
