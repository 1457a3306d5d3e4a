"""Database connection and initialization."""

import logging

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine, func, select

from gallery.config import settings

# Import all models so SQLModel registers them
import gallery.models  # noqa: F401
from gallery.models.category import Category

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    ("Portrait", "portrait"),
    ("Landscape", "landscape"),
    ("Street Fashion", "street-fashion"),
    ("Art Photography", "art-photography"),
    ("Others", "others"),
]


def create_db_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    """Build an engine with foreign key enforcement on every SQLite connection."""
    connect_args = kwargs.pop("connect_args", {"check_same_thread": False})
    db_engine = create_engine(url, echo=echo, connect_args=connect_args, **kwargs)

    @event.listens_for(db_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return db_engine


engine = create_db_engine(settings.database_url, echo=settings.debug)


def init_db(db_engine: Engine = engine) -> None:
    """Create all tables and indexes, enable WAL mode."""
    SQLModel.metadata.create_all(db_engine)

    # WAL is a no-op for in-memory databases
    with db_engine.connect() as conn:
        conn.exec_driver_sql("PRAGMA journal_mode=WAL")
        conn.exec_driver_sql("PRAGMA synchronous=NORMAL")
        conn.commit()


def seed_defaults(session: Session) -> int:
    """Insert the default categories when the category table is empty.

    Returns the number of categories inserted.
    """
    existing = session.exec(select(func.count()).select_from(Category)).one()
    if existing:
        return 0

    for name, slug in DEFAULT_CATEGORIES:
        session.add(Category(name=name, slug=slug))
    session.commit()
    logger.info("Inserted %d default categories", len(DEFAULT_CATEGORIES))
    return len(DEFAULT_CATEGORIES)


def get_session():
    """FastAPI dependency: yields a database session."""
    with Session(engine) as session:
        yield session
