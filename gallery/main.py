"""Gallery Server - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session

from gallery.config import settings
from gallery.database import engine, init_db, seed_defaults
from gallery.services.auth_service import ensure_default_admin

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables, default categories and the bootstrap admin on startup."""
    init_db(engine)
    with Session(engine) as session:
        seed_defaults(session)
        ensure_default_admin(session)
    logger.info("%s ready", settings.site_name)

    yield

    engine.dispose()


app = FastAPI(
    title=settings.site_name,
    description="Photo set gallery with an admin console",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)

# --- Register API routers ---
from gallery.api.admin import router as admin_router  # noqa: E402
from gallery.api.categories import router as categories_router  # noqa: E402
from gallery.api.photosets import router as photosets_router  # noqa: E402
from gallery.api.system import router as system_router  # noqa: E402

API_PREFIX = "/api"

app.include_router(photosets_router, prefix=API_PREFIX)
app.include_router(categories_router, prefix=API_PREFIX)
app.include_router(system_router, prefix=API_PREFIX)
app.include_router(admin_router)


@app.get("/")
def root():
    """Server info."""
    return {
        "name": settings.site_name,
        "version": "1.0.0",
        "endpoints": {
            "photosets": f"{API_PREFIX}/photosets",
            "categories": f"{API_PREFIX}/categories",
            "tags": f"{API_PREFIX}/tags",
            "hot": f"{API_PREFIX}/hot",
            "health": f"{API_PREFIX}/health",
        },
    }


def main():
    """Run the server with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run("gallery.main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
