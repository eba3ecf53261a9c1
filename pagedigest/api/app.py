"""FastAPI application factory.

Lifespan
--------
On startup the app opens one connection per store (shared across all
requests via ``request.app.state.summaries_db`` and
``request.app.state.contents_db``) and initialises both schemas.  On
shutdown it closes them cleanly.

Routers
-------
    /scrape, /summarize     — fetch, extract and summarise a page
    /save-summary           — persist a finished digest to both stores
    /summaries, /test-db    — stored summaries and per-store health
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pagedigest import __version__
from pagedigest.config import configure_logging, settings
from pagedigest.db import get_connection, init_contents_db, init_summaries_db

from pagedigest.api.routers import digest as digest_router
from pagedigest.api.routers import storage as storage_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open both stores on startup and close them on shutdown."""
    summaries_db = get_connection(settings.summaries_db_path)
    contents_db = get_connection(settings.contents_db_path)
    init_summaries_db(summaries_db)
    init_contents_db(contents_db)
    app.state.summaries_db = summaries_db
    app.state.contents_db = contents_db
    try:
        yield
    finally:
        summaries_db.close()
        contents_db.close()


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure_logging()

    app = FastAPI(
        title="Page Digest API",
        description=(
            "Extracts the main text of a web page, produces a short extractive "
            "summary with an Urdu translation, and stores the result in a "
            "summary store and a full-text store."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(digest_router.router, tags=["digest"])
    app.include_router(storage_router.router, tags=["storage"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn pagedigest.api.app:app --reload
app = create_app()
