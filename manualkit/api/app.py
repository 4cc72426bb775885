"""Manual Kit FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from manualkit.version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed the admin user and starter content on startup."""
    from manualkit.db import session as db_session
    from manualkit.db.seed import seed_default_admin, seed_initial_content

    await db_session.init_db()
    await seed_default_admin(db_session.async_session)
    await seed_initial_content(db_session.async_session)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Manual Kit",
        description="Company intranet manual — pages, FAQ, suggestions and assistant",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check
    @app.get("/health")
    async def health_check():
        return {"status": "ok", "version": __version__}

    # API info
    @app.get("/api")
    async def api_info():
        return {
            "name": "Manual Kit API",
            "version": __version__,
            "description": "Company intranet manual",
            "endpoints": {
                "health": "/health",
                "docs": "/docs",
                "content": "/api/content",
                "search": "/api/search",
            },
        }

    # Register API routes
    from manualkit.api.routes import (
        auth_router,
        users_router,
        pages_router,
        faqs_router,
        search_router,
        suggestions_router,
        media_router,
        assistant_router,
    )

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(pages_router)
    app.include_router(faqs_router)
    app.include_router(search_router)
    app.include_router(suggestions_router)
    app.include_router(media_router)
    app.include_router(assistant_router)

    return app
