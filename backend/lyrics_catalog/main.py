from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .api.endpoints import songs, health
from .core.config import Settings, settings as default_settings
from .core.database import DatabaseManager
from .core.errors import register_exception_handlers
from .core.logging import setup_logging
import logging

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None, db: Optional[DatabaseManager] = None) -> FastAPI:
    """Build the API application.

    The database manager is created here, or passed in by the caller, and
    attached to ``app.state`` so request handlers receive it through
    dependencies.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="API for storing songs with their lyrics",
        version=settings.VERSION
    )
    app.state.settings = settings
    app.state.db = db or DatabaseManager(settings=settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_origins != ["*"],
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router, prefix=settings.API_PREFIX, tags=["health"])
    app.include_router(songs.router, prefix=f"{settings.API_PREFIX}/songs", tags=["songs"])

    @app.on_event("startup")
    async def startup_event():
        """Create the songs table on startup"""
        try:
            await app.state.db.initialize()
        except Exception as e:
            logger.error(f"Error during startup: {e}")
            raise

    @app.on_event("shutdown")
    async def shutdown_event():
        """Release the connection pool on shutdown"""
        await app.state.db.dispose()

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": "Welcome to the Lyrics Catalog API",
            "docs_url": "/docs",
            "redoc_url": "/redoc"
        }

    return app

app = create_app()
