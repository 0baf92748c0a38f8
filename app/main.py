"""
CondoPulse FastAPI application entry point.

Pipeline: condominium rows → metrics → pillar scores → alerts → executive summary
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app import __version__
from app.config import get_settings
from app.db.session import check_db_connection, engine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    settings = get_settings()
    logger.info("CondoPulse starting (data_backend=%s)", settings.data_backend)
    try:
        if settings.uses_memory_backend:
            from app.api.deps import get_memory_storage

            get_memory_storage()
        else:
            try:
                check_db_connection()
                logger.info("Database connection verified")
            except Exception as e:
                logger.critical("Database unreachable: %s", e)
                raise
        yield
    finally:
        logger.info("CondoPulse shutting down")
        engine.dispose()
        logger.info("Database connection pool closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Mount API routes
    from app.api.executive import router as executive_router

    app.include_router(
        executive_router, prefix="/api/executive-dashboard", tags=["executive-dashboard"]
    )

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint. Confirms DB connectivity (SQL backend only)."""
        from sqlalchemy import text

        if get_settings().uses_memory_backend:
            return {"status": "ok", "version": __version__, "database": "memory"}
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {
                "status": "ok",
                "version": __version__,
                "database": "connected",
            }
        except Exception:
            from fastapi.responses import JSONResponse

            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "version": __version__,
                    "database": "disconnected",
                },
            )

    return app


app = create_app()
