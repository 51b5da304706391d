"""Main FastAPI application for Folder Store."""

import logging
from contextlib import asynccontextmanager
from typing import Dict, Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .db.connection import db_manager
from .errors import register_exception_handlers
from .errors.problem_details import ServiceUnavailableError
from .middleware.request_logging import RequestLoggingMiddleware
from .pagination import get_token_codec
from .routes import folders_router
from .services.folders import FolderService
from .sources.base import RecordSource
from .sources.factory import build_record_source

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name}")

    # Configure logging level from settings
    logging.getLogger().setLevel(getattr(logging, settings.log_level))

    if db_manager.engine is not None:
        try:
            db_manager.ping()
            logger.info("Database connectivity verified")
        except Exception as e:
            logger.error(f"Failed to connect to database: {e}")
            raise

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    db_manager.close()


def create_app(
    settings: Optional[Settings] = None,
    source: Optional[RecordSource] = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use, the global settings when omitted
        source: Record source to serve, built from settings when omitted
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Read-only folder listings per organization with token-based pagination",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.folder_service = FolderService(
        source=source or build_record_source(settings),
        codec=get_token_codec(settings.token_format),
        max_page_size=settings.max_page_size
    )

    if settings.request_logging:
        app.add_middleware(RequestLoggingMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Register API routes with version prefix
    app.include_router(folders_router, prefix="/v1")

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    def health_check() -> Dict[str, Any]:
        """Health check endpoint with record source connectivity test."""
        status = {
            "status": "healthy",
            "service": settings.app_name,
            "version": VERSION,
            "record_source": settings.record_source
        }

        if db_manager.engine is not None:
            try:
                db_manager.ping()
            except Exception as e:
                logger.error(f"Health check failed: {e}")
                raise ServiceUnavailableError(
                    detail="Database connection failed",
                    database_error=str(e)
                )
            status["database"] = "connected"

        return status

    # Live check endpoint (Kubernetes style)
    @app.get("/live", tags=["Health"])
    def liveness_check() -> Dict[str, str]:
        """Liveness check endpoint."""
        return {
            "status": "alive",
            "service": settings.app_name
        }

    # Root endpoint
    @app.get("/", tags=["Root"])
    def root() -> Dict[str, str]:
        """Root endpoint with API information."""
        return {
            "service": settings.app_name,
            "version": VERSION,
            "docs": "/docs",
            "health": "/health"
        }

    return app


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()

    uvicorn.run(
        "folder_store.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
