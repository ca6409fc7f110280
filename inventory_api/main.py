"""
FastAPI application for the inventory backend.

To run: uvicorn inventory_api.main:create_app --factory
or:     inventory-api
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventory_api.api import api_router
from inventory_api.core.config import Settings, get_settings
from inventory_api.core.database import Store
from inventory_api.core.security import build_password_context
from inventory_api.error_handlers import register_exception_handlers
from inventory_api.logging_config import get_logger, setup_logging
from inventory_api.middleware import RequestLoggingMiddleware

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    app.state.store.create_all()
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    app.state.store.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Settings are loaded from the environment when not given; a missing
    JWT_SECRET_KEY stops startup here.
    """
    settings = settings or get_settings()

    setup_logging(
        settings.log_level,
        settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Inventory backend - staff authentication, categories and products",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan
    )

    # One store and one hashing context for the whole process
    app.state.settings = settings
    app.state.pwd_context = build_password_context(settings.bcrypt_rounds)
    app.state.store = Store(
        settings.database_url,
        echo=settings.db_echo,
        foreign_keys=settings.db_foreign_keys
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    # Health check endpoint (public)
    @app.get("/health", tags=["System"])
    async def health_check():
        """Process liveness. A store outage is reported but does not fail the check."""
        return {
            "status": "ok",
            "database": "ok" if app.state.store.ping() else "unavailable",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    app.include_router(api_router)

    return app


def run() -> None:
    """Console entry point."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "inventory_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
