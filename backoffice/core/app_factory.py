"""
Application factory for FastAPI.

Handles only FastAPI application creation and configuration.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backoffice.api.exception_handlers import register_exception_handlers
from backoffice.api.middleware.logging_middleware import RequestLoggingMiddleware
from backoffice.api.router import api_router
from backoffice.config.settings import Settings, get_settings
from backoffice.core.container import DependencyContainer
from backoffice.core.lifecycle import LifecycleManager, lifespan
from backoffice.database.async_db import Database

logger = logging.getLogger(__name__)


class AppFactory:
    """
    Factory for creating and configuring FastAPI applications.

    Each configuration step is handled by a dedicated method.
    """

    def __init__(self, settings: Settings | None = None, database: Database | None = None) -> None:
        """
        Args:
            settings: Application settings (uses default if not provided)
            database: Persistence handle; one is built from settings if not provided
        """
        self._settings = settings or get_settings()
        self._database = database or Database(self._settings)

    def create_app(self) -> FastAPI:
        app = self._create_base_app()

        self._configure_state(app)
        self._configure_middleware(app)
        self._configure_exception_handlers(app)
        self._configure_routes(app)
        self._configure_health_endpoint(app)

        logger.info(f"Application created: {self._settings.PROJECT_NAME}")
        return app

    def _create_base_app(self) -> FastAPI:
        return FastAPI(
            title=self._settings.PROJECT_NAME,
            description=self._settings.PROJECT_DESCRIPTION,
            version=self._settings.VERSION,
            docs_url=f"{self._settings.API_V1_STR}/docs" if self._settings.DEBUG else None,
            redoc_url=f"{self._settings.API_V1_STR}/redoc" if self._settings.DEBUG else None,
            lifespan=lifespan,
        )

    def _configure_state(self, app: FastAPI) -> None:
        """Attach the per-application handles the lifespan and dependencies use."""
        app.state.settings = self._settings
        app.state.database = self._database
        app.state.container = DependencyContainer(self._settings)
        app.state.lifecycle = LifecycleManager(self._database, self._settings)

    def _configure_middleware(self, app: FastAPI) -> None:
        """
        Middleware order matters:
        1. CORS (outermost)
        2. Request logging
        """
        app.add_middleware(RequestLoggingMiddleware)
        # Added last so it wraps everything else
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._get_cors_origins(),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        logger.info("Middleware configured")

    def _configure_exception_handlers(self, app: FastAPI) -> None:
        register_exception_handlers(app)

    def _configure_routes(self, app: FastAPI) -> None:
        app.include_router(api_router, prefix=self._settings.API_V1_STR)
        logger.info("Routes configured")

    def _configure_health_endpoint(self, app: FastAPI) -> None:
        @app.get("/health", tags=["health"])
        async def health_check() -> dict[str, str]:
            return {
                "status": "ok",
                "environment": self._settings.ENVIRONMENT,
            }

    def _get_cors_origins(self) -> list[str]:
        if self._settings.DEBUG:
            return ["*"]
        return list(self._settings.CORS_ORIGINS)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Create FastAPI application using the factory.

    Args:
        settings: Optional settings override
        database: Optional pre-built persistence handle
    """
    factory = AppFactory(settings, database)
    return factory.create_app()
