"""
Application lifecycle management using the FastAPI lifespan pattern.

Startup connects the application's Database handle (and optionally creates
the schema); shutdown disposes it.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from backoffice.config.settings import Settings
from backoffice.database.async_db import Database

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events for one application instance.
    """

    def __init__(self, database: Database, settings: Settings) -> None:
        self._database = database
        self._settings = settings
        self._initialized = False

    async def startup(self) -> None:
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")

        self._database.connect()
        if self._settings.DB_AUTO_CREATE:
            await self._database.create_all()
            logger.info("Database schema created (DB_AUTO_CREATE)")

        self._verify_configurations()
        await self._verify_database()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await self._database.dispose()
        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    def _verify_configurations(self) -> None:
        if not self._settings.SENTRY_DSN:
            logger.info("SENTRY_DSN not configured - error tracking disabled")
        if self._settings.ENFORCE_ROUTE_ELIGIBILITY:
            logger.info("Delivery route eligibility is enforced on assignment")

    async def _verify_database(self) -> None:
        try:
            await self._database.ping()
            logger.info("Database connectivity verified")
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database connectivity check failed: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)  # with app.state.lifecycle set
    """
    lifecycle: LifecycleManager = app.state.lifecycle

    await lifecycle.startup()

    yield

    await lifecycle.shutdown()
