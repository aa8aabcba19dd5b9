import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, QueuePool, StaticPool

from backoffice.config.settings import Settings

logger = logging.getLogger(__name__)


class Database:
    """
    Explicit persistence handle.

    Owns the async engine and session factory. It is created once per
    application, connected at startup and disposed at shutdown; repositories
    only ever see the sessions it hands out.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._url = settings.async_database_url
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected")
        return self._engine

    def _engine_options(self) -> dict[str, Any]:
        url = make_url(self._url)
        if url.get_backend_name() == "sqlite":
            options: dict[str, Any] = {"echo": self._settings.DB_ECHO}
            if url.database in (None, "", ":memory:"):
                # One shared connection, otherwise every session sees an empty database
                options["poolclass"] = StaticPool
                options["connect_args"] = {"check_same_thread": False}
            return options

        config = dict(self._settings.database_config)
        pool_name = config.pop("poolclass")
        if pool_name == "NullPool":
            logger.info("Creating async database engine for DEVELOPMENT (NullPool)")
            config["poolclass"] = NullPool
        else:
            logger.info("Creating async database engine for PRODUCTION (QueuePool)")
            config["poolclass"] = QueuePool
        return config

    def connect(self) -> None:
        """Create the engine and session factory. Calling it twice is a no-op."""
        if self._engine is not None:
            return
        try:
            self._engine = create_async_engine(self._url, **self._engine_options())
        except Exception as e:
            logger.error(f"Failed to create async database engine: {e}")
            raise
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def dispose(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database engine disposed")

    async def create_all(self) -> None:
        """Create every table known to the models metadata."""
        from backoffice.models.db import Base

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session, rolling back on error."""
        if self._session_factory is None:
            raise RuntimeError("Database is not connected")
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                logger.error(f"Async database error: {e}")
                await session.rollback()
                raise
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a session from the application's database handle.
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
