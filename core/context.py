"""
Application context

Holds the process-wide resources (database engine, session factory, token
service) built once at startup and handed to every request through
``app.state.context``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from auth.jwt import TokenService
from config.settings import Settings
from database.session import build_engine, build_session_factory, create_tables

logger = logging.getLogger(__name__)


class AppContext:
    def __init__(
        self,
        settings: Settings,
        engine: AsyncEngine,
        session_factory: async_sessionmaker[AsyncSession],
        tokens: TokenService,
    ):
        self.settings = settings
        self.engine = engine
        self.session_factory = session_factory
        self.tokens = tokens

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = build_engine(settings.database_url, echo=False)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=build_session_factory(engine),
            tokens=TokenService(settings.jwt_secret),
        )

    async def startup(self) -> None:
        if self.settings.create_tables:
            logger.info("Ensuring database tables exist…")
            await create_tables(self.engine)

    async def shutdown(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed.")

    @asynccontextmanager
    async def lifespan(self, app: Any) -> AsyncIterator[None]:
        """FastAPI lifespan: start before serving, dispose on the way out."""
        await self.startup()
        logger.info("Application ready to accept requests.")
        try:
            yield
        finally:
            await self.shutdown()
