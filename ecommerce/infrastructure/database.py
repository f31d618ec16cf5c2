# ecommerce/infrastructure/database.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from ecommerce.config import AppConfig


class Base(DeclarativeBase):
    pass


class Database:
    """Owns the engine and hands out sessions for the ecommerce tables."""

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.engine = engine
        self.session_factory = session_factory or async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )
        self.logger = logger or logging.getLogger(__name__)

    async def connect(self) -> None:
        """Create the customer, product and order tables if they are missing."""
        import ecommerce.infrastructure.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        self.logger.info(
            f"Schema ready on {self.engine.url.render_as_string(hide_password=True)}: "
            f"{', '.join(sorted(Base.metadata.tables))}"
        )

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        self.logger.info("Schema dropped")

    async def disconnect(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise


def create_database(config: AppConfig, logger: Optional[logging.Logger] = None) -> Database:
    engine = create_async_engine(config.DATABASE_URL, echo=config.DATABASE_ECHO)
    return Database(engine, logger=logger)
