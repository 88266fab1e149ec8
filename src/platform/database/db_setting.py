"""
Database handle

One explicitly constructed object owns every connection resource:
- SQLAlchemy AsyncEngine + session maker (query repositories)
- asyncpg pool (command repositories and the unit of work)

The DI container holds a single instance; the app lifespan calls
connect()/disconnect(). Nothing here is a module-level global.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

import asyncpg
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.platform.config.core_setting import Settings
from src.platform.database.asyncpg_setting import (
    ASYNCPG_DRIVER_ERRORS,
    create_asyncpg_pool,
    warmup_asyncpg_pool,
)
from src.platform.database.orm_db_setting import create_engine, create_session_maker
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger


class Database:
    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._pool: Optional[asyncpg.Pool] = None

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise StorageError('Database is not connected')
        return self._engine

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise StorageError('Database is not connected')
        return self._pool

    async def connect(self, *, warmup: bool = True) -> None:
        if self.is_connected:
            return

        self._engine = create_engine(self._settings)
        self._session_maker = create_session_maker(self._engine)
        try:
            self._pool = await create_asyncpg_pool(self._settings)
        except ASYNCPG_DRIVER_ERRORS as e:
            await self._engine.dispose()
            self._engine = None
            self._session_maker = None
            raise StorageError(f'Could not connect to PostgreSQL: {e}') from e

        if warmup:
            await warmup_asyncpg_pool(self._pool, target=self._settings.ASYNCPG_POOL_MIN_SIZE)
        Logger.base.info('🗄️  [DB] Database connected')

    async def disconnect(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_maker = None
        Logger.base.info('🗄️  [DB] Database disconnected')

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Session for read-only queries.

        SQLAlchemy and driver errors leave this block as StorageError.
        """
        if self._session_maker is None:
            raise StorageError('Database is not connected')
        async with self._session_maker() as session:
            try:
                yield session
            except (SQLAlchemyError, *ASYNCPG_DRIVER_ERRORS) as e:
                raise StorageError(f'Database query failed: {e}') from e

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[asyncpg.Connection]:
        """Borrow a raw asyncpg connection from the pool."""
        pool = self.pool
        try:
            connection = await pool.acquire()
        except ASYNCPG_DRIVER_ERRORS as e:
            raise StorageError(f'Could not acquire a database connection: {e}') from e
        try:
            yield connection
        finally:
            await pool.release(connection)
