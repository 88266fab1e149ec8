import asyncio

import asyncpg
from uuid_utils import UUID

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io import Logger


# Errors raised by the driver or the socket underneath it
ASYNCPG_DRIVER_ERRORS: tuple[type[BaseException], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


async def init_connection(conn: asyncpg.Connection) -> None:
    """Initialize each connection with UUID codec"""

    def _uuid_decoder(value: bytes) -> UUID:
        """Decode PostgreSQL UUID binary data to uuid_utils.UUID"""
        return UUID(bytes=value)

    def _uuid_encoder(value: UUID) -> bytes:
        """Encode uuid_utils.UUID (or stdlib uuid.UUID) to binary for PostgreSQL"""
        return value.bytes

    await conn.set_type_codec(
        'uuid',
        encoder=_uuid_encoder,
        decoder=_uuid_decoder,
        schema='pg_catalog',
        format='binary',
    )


async def create_asyncpg_pool(settings: Settings) -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        settings.ASYNCPG_DSN,
        min_size=settings.ASYNCPG_POOL_MIN_SIZE,
        max_size=settings.ASYNCPG_POOL_MAX_SIZE,
        command_timeout=settings.ASYNCPG_POOL_COMMAND_TIMEOUT,
        max_inactive_connection_lifetime=settings.ASYNCPG_POOL_MAX_INACTIVE_LIFETIME,
        init=init_connection,  # Initialize each connection with UUID codec
    )
    Logger.base.info(
        f'🏊 [Pool] asyncpg pool created (min={pool.get_min_size()}, max={pool.get_max_size()})'
    )
    return pool


async def warmup_asyncpg_pool(pool: asyncpg.Pool, *, target: int) -> int:
    """
    Acquire `target` connections and hand them back, so the first requests
    do not pay for connection setup.
    """
    connections: list[asyncpg.Connection] = []
    try:
        for i in range(target):
            try:
                connections.append(await pool.acquire(timeout=5.0))
            except asyncio.TimeoutError:
                Logger.base.warning(f'⚠️  [Pool Warmup] timeout at {i + 1} connections')
                break
    finally:
        for conn in connections:
            await pool.release(conn)

    Logger.base.info(
        f'✅ [Pool Warmup] {len(connections)} connections ready '
        f'(size={pool.get_size()}, idle={pool.get_idle_size()})'
    )
    return len(connections)
