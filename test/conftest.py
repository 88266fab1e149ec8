"""
Test Configuration and Fixtures

This module provides:
- Test database creation + Alembic migration at session start
- Table cleanup around every integration test
- A connected Database handle per test (one per event loop)

Architecture:
- Unit tests (test/**/unit/): no PostgreSQL, marked `unit` automatically
- Integration tests: real PostgreSQL, skipped when it cannot be reached
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    if worker_id == 'master':
        os.environ['POSTGRES_DB'] = 'reservation_system_test_db'
    else:
        os.environ['POSTGRES_DB'] = f'reservation_system_test_db_{worker_id}'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Pool size settings for tests
    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')
    os.environ.setdefault('ASYNCPG_POOL_MIN_SIZE', '1')
    os.environ.setdefault('ASYNCPG_POOL_MAX_SIZE', '20')


_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Generator  # noqa: E402

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from dotenv import load_dotenv  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import asyncpg  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402
from sqlalchemy.exc import SQLAlchemyError  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from src.platform.config.core_setting import Settings  # noqa: E402
from src.platform.database.db_setting import Database  # noqa: E402


# =============================================================================
# Pytest Hooks: Detect test type and setup accordingly
# =============================================================================
_database_ready: bool | None = None


def _is_unit_path(path: str) -> bool:
    return '/unit/' in path or '\\unit\\' in path


def _is_unit_test_only_run(config: pytest.Config) -> bool:
    markexpr = config.getoption('markexpr', default='')
    if markexpr and 'unit' in str(markexpr) and 'not unit' not in str(markexpr):
        return True

    args = config.args or []
    test_paths = [arg for arg in args if arg and not arg.startswith('-')]
    return bool(test_paths and all(_is_unit_path(path) for path in test_paths))


def pytest_sessionstart(session: pytest.Session) -> None:
    global _database_ready
    if _is_unit_test_only_run(session.config):
        return

    try:
        asyncio.run(_setup_test_database())
        _database_ready = True
    except (OSError, asyncio.TimeoutError, SQLAlchemyError, asyncpg.PostgresError) as e:
        _database_ready = False
        print(f'\n⚠️  PostgreSQL unavailable, integration tests will be skipped: {e}')


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    skip_integration = pytest.mark.skip(reason='PostgreSQL is not reachable')
    for item in items:
        if _is_unit_path(str(item.path)):
            item.add_marker(pytest.mark.unit)
            continue

        item.add_marker(pytest.mark.integration)
        if _database_ready is False:
            item.add_marker(skip_integration)
        else:
            item.fixturenames.append('clean_database')


# =============================================================================
# Database Configuration
# =============================================================================
def _get_db_config() -> dict[str, str]:
    env_file = '.env' if Path('.env').exists() else '.env.example'
    load_dotenv(env_file)

    return {
        'user': os.getenv('POSTGRES_USER', 'postgres'),
        'password': os.getenv('POSTGRES_PASSWORD', 'postgres'),
        'host': os.getenv('POSTGRES_SERVER', 'localhost'),
        'port': os.getenv('POSTGRES_PORT', '5432'),
        'test_db': os.getenv('POSTGRES_DB', 'reservation_system_test_db'),
    }


def _get_test_database_url() -> str:
    cfg = _get_db_config()
    return (
        f'postgresql+asyncpg://{cfg["user"]}:{cfg["password"]}'
        f'@{cfg["host"]}:{cfg["port"]}/{cfg["test_db"]}'
    )


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
async def _setup_test_database() -> None:
    db_url = _get_test_database_url()
    cfg = _get_db_config()

    # Create database if not exists
    postgres_url = db_url.replace(f'/{cfg["test_db"]}', '/postgres')
    engine = create_async_engine(postgres_url, isolation_level='AUTOCOMMIT')
    try:
        async with engine.begin() as conn:
            result = await conn.execute(
                text('SELECT 1 FROM pg_database WHERE datname = :name'),
                {'name': cfg['test_db']},
            )
            if not result.fetchone():
                await conn.execute(text(f'CREATE DATABASE {cfg["test_db"]}'))
    finally:
        await engine.dispose()

    # Reset schema and run migrations
    reset_engine = create_async_engine(db_url)
    try:
        async with reset_engine.begin() as conn:
            await conn.execute(text('DROP SCHEMA public CASCADE'))
            await conn.execute(text('CREATE SCHEMA public'))
    finally:
        await reset_engine.dispose()

    alembic_cfg = Config(str(Path(__file__).parent.parent / 'alembic.ini'))
    alembic_cfg.set_main_option('sqlalchemy.url', db_url)
    # env.py drives its own event loop, so run it off this one
    await asyncio.to_thread(command.upgrade, alembic_cfg, 'head')


async def _clean_all_tables() -> None:
    engine = create_async_engine(_get_test_database_url())
    try:
        async with engine.begin() as conn:
            await conn.execute(text('TRUNCATE reservations, clients RESTART IDENTITY CASCADE'))
    finally:
        await engine.dispose()


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Connected Database handle bound to the current test's event loop"""
    db = Database(settings=Settings())
    await db.connect(warmup=False)
    yield db
    await db.disconnect()


@pytest.fixture
def api_client() -> Generator[TestClient, None, None]:
    """TestClient on the test app; its lifespan wires DI and connects the database"""
    from test_main import app

    with TestClient(app) as client:
        yield client
