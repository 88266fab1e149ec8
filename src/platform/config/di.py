"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.platform.database.unit_of_work import AsyncpgUnitOfWork
from src.service.reservation.driven_adapter.repo.client_query_repo_impl import ClientQueryRepoImpl
from src.service.reservation.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database handle (SQLAlchemy engine + asyncpg pool), connected by the app lifespan
    database = providers.Singleton(Database, settings=config_service)

    # Command side: one unit of work (connection + transaction) per use case instance
    unit_of_work = providers.Factory(AsyncpgUnitOfWork, database=database)

    # Query side repositories (stateless - use session_factory per call)
    client_query_repo = providers.Singleton(
        ClientQueryRepoImpl, session_factory=database.provided.session
    )
    reservation_query_repo = providers.Singleton(
        ReservationQueryRepoImpl, session_factory=database.provided.session
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
