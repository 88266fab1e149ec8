import asyncpg
from uuid_utils import UUID

from src.platform.database.asyncpg_setting import ASYNCPG_DRIVER_ERRORS
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_client_command_repo import IClientCommandRepo
from src.service.reservation.domain.domain_error import ClientAlreadyExistsError
from src.service.reservation.domain.entity.client_entity import Client


class ClientCommandRepoImpl(IClientCommandRepo):
    def __init__(self, *, connection: asyncpg.Connection) -> None:
        self.connection = connection

    @staticmethod
    def _row_to_entity(row: asyncpg.Record) -> Client:
        return Client(
            id=row['id'],
            name=row['name'],
            email=row['email'],
            created_at=row['created_at'],
        )

    @Logger.io
    async def create(self, *, client: Client) -> Client:
        try:
            row = await self.connection.fetchrow(
                """
                INSERT INTO clients (id, name, email)
                VALUES ($1, $2, $3)
                RETURNING id, name, email, created_at
                """,
                client.id,
                client.name,
                client.email,
            )
        except asyncpg.UniqueViolationError as e:
            raise ClientAlreadyExistsError(client.email) from e
        except ASYNCPG_DRIVER_ERRORS as e:
            raise StorageError(f'Failed to insert client: {e}') from e

        return self._row_to_entity(row)

    @Logger.io
    async def exists(self, *, client_id: UUID) -> bool:
        try:
            found = await self.connection.fetchval(
                'SELECT EXISTS (SELECT 1 FROM clients WHERE id = $1)', client_id
            )
        except ASYNCPG_DRIVER_ERRORS as e:
            raise StorageError(f'Failed to look up client: {e}') from e
        return bool(found)
