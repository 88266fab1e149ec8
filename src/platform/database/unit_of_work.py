"""
Unit of Work Pattern - one asyncpg connection + transaction per use case call

Architecture:
- UoW borrows a connection from the Database handle and opens a transaction
- Command repositories are bound to that connection
- Use cases call commit(); leaving the block without commit rolls back
"""

from __future__ import annotations

import abc
from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, Optional

from asyncpg.transaction import Transaction

from src.platform.database.asyncpg_setting import ASYNCPG_DRIVER_ERRORS
from src.platform.database.db_setting import Database
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from src.service.reservation.app.interface.i_client_command_repo import IClientCommandRepo
    from src.service.reservation.app.interface.i_reservation_command_repo import (
        IReservationCommandRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            outcome = await uow.reservation_command_repo.insert(reservation=...)
            await uow.commit()
    """

    client_command_repo: IClientCommandRepo
    reservation_command_repo: IReservationCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class AsyncpgUnitOfWork(AbstractUnitOfWork):
    def __init__(self, *, database: Database) -> None:
        self.database = database
        self._stack: Optional[AsyncExitStack] = None
        self._transaction: Optional[Transaction] = None
        self._finished = False

    async def __aenter__(self) -> AsyncpgUnitOfWork:
        from src.service.reservation.driven_adapter.repo.client_command_repo_impl import (
            ClientCommandRepoImpl,
        )
        from src.service.reservation.driven_adapter.repo.reservation_command_repo_impl import (
            ReservationCommandRepoImpl,
        )

        self._stack = AsyncExitStack()
        connection = await self._stack.enter_async_context(self.database.acquire())
        self._transaction = connection.transaction()
        self._finished = False
        try:
            await self._transaction.start()
        except ASYNCPG_DRIVER_ERRORS as e:
            await self._stack.aclose()
            raise StorageError(f'Could not open a transaction: {e}') from e

        # Repositories share the transaction's connection
        self.client_command_repo = ClientCommandRepoImpl(connection=connection)
        self.reservation_command_repo = ReservationCommandRepoImpl(connection=connection)

        await super().__aenter__()
        return self

    async def __aexit__(self, *args):
        try:
            await super().__aexit__(*args)
        finally:
            if self._stack is not None:
                await self._stack.aclose()
                self._stack = None

    async def _commit(self) -> None:
        if self._transaction is None or self._finished:
            raise StorageError('No open transaction to commit')
        try:
            await self._transaction.commit()
        except ASYNCPG_DRIVER_ERRORS as e:
            raise StorageError(f'Commit failed: {e}') from e
        finally:
            self._finished = True

    async def rollback(self) -> None:
        if self._transaction is None or self._finished:
            return
        self._finished = True
        try:
            await self._transaction.rollback()
        except ASYNCPG_DRIVER_ERRORS as e:
            # Connection already gone; the server drops the transaction with it
            Logger.base.warning(f'⚠️  [UoW] rollback failed: {e}')
