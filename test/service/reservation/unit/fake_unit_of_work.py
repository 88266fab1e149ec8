"""In-memory stand-in for AsyncpgUnitOfWork used by the use case unit tests"""

from unittest.mock import AsyncMock

from src.platform.database.unit_of_work import AbstractUnitOfWork


class FakeUnitOfWork(AbstractUnitOfWork):
    def __init__(self) -> None:
        self.client_command_repo = AsyncMock()
        self.reservation_command_repo = AsyncMock()
        self.entered = 0
        self.committed = False
        self.rolled_back = False

    async def __aenter__(self) -> 'FakeUnitOfWork':
        self.entered += 1
        await super().__aenter__()
        return self

    async def _commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        if not self.committed:
            self.rolled_back = True
