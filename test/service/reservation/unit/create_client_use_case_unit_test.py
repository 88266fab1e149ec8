"""Unit tests for CreateClientUseCase"""

import attrs
import pytest

from fake_unit_of_work import FakeUnitOfWork
from src.platform.exception.exceptions import ValidationError
from src.service.reservation.app.command.create_client_use_case import CreateClientUseCase
from src.service.reservation.domain.domain_error import ClientAlreadyExistsError
from src.service.reservation.domain.entity.client_entity import Client


class TestCreateClient:
    @pytest.fixture
    def uow(self) -> FakeUnitOfWork:
        uow = FakeUnitOfWork()

        async def _persist(*, client: Client) -> Client:
            return attrs.evolve(client)

        uow.client_command_repo.create.side_effect = _persist
        return uow

    @pytest.mark.asyncio
    async def test_client_is_persisted_and_committed(self, uow):
        client = await CreateClientUseCase(uow=uow).execute(name='Ada', email='ada@example.com')

        assert client.name == 'Ada'
        assert client.email == 'ada@example.com'
        assert uow.committed is True

    @pytest.mark.asyncio
    async def test_empty_name_is_rejected_before_transaction(self, uow):
        with pytest.raises(ValidationError):
            await CreateClientUseCase(uow=uow).execute(name='', email='ada@example.com')

        assert uow.entered == 0

    @pytest.mark.asyncio
    async def test_duplicate_email_rolls_back(self, uow):
        uow.client_command_repo.create.side_effect = ClientAlreadyExistsError('ada@example.com')

        with pytest.raises(ClientAlreadyExistsError) as exc_info:
            await CreateClientUseCase(uow=uow).execute(name='Ada', email='ada@example.com')

        assert exc_info.value.status_code == 409
        assert uow.committed is False
        assert uow.rolled_back is True
