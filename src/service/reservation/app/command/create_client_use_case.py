from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.reservation.domain.entity.client_entity import Client


class CreateClientUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, name: str, email: str) -> Client:
        client = Client.create(name=name, email=email)

        async with self.uow:
            created = await self.uow.client_command_repo.create(client=client)
            await self.uow.commit()

        Logger.base.info(f'👤 [CLIENT] created {created.id}')
        return created
