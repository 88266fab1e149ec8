from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_client_query_repo import IClientQueryRepo
from src.service.reservation.domain.entity.client_entity import Client


class ListClientsUseCase:
    def __init__(self, *, client_query_repo: IClientQueryRepo) -> None:
        self.client_query_repo = client_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        client_query_repo: IClientQueryRepo = Depends(Provide[Container.client_query_repo]),
    ) -> Self:
        return cls(client_query_repo=client_query_repo)

    @Logger.io
    async def execute(self) -> List[Client]:
        return await self.client_query_repo.list_all()
