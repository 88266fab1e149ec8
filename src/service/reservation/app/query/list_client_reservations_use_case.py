from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_client_query_repo import IClientQueryRepo
from src.service.reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.reservation.domain.domain_error import ClientNotFoundError
from src.service.reservation.domain.entity.reservation_entity import Reservation


class ListClientReservationsUseCase:
    def __init__(
        self,
        *,
        client_query_repo: IClientQueryRepo,
        reservation_query_repo: IReservationQueryRepo,
    ) -> None:
        self.client_query_repo = client_query_repo
        self.reservation_query_repo = reservation_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        client_query_repo: IClientQueryRepo = Depends(Provide[Container.client_query_repo]),
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
    ) -> Self:
        return cls(
            client_query_repo=client_query_repo, reservation_query_repo=reservation_query_repo
        )

    @Logger.io
    async def execute(self, *, client_id: UUID) -> List[Reservation]:
        """Every reservation of the client, cancelled ones included, ordered by start_time"""
        if not await self.client_query_repo.exists(client_id=client_id):
            raise ClientNotFoundError(client_id)

        return await self.reservation_query_repo.list_by_client(client_id=client_id)
