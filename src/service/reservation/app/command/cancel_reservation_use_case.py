from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.reservation.domain.domain_error import ReservationNotFoundError


class CancelReservationUseCase:
    """
    confirmed -> cancelled through a conditional update.

    Cancelling an already cancelled reservation succeeds without changes
    (logged at WARNING). Unknown ids raise ReservationNotFoundError.
    """

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
    async def execute(self, *, reservation_id: UUID) -> None:
        async with self.uow:
            if await self.uow.reservation_command_repo.cancel(reservation_id=reservation_id):
                await self.uow.commit()
                metrics.record_cancellation(result='cancelled')
                Logger.base.info(f'🗑️  [CANCEL] reservation {reservation_id} cancelled')
                return

            if not await self.uow.reservation_command_repo.exists(reservation_id=reservation_id):
                metrics.record_cancellation(result='not_found')
                raise ReservationNotFoundError(reservation_id)

        metrics.record_cancellation(result='already_cancelled')
        Logger.base.warning(f'⚠️  [CANCEL] reservation {reservation_id} was already cancelled')
