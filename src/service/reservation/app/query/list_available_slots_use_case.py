from datetime import datetime
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.reservation.domain.availability_domain import find_free_slots, scan_extent
from src.service.reservation.domain.value_object.time_slot import TimeSlot


class ListAvailableSlotsUseCase:
    """
    Read-only availability queries.

    Results are advisory: a slot reported free can be taken by a concurrent
    create before the caller books it.
    """

    def __init__(self, *, reservation_query_repo: IReservationQueryRepo) -> None:
        self.reservation_query_repo = reservation_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_query_repo: IReservationQueryRepo = Depends(
            Provide[Container.reservation_query_repo]
        ),
    ) -> Self:
        return cls(reservation_query_repo=reservation_query_repo)

    @Logger.io
    async def execute(self, *, start_time: datetime, end_time: datetime) -> List[TimeSlot]:
        window = TimeSlot(start=start_time, end=end_time)
        # Reads the whole span the candidates cover, not just the window: a confirmed
        # reservation starting after end_time inside the trailing candidate blocks it
        booked = await self.reservation_query_repo.find_overlapping(window=scan_extent(window))

        free_slots = find_free_slots(window=window, booked=[r.slot for r in booked])
        metrics.record_availability_scan(free_slots=len(free_slots))
        return free_slots

    @Logger.io
    async def is_slot_available(self, *, start_time: datetime, end_time: datetime) -> bool:
        return await self.reservation_query_repo.is_slot_available(
            slot=TimeSlot(start=start_time, end=end_time)
        )
