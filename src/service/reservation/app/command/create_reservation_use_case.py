from datetime import datetime
import time
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from uuid_utils import UUID

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.reservation_metrics import metrics
from src.service.reservation.app.dto import ConstraintViolated, ReservationInserted
from src.service.reservation.domain.domain_error import (
    ClientNotFoundError,
    ReservationConflictError,
)
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.enum.reservation_status import ReservationConstraint
from src.service.reservation.domain.value_object.time_slot import TimeSlot


tracer = trace.get_tracer(__name__)


class CreateReservationUseCase:
    """
    Book [start_time, end_time) for a client.

    Flow (one transaction, rolled back on every failure path):
    1. Client must exist, otherwise ClientNotFoundError and nothing is inserted
    2. Insert the confirmed row; no overlap pre-check in the application
    3. The insert outcome decides:
       - inserted -> commit
       - no_overlapping_reservations violated -> ReservationConflictError
       - anything else -> StorageError

    Under N concurrent creates for overlapping intervals, exactly one commits.
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
    async def execute(
        self,
        *,
        client_id: UUID,
        start_time: datetime,
        end_time: datetime,
        notes: Optional[str] = None,
    ) -> Reservation:
        # Rejected before any transaction opens
        slot = TimeSlot(start=start_time, end=end_time)

        with tracer.start_as_current_span('use_case.create_reservation') as span:
            span.set_attribute('client_id', str(client_id))
            span.set_attribute('start_time', slot.start.isoformat())
            span.set_attribute('end_time', slot.end.isoformat())

            started = time.perf_counter()
            result = 'error'
            try:
                reservation = await self._create_in_transaction(
                    client_id=client_id, slot=slot, notes=notes
                )
                result = 'created'
                span.set_attribute('reservation.id', str(reservation.id))
                return reservation
            except ClientNotFoundError:
                result = 'client_not_found'
                raise
            except ReservationConflictError:
                result = 'conflict'
                raise
            finally:
                span.set_attribute('result', result)
                metrics.record_reservation_attempt(
                    result=result, duration=time.perf_counter() - started
                )

    async def _create_in_transaction(
        self, *, client_id: UUID, slot: TimeSlot, notes: Optional[str]
    ) -> Reservation:
        async with self.uow:
            if not await self.uow.client_command_repo.exists(client_id=client_id):
                raise ClientNotFoundError(client_id)

            outcome = await self.uow.reservation_command_repo.insert(
                reservation=Reservation.create(client_id=client_id, slot=slot, notes=notes)
            )

            match outcome:
                case ReservationInserted(reservation=reservation):
                    await self.uow.commit()
                    Logger.base.info(
                        f'📅 [RESERVE] {reservation.id} confirmed for client {client_id} '
                        f'[{slot.start.isoformat()}, {slot.end.isoformat()})'
                    )
                    return reservation
                case ConstraintViolated(constraint=ReservationConstraint.NO_OVERLAP):
                    Logger.base.info(
                        f'⚔️  [RESERVE] conflict for client {client_id} '
                        f'[{slot.start.isoformat()}, {slot.end.isoformat()})'
                    )
                    raise ReservationConflictError()
                case ConstraintViolated(constraint=ReservationConstraint.CLIENT_FK):
                    raise ClientNotFoundError(client_id)
                case ConstraintViolated(constraint=constraint):
                    raise StorageError(f'Reservation rejected by constraint {constraint}')
                case _:
                    raise StorageError(f'Unexpected insert outcome: {outcome!r}')
