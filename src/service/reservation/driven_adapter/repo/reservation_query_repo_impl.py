from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import DateTime, and_, exists, func, literal, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.enum.reservation_status import ReservationStatus
from src.service.reservation.domain.value_object.time_slot import TimeSlot
from src.service.reservation.driven_adapter.model.reservation_model import ReservationModel


def _overlaps_confirmed(slot: TimeSlot) -> ColumnElement[bool]:
    """tstzrange(start_time, end_time, '[)') && tstzrange(:start, :end, '[)') on confirmed rows"""
    row_range = func.tstzrange(ReservationModel.start_time, ReservationModel.end_time, '[)')
    slot_range = func.tstzrange(
        literal(slot.start, DateTime(timezone=True)),
        literal(slot.end, DateTime(timezone=True)),
        '[)',
    )
    return and_(
        ReservationModel.status == ReservationStatus.CONFIRMED.value,
        row_range.op('&&', is_comparison=True)(slot_range),
    )


class ReservationQueryRepoImpl(IReservationQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, reservation_id: UUID) -> Optional[Reservation]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ReservationModel).where(ReservationModel.id == str(reservation_id))
            )
            model = result.scalar_one_or_none()
            if not model:
                return None
            return self._model_to_entity(model)

    @Logger.io
    async def find_overlapping(self, *, window: TimeSlot) -> List[Reservation]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ReservationModel)
                .where(_overlaps_confirmed(window))
                .order_by(ReservationModel.start_time)
            )
            return [self._model_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def is_slot_available(self, *, slot: TimeSlot) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(select(~exists().where(_overlaps_confirmed(slot))))
            return bool(result.scalar())

    @Logger.io
    async def list_by_client(self, *, client_id: UUID) -> List[Reservation]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ReservationModel)
                .where(ReservationModel.client_id == str(client_id))
                .order_by(ReservationModel.start_time)
            )
            return [self._model_to_entity(model) for model in result.scalars()]

    @staticmethod
    def _model_to_entity(model: ReservationModel) -> Reservation:
        return Reservation(
            id=UUID(str(model.id)),
            client_id=UUID(str(model.client_id)),
            start_time=model.start_time,
            end_time=model.end_time,
            status=ReservationStatus(model.status),
            notes=model.notes,
            created_at=model.created_at,
        )
