from datetime import datetime
from typing import Optional
import uuid

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Text, func, text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID, ExcludeConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base
from src.service.reservation.domain.enum.reservation_status import (
    ReservationConstraint,
    ReservationStatus,
)


# Half-open range used by the exclusion constraint and the overlap queries
TIME_RANGE_SQL = "tstzrange(start_time, end_time, '[)')"


class ReservationModel(Base):
    __tablename__ = 'reservations'
    __table_args__ = (
        CheckConstraint(
            'end_time > start_time', name=ReservationConstraint.VALID_TIME_RANGE.value
        ),
        ExcludeConstraint(
            (text(TIME_RANGE_SQL), '&&'),
            name=ReservationConstraint.NO_OVERLAP.value,
            using='gist',
            where=text(f"status = '{ReservationStatus.CONFIRMED}'"),
        ),
        CheckConstraint("status IN ('confirmed', 'cancelled')", name='reservations_status_check'),
        Index('idx_reservations_time_range', text(TIME_RANGE_SQL), postgresql_using='gist'),
        Index('idx_reservations_client_id', 'client_id'),
        Index('idx_reservations_status', 'status'),
    )

    id: Mapped[uuid.UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    client_id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey('clients.id', name=ReservationConstraint.CLIENT_FK.value),
        nullable=False,
    )
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(
        Text, nullable=False, server_default=ReservationStatus.CONFIRMED.value
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self):
        return (
            f'<ReservationModel(id={self.id}, client_id={self.client_id}, '
            f'start_time={self.start_time}, end_time={self.end_time}, status={self.status})>'
        )
