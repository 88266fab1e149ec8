from datetime import datetime
from typing import Optional

import attrs
from uuid_utils import UUID, uuid7

from src.service.reservation.domain.enum.reservation_status import ReservationStatus
from src.service.reservation.domain.value_object.time_slot import TimeSlot


@attrs.define
class Reservation:
    id: UUID
    client_id: UUID
    start_time: datetime
    end_time: datetime
    status: ReservationStatus = ReservationStatus.CONFIRMED
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, client_id: UUID, slot: TimeSlot, notes: Optional[str] = None) -> 'Reservation':
        """New reservations always start out confirmed"""
        return cls(
            id=uuid7(),
            client_id=client_id,
            start_time=slot.start,
            end_time=slot.end,
            status=ReservationStatus.CONFIRMED,
            notes=notes or None,
        )

    @property
    def slot(self) -> TimeSlot:
        return TimeSlot(start=self.start_time, end=self.end_time)
