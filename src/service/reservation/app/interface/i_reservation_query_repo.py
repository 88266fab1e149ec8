from abc import ABC, abstractmethod
from typing import List, Optional

from uuid_utils import UUID

from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.value_object.time_slot import TimeSlot


class IReservationQueryRepo(ABC):
    """Reservation Query Repository (read side)"""

    @abstractmethod
    async def get_by_id(self, *, reservation_id: UUID) -> Optional[Reservation]:
        pass

    @abstractmethod
    async def find_overlapping(self, *, window: TimeSlot) -> List[Reservation]:
        """Confirmed reservations overlapping the window, ordered by start_time"""
        pass

    @abstractmethod
    async def is_slot_available(self, *, slot: TimeSlot) -> bool:
        """Advisory only: a concurrent create may take the slot right after this read"""
        pass

    @abstractmethod
    async def list_by_client(self, *, client_id: UUID) -> List[Reservation]:
        """All of the client's reservations, any status, ordered by start_time"""
        pass
