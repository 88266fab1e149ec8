from abc import ABC, abstractmethod

from uuid_utils import UUID

from src.service.reservation.app.dto import InsertOutcome
from src.service.reservation.domain.entity.reservation_entity import Reservation


class IReservationCommandRepo(ABC):
    """Reservation Command Repository - runs on the unit of work's connection"""

    @abstractmethod
    async def insert(self, *, reservation: Reservation) -> InsertOutcome:
        """
        Insert a confirmed reservation.

        A constraint rejection comes back as ConstraintViolated instead of
        an exception; other storage failures raise StorageError.
        """
        pass

    @abstractmethod
    async def cancel(self, *, reservation_id: UUID) -> bool:
        """Flip confirmed -> cancelled. Returns False when no confirmed row matched."""
        pass

    @abstractmethod
    async def exists(self, *, reservation_id: UUID) -> bool:
        pass
