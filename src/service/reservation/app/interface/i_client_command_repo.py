from abc import ABC, abstractmethod

from uuid_utils import UUID

from src.service.reservation.domain.entity.client_entity import Client


class IClientCommandRepo(ABC):
    """Client Command Repository - runs on the unit of work's connection"""

    @abstractmethod
    async def create(self, *, client: Client) -> Client:
        """Raises ClientAlreadyExistsError when the email is taken"""
        pass

    @abstractmethod
    async def exists(self, *, client_id: UUID) -> bool:
        pass
