from abc import ABC, abstractmethod
from typing import List

from uuid_utils import UUID

from src.service.reservation.domain.entity.client_entity import Client


class IClientQueryRepo(ABC):
    @abstractmethod
    async def list_all(self) -> List[Client]:
        pass

    @abstractmethod
    async def exists(self, *, client_id: UUID) -> bool:
        pass
