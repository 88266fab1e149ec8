from typing import AsyncContextManager, Callable, List

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_client_query_repo import IClientQueryRepo
from src.service.reservation.domain.entity.client_entity import Client
from src.service.reservation.driven_adapter.model.client_model import ClientModel


class ClientQueryRepoImpl(IClientQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_all(self) -> List[Client]:
        async with self.session_factory() as session:
            result = await session.execute(select(ClientModel).order_by(ClientModel.created_at))
            return [self._model_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def exists(self, *, client_id: UUID) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(exists().where(ClientModel.id == str(client_id)))
            )
            return bool(result.scalar())

    @staticmethod
    def _model_to_entity(model: ClientModel) -> Client:
        return Client(
            id=UUID(str(model.id)),
            name=model.name,
            email=model.email,
            created_at=model.created_at,
        )
