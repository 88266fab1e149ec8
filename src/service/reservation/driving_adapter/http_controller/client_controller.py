from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7_utils_types import UtilsUUID7
from src.service.reservation.app.command.create_client_use_case import CreateClientUseCase
from src.service.reservation.app.query.list_client_reservations_use_case import (
    ListClientReservationsUseCase,
)
from src.service.reservation.app.query.list_clients_use_case import ListClientsUseCase
from src.service.reservation.domain.entity.client_entity import Client
from src.service.reservation.driving_adapter.http_controller.reservation_controller import (
    to_reservation_response,
)
from src.service.reservation.driving_adapter.http_controller.schema.client_schema import (
    ClientCreateRequest,
    ClientResponse,
)
from src.service.reservation.driving_adapter.http_controller.schema.reservation_schema import (
    ReservationResponse,
)


router = APIRouter()


def to_client_response(client: Client) -> ClientResponse:
    return ClientResponse(
        id=client.id,
        name=client.name,
        email=client.email,
        created_at=client.created_at,
    )


@router.post('', response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_client(
    request: ClientCreateRequest,
    use_case: CreateClientUseCase = Depends(CreateClientUseCase.depends),
) -> ClientResponse:
    client = await use_case.execute(name=request.name, email=request.email)
    return to_client_response(client)


@router.get('', response_model=List[ClientResponse])
@Logger.io
async def list_clients(
    use_case: ListClientsUseCase = Depends(ListClientsUseCase.depends),
) -> List[ClientResponse]:
    return [to_client_response(client) for client in await use_case.execute()]


@router.get('/{client_id}/reservations', response_model=List[ReservationResponse])
@Logger.io
async def list_client_reservations(
    client_id: UtilsUUID7,
    use_case: ListClientReservationsUseCase = Depends(ListClientReservationsUseCase.depends),
) -> List[ReservationResponse]:
    reservations = await use_case.execute(client_id=client_id)
    return [to_reservation_response(reservation) for reservation in reservations]
