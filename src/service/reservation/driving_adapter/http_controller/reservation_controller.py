from typing import List

from fastapi import APIRouter, Depends, status
from opentelemetry import trace
from pydantic import AwareDatetime

from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7_utils_types import UtilsUUID7
from src.service.reservation.app.command.cancel_reservation_use_case import (
    CancelReservationUseCase,
)
from src.service.reservation.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.reservation.app.query.get_reservation_use_case import GetReservationUseCase
from src.service.reservation.app.query.list_available_slots_use_case import (
    ListAvailableSlotsUseCase,
)
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.driving_adapter.http_controller.schema.reservation_schema import (
    ReservationCreateRequest,
    ReservationResponse,
    SlotAvailabilityResponse,
    TimeSlotResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def to_reservation_response(reservation: Reservation) -> ReservationResponse:
    return ReservationResponse(
        id=reservation.id,
        client_id=reservation.client_id,
        start_time=reservation.start_time,
        end_time=reservation.end_time,
        status=reservation.status.value,
        notes=reservation.notes,
        created_at=reservation.created_at,
    )


@router.get('/available_slots', response_model=List[TimeSlotResponse])
@Logger.io
async def list_available_slots(
    start_time: AwareDatetime,
    end_time: AwareDatetime,
    use_case: ListAvailableSlotsUseCase = Depends(ListAvailableSlotsUseCase.depends),
) -> List[TimeSlotResponse]:
    slots = await use_case.execute(start_time=start_time, end_time=end_time)
    return [TimeSlotResponse(start_time=slot.start, end_time=slot.end) for slot in slots]


@router.get('/slot_available')
@Logger.io
async def check_slot_available(
    start_time: AwareDatetime,
    end_time: AwareDatetime,
    use_case: ListAvailableSlotsUseCase = Depends(ListAvailableSlotsUseCase.depends),
) -> SlotAvailabilityResponse:
    available = await use_case.is_slot_available(start_time=start_time, end_time=end_time)
    return SlotAvailabilityResponse(start_time=start_time, end_time=end_time, available=available)


@router.post('', response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_reservation(
    request: ReservationCreateRequest,
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> ReservationResponse:
    with tracer.start_as_current_span('controller.create_reservation') as span:
        span.set_attribute('client_id', str(request.client_id))

        reservation = await use_case.execute(
            client_id=request.client_id,
            start_time=request.start_time,
            end_time=request.end_time,
            notes=request.notes,
        )
        return to_reservation_response(reservation)


@router.get('/{reservation_id}', response_model=ReservationResponse)
@Logger.io
async def get_reservation(
    reservation_id: UtilsUUID7,
    use_case: GetReservationUseCase = Depends(GetReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(reservation_id=reservation_id)
    return to_reservation_response(reservation)


@router.delete('/{reservation_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def cancel_reservation(
    reservation_id: UtilsUUID7,
    use_case: CancelReservationUseCase = Depends(CancelReservationUseCase.depends),
) -> None:
    await use_case.execute(reservation_id=reservation_id)
