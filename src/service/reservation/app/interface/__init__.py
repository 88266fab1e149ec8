"""Application layer interfaces (Ports)"""

from src.service.reservation.app.interface.i_client_command_repo import IClientCommandRepo
from src.service.reservation.app.interface.i_client_query_repo import IClientQueryRepo
from src.service.reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.reservation.app.interface.i_reservation_query_repo import (
    IReservationQueryRepo,
)


__all__ = [
    'IClientCommandRepo',
    'IClientQueryRepo',
    'IReservationCommandRepo',
    'IReservationQueryRepo',
]
