"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.reservation.app.command import (
    cancel_reservation_use_case,
    create_client_use_case,
    create_reservation_use_case,
)
from src.service.reservation.app.query import (
    get_reservation_use_case,
    list_available_slots_use_case,
    list_client_reservations_use_case,
    list_clients_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_client_use_case,
    create_reservation_use_case,
    cancel_reservation_use_case,
    list_clients_use_case,
    list_available_slots_use_case,
    get_reservation_use_case,
    list_client_reservations_use_case,
]
