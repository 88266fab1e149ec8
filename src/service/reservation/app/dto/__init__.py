"""Reservation Application DTOs"""

from src.service.reservation.app.dto.insert_outcome import (
    ConstraintViolated,
    InsertOutcome,
    ReservationInserted,
)


__all__ = [
    'ConstraintViolated',
    'InsertOutcome',
    'ReservationInserted',
]
