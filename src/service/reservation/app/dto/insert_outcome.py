"""Outcome of a reservation insert attempt."""

import attrs

from src.service.reservation.domain.entity.reservation_entity import Reservation


@attrs.define(frozen=True)
class ReservationInserted:
    reservation: Reservation


@attrs.define(frozen=True)
class ConstraintViolated:
    """
    The database refused the row because of a named constraint.

    constraint is the PostgreSQL constraint name, e.g.
    'no_overlapping_reservations' for an overlapping confirmed interval.
    """

    constraint: str


InsertOutcome = ReservationInserted | ConstraintViolated
