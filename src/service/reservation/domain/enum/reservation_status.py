from enum import StrEnum


class ReservationStatus(StrEnum):
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'


class ReservationConstraint(StrEnum):
    """Names of the database constraints guarding the reservations table"""

    NO_OVERLAP = 'no_overlapping_reservations'
    VALID_TIME_RANGE = 'valid_time_range'
    CLIENT_FK = 'reservations_client_id_fkey'
