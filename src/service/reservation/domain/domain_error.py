from uuid_utils import UUID

from src.platform.exception.exceptions import ConflictError, NotFoundError


class ClientNotFoundError(NotFoundError):
    def __init__(self, client_id: UUID) -> None:
        self.client_id = client_id
        super().__init__(f'Client not found: {client_id}')


class ReservationNotFoundError(NotFoundError):
    def __init__(self, reservation_id: UUID) -> None:
        self.reservation_id = reservation_id
        super().__init__(f'Reservation not found: {reservation_id}')


class ReservationConflictError(ConflictError):
    """The requested interval overlaps a confirmed reservation"""

    def __init__(self, message: str = 'Time slot overlaps an existing reservation') -> None:
        super().__init__(message)


class ClientAlreadyExistsError(ConflictError):
    def __init__(self, email: str) -> None:
        super().__init__(f'Client with email {email} already exists')
