"""
Reservation Command Repository Implementation

Raw asyncpg on the unit of work's connection. The exclusion constraint
no_overlapping_reservations is the only thing that decides whether two
confirmed reservations overlap; this repository never pre-checks.
"""

import asyncpg
from uuid_utils import UUID

from src.platform.database.asyncpg_setting import ASYNCPG_DRIVER_ERRORS
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto import ConstraintViolated, InsertOutcome, ReservationInserted
from src.service.reservation.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.enum.reservation_status import ReservationStatus


class ReservationCommandRepoImpl(IReservationCommandRepo):
    def __init__(self, *, connection: asyncpg.Connection) -> None:
        self.connection = connection

    @staticmethod
    def _row_to_entity(row: asyncpg.Record) -> Reservation:
        """Convert asyncpg Record to Reservation entity"""
        return Reservation(
            id=row['id'],
            client_id=row['client_id'],
            start_time=row['start_time'],
            end_time=row['end_time'],
            status=ReservationStatus(row['status']),
            notes=row['notes'],
            created_at=row['created_at'],
        )

    @Logger.io
    async def insert(self, *, reservation: Reservation) -> InsertOutcome:
        try:
            row = await self.connection.fetchrow(
                """
                INSERT INTO reservations (id, client_id, start_time, end_time, status, notes)
                VALUES ($1, $2, $3, $4, $5, $6)
                RETURNING id, client_id, start_time, end_time, status, notes, created_at
                """,
                reservation.id,
                reservation.client_id,
                reservation.start_time,
                reservation.end_time,
                reservation.status.value,
                reservation.notes,
            )
        except asyncpg.IntegrityConstraintViolationError as e:
            constraint = getattr(e, 'constraint_name', None) or type(e).__name__
            Logger.base.info(f'🚫 [INSERT] reservation {reservation.id} rejected by {constraint}')
            return ConstraintViolated(constraint=constraint)
        except ASYNCPG_DRIVER_ERRORS as e:
            raise StorageError(f'Failed to insert reservation: {e}') from e

        return ReservationInserted(reservation=self._row_to_entity(row))

    @Logger.io
    async def cancel(self, *, reservation_id: UUID) -> bool:
        try:
            result = await self.connection.execute(
                """
                UPDATE reservations
                SET status = $2
                WHERE id = $1 AND status = $3
                """,
                reservation_id,
                ReservationStatus.CANCELLED.value,
                ReservationStatus.CONFIRMED.value,
            )
        except ASYNCPG_DRIVER_ERRORS as e:
            raise StorageError(f'Failed to cancel reservation: {e}') from e

        # asyncpg returns the command tag, e.g. 'UPDATE 1'
        return result.split()[-1] != '0'

    @Logger.io
    async def exists(self, *, reservation_id: UUID) -> bool:
        try:
            found = await self.connection.fetchval(
                'SELECT EXISTS (SELECT 1 FROM reservations WHERE id = $1)', reservation_id
            )
        except ASYNCPG_DRIVER_ERRORS as e:
            raise StorageError(f'Failed to look up reservation: {e}') from e
        return bool(found)
