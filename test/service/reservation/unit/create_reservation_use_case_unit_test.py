"""
Unit tests for CreateReservationUseCase

Flow under test:
1. Client existence check
2. Insert (outcome typed as ReservationInserted / ConstraintViolated)
3. Commit on insert, rollback + domain error otherwise
"""

from datetime import datetime, timedelta, timezone

from prometheus_client import REGISTRY
import pytest
from uuid_utils import uuid7

from fake_unit_of_work import FakeUnitOfWork
from src.platform.exception.exceptions import StorageError, ValidationError
from src.service.reservation.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.reservation.app.dto import ConstraintViolated, ReservationInserted
from src.service.reservation.domain.domain_error import (
    ClientNotFoundError,
    ReservationConflictError,
)
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.enum.reservation_status import (
    ReservationConstraint,
    ReservationStatus,
)


T0 = datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)
HOUR = timedelta(hours=1)


def _attempts(result: str) -> float:
    return REGISTRY.get_sample_value('reservation_attempts_total', {'result': result}) or 0.0


def _echo_inserted(*, reservation: Reservation) -> ReservationInserted:
    return ReservationInserted(reservation=reservation)


class TestCreateReservation:
    @pytest.fixture
    def uow(self) -> FakeUnitOfWork:
        uow = FakeUnitOfWork()
        uow.client_command_repo.exists.return_value = True
        uow.reservation_command_repo.insert.side_effect = _echo_inserted
        return uow

    @pytest.fixture
    def use_case(self, uow: FakeUnitOfWork) -> CreateReservationUseCase:
        return CreateReservationUseCase(uow=uow)

    @pytest.mark.asyncio
    async def test_inserted_reservation_is_committed(self, use_case, uow):
        """
        Given: an existing client and a free interval
        When: creating a reservation
        Then: the row is inserted confirmed and the transaction commits
        """
        client_id = uuid7()
        before = _attempts('created')

        reservation = await use_case.execute(
            client_id=client_id, start_time=T0, end_time=T0 + HOUR, notes='kickoff'
        )

        assert reservation.client_id == client_id
        assert reservation.status == ReservationStatus.CONFIRMED
        assert reservation.start_time == T0
        assert reservation.end_time == T0 + HOUR
        assert reservation.notes == 'kickoff'
        assert uow.committed is True
        assert _attempts('created') == before + 1

    @pytest.mark.asyncio
    async def test_unknown_client_raises_and_skips_insert(self, use_case, uow):
        uow.client_command_repo.exists.return_value = False
        client_id = uuid7()
        before = _attempts('client_not_found')

        with pytest.raises(ClientNotFoundError) as exc_info:
            await use_case.execute(client_id=client_id, start_time=T0, end_time=T0 + HOUR)

        assert exc_info.value.client_id == client_id
        uow.reservation_command_repo.insert.assert_not_awaited()
        assert uow.committed is False
        assert uow.rolled_back is True
        assert _attempts('client_not_found') == before + 1

    @pytest.mark.asyncio
    async def test_overlap_violation_becomes_conflict_error(self, use_case, uow):
        """
        Given: the exclusion constraint rejects the insert
        When: creating a reservation
        Then: ReservationConflictError (409) and nothing is committed
        """
        uow.reservation_command_repo.insert.side_effect = None
        uow.reservation_command_repo.insert.return_value = ConstraintViolated(
            constraint=ReservationConstraint.NO_OVERLAP.value
        )
        before = _attempts('conflict')

        with pytest.raises(ReservationConflictError) as exc_info:
            await use_case.execute(client_id=uuid7(), start_time=T0, end_time=T0 + HOUR)

        assert exc_info.value.status_code == 409
        assert uow.committed is False
        assert uow.rolled_back is True
        assert _attempts('conflict') == before + 1

    @pytest.mark.asyncio
    async def test_foreign_key_violation_means_client_vanished(self, use_case, uow):
        uow.reservation_command_repo.insert.side_effect = None
        uow.reservation_command_repo.insert.return_value = ConstraintViolated(
            constraint=ReservationConstraint.CLIENT_FK.value
        )

        with pytest.raises(ClientNotFoundError):
            await use_case.execute(client_id=uuid7(), start_time=T0, end_time=T0 + HOUR)

        assert uow.committed is False

    @pytest.mark.asyncio
    async def test_unexpected_constraint_is_storage_error(self, use_case, uow):
        uow.reservation_command_repo.insert.side_effect = None
        uow.reservation_command_repo.insert.return_value = ConstraintViolated(
            constraint='some_other_constraint'
        )
        before = _attempts('error')

        with pytest.raises(StorageError):
            await use_case.execute(client_id=uuid7(), start_time=T0, end_time=T0 + HOUR)

        assert uow.committed is False
        assert _attempts('error') == before + 1

    @pytest.mark.asyncio
    async def test_storage_failure_propagates_with_rollback(self, use_case, uow):
        cause = OSError('connection reset')
        failure = StorageError('Failed to insert reservation')
        failure.__cause__ = cause
        uow.reservation_command_repo.insert.side_effect = failure

        with pytest.raises(StorageError) as exc_info:
            await use_case.execute(client_id=uuid7(), start_time=T0, end_time=T0 + HOUR)

        assert exc_info.value.__cause__ is cause
        assert uow.rolled_back is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize('end_offset', [0, -1])
    async def test_invalid_interval_rejected_before_transaction(self, use_case, uow, end_offset):
        with pytest.raises(ValidationError):
            await use_case.execute(
                client_id=uuid7(), start_time=T0, end_time=T0 + end_offset * HOUR
            )

        assert uow.entered == 0
        uow.client_command_repo.exists.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_application_level_overlap_check(self, use_case, uow):
        """The insert is attempted directly; only the constraint decides overlap"""
        await use_case.execute(client_id=uuid7(), start_time=T0, end_time=T0 + HOUR)

        uow.reservation_command_repo.insert.assert_awaited_once()
        assert [name for name, _, _ in uow.reservation_command_repo.method_calls] == ['insert']
