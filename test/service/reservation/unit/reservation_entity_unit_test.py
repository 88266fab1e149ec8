"""Unit tests for Client / Reservation entities"""

from datetime import datetime, timedelta, timezone

import pytest
from uuid_utils import uuid7

from src.platform.exception.exceptions import ValidationError
from src.service.reservation.domain.entity.client_entity import Client
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.enum.reservation_status import ReservationStatus
from src.service.reservation.domain.value_object.time_slot import TimeSlot


T0 = datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)
SLOT = TimeSlot(start=T0, end=T0 + timedelta(hours=1))


class TestClientCreate:
    def test_create_assigns_uuid7_and_strips_fields(self):
        client = Client.create(name='  Ada ', email=' ada@example.com ')

        assert client.name == 'Ada'
        assert client.email == 'ada@example.com'
        assert client.id.version == 7

    @pytest.mark.parametrize('name, email', [('', 'a@b.c'), ('Ada', ''), ('   ', 'a@b.c')])
    def test_empty_fields_are_rejected(self, name, email):
        with pytest.raises(ValidationError):
            Client.create(name=name, email=email)


class TestReservationCreate:
    def test_new_reservation_is_confirmed(self):
        reservation = Reservation.create(client_id=uuid7(), slot=SLOT, notes='standup')

        assert reservation.status == ReservationStatus.CONFIRMED
        assert reservation.slot == SLOT
        assert reservation.notes == 'standup'

    def test_empty_notes_are_stored_as_none(self):
        reservation = Reservation.create(client_id=uuid7(), slot=SLOT, notes='')

        assert reservation.notes is None
