"""End-to-end HTTP flow against the test app and a real PostgreSQL"""

from constants import TEST_CLIENT_EMAIL, TEST_CLIENT_NAME


def _create_client(api_client) -> str:
    response = api_client.post(
        '/api/client', json={'name': TEST_CLIENT_NAME, 'email': TEST_CLIENT_EMAIL}
    )
    assert response.status_code == 201
    return response.json()['id']


def _reserve(api_client, client_id: str, start: str, end: str):
    return api_client.post(
        '/api/reservation',
        json={'client_id': client_id, 'start_time': start, 'end_time': end},
    )


class TestReservationFlow:
    def test_book_conflict_cancel_rebook(self, api_client):
        client_id = _create_client(api_client)

        first = _reserve(api_client, client_id, '2025-03-10T09:00:00Z', '2025-03-10T10:00:00Z')
        assert first.status_code == 201
        reservation_id = first.json()['id']

        clash = _reserve(api_client, client_id, '2025-03-10T09:30:00Z', '2025-03-10T10:30:00Z')
        assert clash.status_code == 409

        assert api_client.delete(f'/api/reservation/{reservation_id}').status_code == 204
        assert api_client.delete(f'/api/reservation/{reservation_id}').status_code == 204

        rebook = _reserve(api_client, client_id, '2025-03-10T09:30:00Z', '2025-03-10T10:30:00Z')
        assert rebook.status_code == 201

        history = api_client.get(f'/api/client/{client_id}/reservations').json()
        assert [r['status'] for r in history] == ['cancelled', 'confirmed']

    def test_available_slots_skip_booked_hours(self, api_client):
        client_id = _create_client(api_client)
        _reserve(api_client, client_id, '2025-03-10T10:00:00Z', '2025-03-10T11:00:00Z')

        response = api_client.get(
            '/api/reservation/available_slots',
            params={'start_time': '2025-03-10T09:00:00Z', 'end_time': '2025-03-10T12:00:00Z'},
        )

        assert response.status_code == 200
        assert [slot['start_time'][11:16] for slot in response.json()] == ['09:00', '11:00']

    def test_unknown_client_is_404(self, api_client):
        response = _reserve(
            api_client,
            '01936d8f-5e73-7c4e-a9c5-123456789abc',
            '2025-03-10T09:00:00Z',
            '2025-03-10T10:00:00Z',
        )

        assert response.status_code == 404

    def test_inverted_interval_is_400(self, api_client):
        client_id = _create_client(api_client)

        response = _reserve(api_client, client_id, '2025-03-10T10:00:00Z', '2025-03-10T09:00:00Z')

        assert response.status_code == 400
