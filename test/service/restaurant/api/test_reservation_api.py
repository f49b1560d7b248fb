from datetime import datetime, time, timedelta, timezone
from typing import Any
from uuid import uuid4

from fastapi.testclient import TestClient
import pytest

from src.service.restaurant.domain.entity.dining_table_entity import DiningTable
from src.service.restaurant.domain.entity.user_entity import UserRole
from src.service.restaurant.domain.reservation_conflict_checker import (
    GUEST_CONFLICT_MESSAGE,
    TABLE_CONFLICT_MESSAGE,
    USER_CONFLICT_MESSAGE,
)
from src.service.restaurant.domain.reservation_validator import (
    NOT_NEXT_DAY_MESSAGE,
    OUTSIDE_BUSINESS_HOURS_MESSAGE,
)


RESERVATION_BASE = '/api/reservation'


def _guest_body(table: DiningTable, start: datetime, **overrides: Any) -> dict[str, Any]:
    body = {
        'table_id': str(table.id),
        'reservation_time': start.isoformat(),
        'number_of_guests': 2,
        'guest_name': 'Jane Doe',
        'guest_email': 'jane@example.com',
        'guest_phone': '+886912345678',
    }
    return body | overrides


@pytest.fixture
def headers(login_as) -> dict[str, str]:
    _, headers = login_as(UserRole.CUSTOMER)
    return headers


@pytest.mark.api
class TestCreateReservation:
    def test_guest_reservation(
        self, client: TestClient, headers, table: DiningTable, dinner_time: datetime
    ) -> None:
        response = client.post(
            RESERVATION_BASE, json=_guest_body(table, dinner_time), headers=headers
        )

        assert response.status_code == 201
        data = response.json()
        assert data['table_id'] == str(table.id)
        assert data['user_id'] is None
        assert data['guest_email'] == 'jane@example.com'
        assert data['deleted'] is False
        assert datetime.fromisoformat(data['reservation_time']) == dinner_time

    def test_user_reservation(
        self, client: TestClient, login_as, table: DiningTable, dinner_time: datetime
    ) -> None:
        user, headers = login_as(UserRole.CUSTOMER, email='member@example.com')

        response = client.post(
            RESERVATION_BASE,
            json={
                'table_id': str(table.id),
                'reservation_time': dinner_time.isoformat(),
                'number_of_guests': 3,
                'user_id': str(user.id),
            },
            headers=headers,
        )

        assert response.status_code == 201
        assert response.json()['user_id'] == str(user.id)

    def test_requires_authentication(
        self, client: TestClient, table: DiningTable, dinner_time: datetime
    ) -> None:
        response = client.post(RESERVATION_BASE, json=_guest_body(table, dinner_time))

        assert response.status_code == 401

    def test_table_double_booking(
        self, client: TestClient, headers, table: DiningTable, dinner_time: datetime
    ) -> None:
        first = client.post(
            RESERVATION_BASE, json=_guest_body(table, dinner_time), headers=headers
        )
        # inside duration + buffer of the first reservation
        second = client.post(
            RESERVATION_BASE,
            json=_guest_body(
                table, dinner_time - timedelta(hours=2), guest_email='other@example.com'
            ),
            headers=headers,
        )

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()['errors'] == [TABLE_CONFLICT_MESSAGE]

    def test_table_free_after_window(
        self, client: TestClient, headers, table: DiningTable, reservation_day
    ) -> None:
        lunch = datetime.combine(reservation_day, time(12, 0))
        client.post(RESERVATION_BASE, json=_guest_body(table, lunch), headers=headers)

        response = client.post(
            RESERVATION_BASE,
            json=_guest_body(
                table, lunch + timedelta(hours=2, minutes=31), guest_email='b@example.com'
            ),
            headers=headers,
        )

        assert response.status_code == 201

    def test_guest_double_booking_on_other_table(
        self,
        client: TestClient,
        headers,
        table: DiningTable,
        other_table: DiningTable,
        dinner_time: datetime,
    ) -> None:
        client.post(RESERVATION_BASE, json=_guest_body(table, dinner_time), headers=headers)

        response = client.post(
            RESERVATION_BASE, json=_guest_body(other_table, dinner_time), headers=headers
        )

        assert response.status_code == 409
        assert response.json()['errors'] == [GUEST_CONFLICT_MESSAGE]

    def test_user_double_booking_on_other_table(
        self,
        client: TestClient,
        login_as,
        table: DiningTable,
        other_table: DiningTable,
        dinner_time: datetime,
    ) -> None:
        user, headers = login_as(UserRole.CUSTOMER, email='member@example.com')
        body = {'reservation_time': dinner_time.isoformat(), 'user_id': str(user.id)}

        client.post(RESERVATION_BASE, json=body | {'table_id': str(table.id)}, headers=headers)
        response = client.post(
            RESERVATION_BASE, json=body | {'table_id': str(other_table.id)}, headers=headers
        )

        assert response.status_code == 409
        assert response.json()['errors'] == [USER_CONFLICT_MESSAGE]

    def test_ends_after_closing(
        self, client: TestClient, headers, table: DiningTable, reservation_day
    ) -> None:
        response = client.post(
            RESERVATION_BASE,
            json=_guest_body(table, datetime.combine(reservation_day, time(20, 0))),
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json()['errors'] == [OUTSIDE_BUSINESS_HOURS_MESSAGE]

    def test_later_today_is_not_next_day(
        self, client: TestClient, headers, table: DiningTable, business_hours
    ) -> None:
        later_today = datetime.now(timezone.utc) + timedelta(minutes=5)
        if business_hours.to_local(later_today).date() != business_hours.today():
            pytest.skip('too close to midnight')

        response = client.post(
            RESERVATION_BASE, json=_guest_body(table, later_today), headers=headers
        )

        assert response.status_code == 400
        assert response.json()['errors'] == [NOT_NEXT_DAY_MESSAGE]

    def test_unknown_table(
        self, client: TestClient, headers, store, dinner_time: datetime
    ) -> None:
        ghost = DiningTable.create(number=99, capacity=2)

        response = client.post(
            RESERVATION_BASE, json=_guest_body(ghost, dinner_time), headers=headers
        )

        assert response.status_code == 404
        assert response.json()['errors'] == [f'Table not found with ID: {ghost.id}']

    def test_guest_without_email(
        self, client: TestClient, headers, table: DiningTable, dinner_time: datetime
    ) -> None:
        body = _guest_body(table, dinner_time)
        del body['guest_email']

        response = client.post(RESERVATION_BASE, json=body, headers=headers)

        assert response.status_code == 400

    @pytest.mark.parametrize(
        'overrides',
        [
            {'guest_phone': 'call-me'},
            {'guest_email': 'not-an-email'},
            {'guest_name': 'J'},
            {'number_of_guests': 0},
            {'reservation_time': '2001-01-01T19:00:00'},
        ],
    )
    def test_invalid_body(
        self,
        client: TestClient,
        headers,
        table: DiningTable,
        dinner_time: datetime,
        overrides: dict[str, Any],
    ) -> None:
        response = client.post(
            RESERVATION_BASE, json=_guest_body(table, dinner_time, **overrides), headers=headers
        )

        assert response.status_code == 400


@pytest.mark.api
class TestReservationLifecycle:
    @pytest.fixture
    def reservation_id(
        self, client: TestClient, headers, table: DiningTable, dinner_time: datetime
    ) -> str:
        response = client.post(
            RESERVATION_BASE, json=_guest_body(table, dinner_time), headers=headers
        )
        assert response.status_code == 201
        return response.json()['id']

    def test_get_and_list(self, client: TestClient, headers, reservation_id: str, table) -> None:
        fetched = client.get(f'{RESERVATION_BASE}/{reservation_id}', headers=headers)
        assert fetched.status_code == 200

        listed = client.get(RESERVATION_BASE, headers=headers).json()
        by_table = client.get(f'{RESERVATION_BASE}/table/{table.id}', headers=headers).json()
        by_email = client.get(
            f'{RESERVATION_BASE}/guest/email/jane@example.com', headers=headers
        ).json()
        by_phone = client.get(
            f'{RESERVATION_BASE}/guest/phone/+886912345678', headers=headers
        ).json()
        by_name = client.get(f'{RESERVATION_BASE}/guest/name/Jane Doe', headers=headers).json()

        for result in (listed, by_table, by_email, by_phone, by_name):
            assert [r['id'] for r in result] == [reservation_id]

    @pytest.mark.parametrize('phone', ['abc', '%2B886912345678%0A'])
    def test_invalid_guest_lookup(self, client: TestClient, headers, phone: str) -> None:
        response = client.get(f'{RESERVATION_BASE}/guest/phone/{phone}', headers=headers)

        assert response.status_code == 400
        assert response.json()['errors'] == ['Valid guest phone number is required.']

    def test_update_keeps_own_slot(
        self, client: TestClient, headers, reservation_id: str, table, dinner_time: datetime
    ) -> None:
        # Same table, 30 minutes earlier: overlaps only with itself
        response = client.put(
            f'{RESERVATION_BASE}/{reservation_id}',
            json=_guest_body(table, dinner_time - timedelta(minutes=30), number_of_guests=4),
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()['number_of_guests'] == 4

    def test_rejected_update_leaves_reservation_untouched(
        self, client: TestClient, headers, reservation_id: str, table, dinner_time: datetime
    ) -> None:
        closing_slot = dinner_time.replace(hour=20, minute=0)

        response = client.put(
            f'{RESERVATION_BASE}/{reservation_id}',
            json=_guest_body(table, closing_slot, number_of_guests=6),
            headers=headers,
        )

        assert response.status_code == 400
        stored = client.get(f'{RESERVATION_BASE}/{reservation_id}', headers=headers).json()
        assert datetime.fromisoformat(stored['reservation_time']) == dinner_time
        assert stored['number_of_guests'] != 6

    def test_update_missing(self, client: TestClient, headers, table, dinner_time) -> None:
        response = client.put(
            f'{RESERVATION_BASE}/{uuid4()}',
            json=_guest_body(table, dinner_time),
            headers=headers,
        )

        assert response.status_code == 404
        assert response.json()['errors'] == ['Reservation not found']

    def test_soft_delete(
        self, client: TestClient, headers, login_as, reservation_id: str
    ) -> None:
        _, admin_headers = login_as(UserRole.ADMIN)

        deleted = client.delete(f'{RESERVATION_BASE}/{reservation_id}', headers=headers)

        assert deleted.status_code == 204
        gone = client.get(f'{RESERVATION_BASE}/{reservation_id}', headers=headers)
        assert gone.status_code == 404
        assert client.get(RESERVATION_BASE, headers=headers).json() == []
        everything = client.get(f'{RESERVATION_BASE}/all', headers=admin_headers).json()
        assert [(r['id'], r['deleted']) for r in everything] == [(reservation_id, True)]

    def test_slot_reusable_after_delete(
        self, client: TestClient, headers, reservation_id: str, table, dinner_time
    ) -> None:
        client.delete(f'{RESERVATION_BASE}/{reservation_id}', headers=headers)

        response = client.post(
            RESERVATION_BASE, json=_guest_body(table, dinner_time), headers=headers
        )

        assert response.status_code == 201

    def test_all_is_admin_only(self, client: TestClient, headers) -> None:
        assert client.get(f'{RESERVATION_BASE}/all', headers=headers).status_code == 403
