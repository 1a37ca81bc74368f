"""
预订管理 API 测试
覆盖 /reservations 端点：晚数计算、默认房费、过滤查询、详情投影
"""
from fastapi.testclient import TestClient

from hotelops.models.entities import CheckIn, ServiceRequest

API = "/api/v1"


def _payload(guest, room, **overrides):
    payload = {
        "guest_id": guest.id,
        "room_id": room.id,
        "check_in_date": "2024-05-01T14:00:00",
        "check_out_date": "2024-05-04T12:00:00",
    }
    payload.update(overrides)
    return payload


class TestCreateReservation:

    def test_create_reservation_computes_nights_and_price(self, client: TestClient,
                                                          sample_guest, sample_room):
        response = client.post(f"{API}/reservations", json=_payload(sample_guest, sample_room))

        assert response.status_code == 201
        data = response.json()["data"]
        # 70 小时向上取整为 3 晚
        assert data["nights"] == 3
        assert data["total_price"] == 450.0
        assert data["status"] == "pending"
        assert data["booking_id"].startswith("BK-")

    def test_create_reservation_exact_days(self, client: TestClient, sample_guest, sample_room):
        response = client.post(f"{API}/reservations", json=_payload(
            sample_guest, sample_room,
            check_in_date="2024-05-01T00:00:00",
            check_out_date="2024-05-03T00:00:00",
            total_price=280.0,
        ))

        data = response.json()["data"]
        assert data["nights"] == 2
        assert data["total_price"] == 280.0

    def test_create_reservation_checkout_before_checkin(self, client: TestClient,
                                                        sample_guest, sample_room):
        response = client.post(f"{API}/reservations", json=_payload(
            sample_guest, sample_room,
            check_in_date="2024-05-04T14:00:00",
            check_out_date="2024-05-01T12:00:00",
        ))

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    def test_create_reservation_same_day_rejected(self, client: TestClient, sample_guest, sample_room):
        response = client.post(f"{API}/reservations", json=_payload(
            sample_guest, sample_room,
            check_in_date="2024-05-01T14:00:00",
            check_out_date="2024-05-01T14:00:00",
        ))

        assert response.status_code == 400

    def test_create_reservation_unknown_guest(self, client: TestClient, sample_room):
        payload = {
            "guest_id": 9999,
            "room_id": sample_room.id,
            "check_in_date": "2024-05-01T14:00:00",
            "check_out_date": "2024-05-02T12:00:00",
        }

        assert client.post(f"{API}/reservations", json=payload).status_code == 404

    def test_create_reservation_duplicate_booking_id(self, client: TestClient, sample_guest,
                                                     sample_room, sample_reservation):
        response = client.post(f"{API}/reservations", json=_payload(
            sample_guest, sample_room, booking_id=sample_reservation.booking_id
        ))

        assert response.status_code == 409


class TestUpdateReservation:

    def test_update_dates_recomputes_nights(self, client: TestClient, sample_guest, sample_room):
        created = client.post(f"{API}/reservations", json=_payload(sample_guest, sample_room)).json()

        response = client.put(f"{API}/reservations/{created['data']['id']}", json={
            "check_out_date": "2024-05-08T12:00:00",
        })

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["nights"] == 7
        assert data["check_in_date"].startswith("2024-05-01")

    def test_update_dates_invalid(self, client: TestClient, sample_reservation):
        response = client.put(f"{API}/reservations/{sample_reservation.id}", json={
            "check_out_date": sample_reservation.check_in_date.isoformat(),
        })

        assert response.status_code == 400

    def test_update_status_only(self, client: TestClient, sample_reservation):
        response = client.put(f"{API}/reservations/{sample_reservation.id}", json={"status": "cancelled"})

        data = response.json()["data"]
        assert data["status"] == "cancelled"
        assert data["nights"] == sample_reservation.nights


class TestReservationQueries:

    def test_get_reservation_detail(self, client: TestClient, db_session, sample_reservation):
        db_session.add(ServiceRequest(
            reservation_id=sample_reservation.id,
            guest_id=sample_reservation.guest_id,
            service_type="transportation",
            priority="high",
            description="Airport pickup",
        ))
        db_session.commit()

        response = client.get(f"{API}/reservations/{sample_reservation.id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["guest"]["email"] == "john.smith@example.com"
        assert data["room"]["room_number"] == "101"
        assert data["check_in_time"] == "14:00"
        assert data["check_out_time"] == "12:00"
        assert len(data["service_requests"]) == 1

    def test_detail_uses_actual_check_in_time(self, client: TestClient, db_session, sample_reservation):
        check_in_at = sample_reservation.check_in_date.replace(hour=9, minute=35)
        db_session.add(CheckIn(
            reservation_id=sample_reservation.id,
            guest_id=sample_reservation.guest_id,
            room_id=sample_reservation.room_id,
            check_in_time=check_in_at,
        ))
        db_session.commit()

        data = client.get(f"{API}/reservations/{sample_reservation.id}").json()["data"]

        assert data["check_in_time"] == "09:35"
        assert data["check_out_time"] == "12:00"

    def test_list_by_guest(self, client: TestClient, sample_guest, sample_reservation):
        body = client.get(f"{API}/reservations/guest/{sample_guest.id}").json()

        assert [r["id"] for r in body["data"]] == [sample_reservation.id]

    def test_list_by_guest_not_found(self, client: TestClient):
        assert client.get(f"{API}/reservations/guest/9999").status_code == 404

    def test_list_by_room(self, client: TestClient, sample_room, sample_reservation):
        body = client.get(f"{API}/reservations/room/{sample_room.id}").json()

        assert body["meta"]["total"] == 1

    def test_list_by_status(self, client: TestClient, sample_reservation):
        confirmed = client.get(f"{API}/reservations/status/confirmed").json()
        cancelled = client.get(f"{API}/reservations/status/cancelled").json()

        assert confirmed["meta"]["total"] == 1
        assert cancelled["meta"]["total"] == 0

    def test_delete_reservation_cascades_requests(self, client: TestClient, db_session,
                                                  sample_reservation):
        db_session.add(ServiceRequest(
            reservation_id=sample_reservation.id,
            guest_id=sample_reservation.guest_id,
            service_type="housekeeping",
            priority="low",
            description="Towels",
        ))
        db_session.commit()
        reservation_id = sample_reservation.id

        assert client.delete(f"{API}/reservations/{reservation_id}").status_code == 200
        assert db_session.query(ServiceRequest).filter_by(reservation_id=reservation_id).count() == 0
        assert client.delete(f"{API}/reservations/{reservation_id}").status_code == 404
