"""
房内平板 API 测试
"""
from fastapi.testclient import TestClient

from hotelops.models.entities import GuestPreferences

API = "/api/v1"


class TestTabletReservation:

    def test_reservation_view(self, client: TestClient, db_session, sample_reservation):
        prefs = db_session.query(GuestPreferences).filter_by(guest_id=sample_reservation.guest_id).one()
        prefs.room_floors = ["High floor"]
        prefs.meal_types = [{"label": "Vegan"}]
        db_session.commit()

        response = client.get(f"{API}/in-room-tablet/reservation/{sample_reservation.id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["room_number"] == "101"
        assert data["guest_name"] == "John Smith"
        assert data["booking_id"] == sample_reservation.booking_id
        assert data["check_in_time"] == "14:00"
        assert data["preferences"] == ["High floor", "Vegan"]

    def test_reservation_not_found(self, client: TestClient):
        assert client.get(f"{API}/in-room-tablet/reservation/9999").status_code == 404


class TestTabletMenu:

    def test_menu_lists_available_only(self, client: TestClient, sample_menu_items):
        body = client.get(f"{API}/in-room-tablet/menu").json()

        names = {item["name"] for item in body["data"]}
        assert names == {"Club Sandwich", "Orange Juice"}
        assert body["meta"]["total"] == 2


class TestTabletRequests:

    def test_place_order(self, client: TestClient, sample_reservation, sample_menu_items):
        response = client.post(f"{API}/in-room-tablet/room-service-order", json={
            "reservation_id": sample_reservation.id,
            "guest_id": sample_reservation.guest_id,
            "items": [{"menu_item_id": sample_menu_items[1].id, "quantity": 2}],
        })

        assert response.status_code == 201
        assert response.json()["data"]["subtotal"] == 8.5

    def test_housekeeping_request(self, client: TestClient, sample_reservation):
        response = client.post(f"{API}/in-room-tablet/housekeeping-request", json={
            "reservation_id": sample_reservation.id,
            "guest_id": sample_reservation.guest_id,
            "request_type": "cleaning",
            "description": "Please clean the room",
            "schedule_time": "afternoon",
        })

        assert response.status_code == 201
        assert response.json()["data"]["status"] == "pending"

    def test_maintenance_issue(self, client: TestClient, sample_reservation):
        response = client.post(f"{API}/in-room-tablet/maintenance-issue", json={
            "reservation_id": sample_reservation.id,
            "guest_id": sample_reservation.guest_id,
            "issue_type": "wifi",
            "description": "Cannot connect",
            "priority": "high",
        })

        assert response.status_code == 201
        assert response.json()["data"]["priority"] == "high"
