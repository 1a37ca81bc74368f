"""
客人管理 API 测试
覆盖 /guests 端点：CRUD、历史、偏好、画像
"""
from datetime import datetime, timedelta

from fastapi.testclient import TestClient

from hotelops.models.entities import Reservation, ServiceRequest, GuestPreferences

API = "/api/v1"

GUEST_PAYLOAD = {
    "name": "Jane Doe",
    "email": "jane.doe@example.com",
    "phone": "+44-20-5555-0000",
    "nationality": "UK",
    "id_type": "Passport",
    "id_number": "UK998877",
}


class TestCreateGuest:
    """创建客人"""

    def test_create_guest(self, client: TestClient):
        response = client.post(f"{API}/guests", json=GUEST_PAYLOAD)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["id"] > 0
        assert body["data"]["email"] == "jane.doe@example.com"
        assert body["data"]["join_date"] is not None

    def test_create_guest_creates_empty_preferences(self, client: TestClient):
        guest_id = client.post(f"{API}/guests", json=GUEST_PAYLOAD).json()["data"]["id"]

        response = client.get(f"{API}/guests/{guest_id}/preferences")

        assert response.status_code == 200
        prefs = response.json()["data"]
        assert prefs["room_floors"] == []
        assert prefs["special_requests"] == []

    def test_create_guest_duplicate_email(self, client: TestClient, sample_guest):
        """重复 email 返回 409"""
        payload = dict(GUEST_PAYLOAD, email=sample_guest.email)

        response = client.post(f"{API}/guests", json=payload)

        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "conflict"

    def test_create_guest_missing_field(self, client: TestClient):
        payload = {k: v for k, v in GUEST_PAYLOAD.items() if k != "email"}

        response = client.post(f"{API}/guests", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "validation_error"
        assert any(d["field"] == "email" for d in body["details"])

    def test_create_guest_invalid_email(self, client: TestClient):
        response = client.post(f"{API}/guests", json=dict(GUEST_PAYLOAD, email="not-an-email"))

        assert response.status_code == 400


class TestGetGuest:
    """客人详情"""

    def test_get_guest_detail(self, client: TestClient, db_session, sample_guest, room_factory,
                              reservation_factory):
        standard = room_factory(room_number="201", room_type="Standard", price=100.0)
        suite = room_factory(room_number="301", room_type="Suite", price=300.0)
        start = datetime(2024, 3, 1, 14, 0)
        reservation_factory(sample_guest, standard, check_in=start, nights=2, total_price=200.0)
        reservation_factory(sample_guest, suite, check_in=start + timedelta(days=10), nights=1,
                            total_price=300.0)
        reservation_factory(sample_guest, suite, check_in=start + timedelta(days=20), nights=1,
                            total_price=999.0, status="cancelled")

        response = client.get(f"{API}/guests/{sample_guest.id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == sample_guest.name
        assert len(data["reservations"]) == 3
        stats = data["statistics"]
        assert stats["total_stays"] == 2
        assert stats["total_spent"] == 500.0
        assert stats["average_spend"] == 250.0
        assert stats["most_common_room"] == "Standard"
        assert stats["last_visit"].startswith("2024-03-11")

    def test_get_guest_service_usage(self, client: TestClient, db_session, sample_guest,
                                     sample_reservation):
        for service_type in ("room-service", "room-service", "housekeeping"):
            db_session.add(ServiceRequest(
                reservation_id=sample_reservation.id,
                guest_id=sample_guest.id,
                service_type=service_type,
                priority="low",
                description="test",
            ))
        db_session.commit()

        response = client.get(f"{API}/guests/{sample_guest.id}")

        usage = response.json()["data"]["service_usage"]
        assert usage[0] == {"type": "room-service", "count": 2, "label": "Room Service"}
        assert usage[1] == {"type": "housekeeping", "count": 1, "label": "Housekeeping"}

    def test_get_guest_without_stays(self, client: TestClient, sample_guest):
        response = client.get(f"{API}/guests/{sample_guest.id}")

        stats = response.json()["data"]["statistics"]
        assert stats["total_stays"] == 0
        assert stats["average_spend"] == 0
        assert stats["last_visit"] is None
        assert stats["most_common_room"] == ""

    def test_get_guest_not_found(self, client: TestClient):
        response = client.get(f"{API}/guests/9999")

        assert response.status_code == 404
        assert response.json()["success"] is False


class TestListGuests:

    def test_list_guests(self, client: TestClient, guest_factory):
        for i in range(3):
            guest_factory(name=f"Guest {i}", email=f"guest{i}@example.com")

        response = client.get(f"{API}/guests")

        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 3
        assert body["meta"] == {"page": 1, "page_size": 10, "total": 3, "total_pages": 1}


class TestUpdateGuest:

    def test_partial_update_keeps_other_fields(self, client: TestClient, sample_guest):
        response = client.put(f"{API}/guests/{sample_guest.id}", json={"phone": "+1-555-9999"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["phone"] == "+1-555-9999"
        assert data["name"] == "John Smith"
        assert data["email"] == "john.smith@example.com"
        assert data["nationality"] == "USA"

    def test_update_email_conflict(self, client: TestClient, sample_guest, guest_factory):
        other = guest_factory(name="Other", email="other@example.com")

        response = client.put(f"{API}/guests/{other.id}", json={"email": sample_guest.email})

        assert response.status_code == 409

    def test_update_same_email_allowed(self, client: TestClient, sample_guest):
        response = client.put(f"{API}/guests/{sample_guest.id}", json={"email": sample_guest.email})

        assert response.status_code == 200

    def test_update_not_found(self, client: TestClient):
        response = client.put(f"{API}/guests/9999", json={"name": "Nobody"})

        assert response.status_code == 404


class TestDeleteGuest:

    def test_delete_guest_cascades(self, client: TestClient, db_session, sample_guest,
                                   sample_reservation):
        guest_id = sample_guest.id

        response = client.delete(f"{API}/guests/{guest_id}")

        assert response.status_code == 200
        assert client.get(f"{API}/guests/{guest_id}").status_code == 404
        assert db_session.query(Reservation).filter_by(guest_id=guest_id).count() == 0
        assert db_session.query(GuestPreferences).filter_by(guest_id=guest_id).count() == 0

    def test_delete_guest_not_found(self, client: TestClient):
        response = client.delete(f"{API}/guests/9999")

        assert response.status_code == 404


class TestGuestHistory:

    def test_history_most_recent_first(self, client: TestClient, sample_guest, sample_room,
                                       reservation_factory):
        first = reservation_factory(sample_guest, sample_room, check_in=datetime(2024, 1, 1, 14))
        second = reservation_factory(sample_guest, sample_room, check_in=datetime(2024, 6, 1, 14))

        response = client.get(f"{API}/guests/{sample_guest.id}/history")

        assert response.status_code == 200
        ids = [r["id"] for r in response.json()["data"]]
        assert ids == [second.id, first.id]

    def test_history_guest_not_found(self, client: TestClient):
        assert client.get(f"{API}/guests/9999/history").status_code == 404


class TestPreferencesAndInsights:

    def test_update_preferences_flattens_values(self, client: TestClient, sample_guest):
        payload = {
            "room_floors": [3, "high"],
            "meal_types": [{"name": "Vegetarian"}, {"value": "Halal"}],
            "special_requests": [["Extra pillows"], {"code": 7}],
        }

        response = client.put(f"{API}/guests/{sample_guest.id}/preferences", json=payload)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["room_floors"] == ["3", "high"]
        assert data["meal_types"] == ["Vegetarian", "Halal"]
        assert data["special_requests"] == ["Extra pillows", '{"code": 7}']
        assert data["room_types"] == []

    def test_update_ai_insights(self, client: TestClient, sample_guest):
        response = client.put(f"{API}/guests/{sample_guest.id}/ai-insights", json={
            "risk_score": "high",
            "recommendations": ["Offer late checkout"],
        })

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["risk_score"] == "high"
        assert data["recommendations"] == ["Offer late checkout"]

        fetched = client.get(f"{API}/guests/{sample_guest.id}/ai-insights").json()["data"]
        assert fetched["risk_score"] == "high"

    def test_preferences_guest_not_found(self, client: TestClient):
        assert client.get(f"{API}/guests/9999/preferences").status_code == 404
        assert client.get(f"{API}/guests/9999/ai-insights").status_code == 404
