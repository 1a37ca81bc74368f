"""
客房送餐订单 API 测试
"""
from fastapi.testclient import TestClient

from hotelops.config import settings

API = "/api/v1"


def _order(reservation, items, **overrides):
    payload = {
        "reservation_id": reservation.id,
        "guest_id": reservation.guest_id,
        "items": items,
    }
    payload.update(overrides)
    return payload


class TestCreateOrder:

    def test_order_totals(self, client: TestClient, sample_reservation, sample_menu_items):
        sandwich, juice, _ = sample_menu_items

        response = client.post(f"{API}/room-service-orders", json=_order(sample_reservation, [
            {"menu_item_id": sandwich.id, "quantity": 2},
            {"menu_item_id": juice.id, "quantity": 3},
        ], special_notes="No onions"))

        assert response.status_code == 201
        data = response.json()["data"]
        # 12.5 * 2 + 4.25 * 3
        assert data["subtotal"] == 37.75
        assert data["delivery_fee"] == settings.DELIVERY_FEE
        assert data["total"] == round(37.75 + settings.DELIVERY_FEE, 2)
        assert data["status"] == "pending"
        assert data["order_id"].startswith("RS-")
        assert data["items"][0] == {
            "id": sandwich.id, "name": "Club Sandwich", "price": 12.5, "quantity": 2
        }

    def test_line_items_snapshot_price(self, client: TestClient, sample_reservation, sample_menu_items):
        sandwich = sample_menu_items[0]
        order_id = client.post(f"{API}/room-service-orders", json=_order(sample_reservation, [
            {"menu_item_id": sandwich.id, "quantity": 1},
        ])).json()["data"]["id"]

        client.put(f"{API}/menu-items/{sandwich.id}", json={"price": 99.0})
        data = client.get(f"{API}/room-service-orders/{order_id}").json()["data"]

        assert data["items"][0]["price"] == 12.5
        assert data["subtotal"] == 12.5

    def test_unavailable_item_rejected(self, client: TestClient, sample_reservation, sample_menu_items):
        lobster = sample_menu_items[2]

        response = client.post(f"{API}/room-service-orders", json=_order(sample_reservation, [
            {"menu_item_id": lobster.id, "quantity": 1},
        ]))

        assert response.status_code == 400

    def test_unknown_item_rejected(self, client: TestClient, sample_reservation, sample_menu_items):
        response = client.post(f"{API}/room-service-orders", json=_order(sample_reservation, [
            {"menu_item_id": 9999, "quantity": 1},
        ]))

        assert response.status_code == 404

    def test_zero_quantity_rejected(self, client: TestClient, sample_reservation, sample_menu_items):
        response = client.post(f"{API}/room-service-orders", json=_order(sample_reservation, [
            {"menu_item_id": sample_menu_items[0].id, "quantity": 0},
        ]))

        assert response.status_code == 400

    def test_empty_items_rejected(self, client: TestClient, sample_reservation):
        response = client.post(f"{API}/room-service-orders", json=_order(sample_reservation, []))

        assert response.status_code == 400


class TestOrderStatus:

    def test_delivered_sets_delivered_at(self, client: TestClient, sample_reservation, sample_menu_items):
        order_id = client.post(f"{API}/room-service-orders", json=_order(sample_reservation, [
            {"menu_item_id": sample_menu_items[0].id, "quantity": 1},
        ])).json()["data"]["id"]

        preparing = client.put(f"{API}/room-service-orders/{order_id}/status", json={"status": "preparing"})
        delivered = client.put(f"{API}/room-service-orders/{order_id}/status", json={"status": "delivered"})
        again = client.put(f"{API}/room-service-orders/{order_id}/status", json={"status": "delivered"})

        assert preparing.json()["data"]["delivered_at"] is None
        delivered_at = delivered.json()["data"]["delivered_at"]
        assert delivered_at is not None
        assert again.json()["data"]["delivered_at"] == delivered_at

    def test_status_update_not_found(self, client: TestClient):
        response = client.put(f"{API}/room-service-orders/9999/status", json={"status": "delivered"})

        assert response.status_code == 404

    def test_list_by_reservation(self, client: TestClient, sample_reservation, sample_menu_items):
        client.post(f"{API}/room-service-orders", json=_order(sample_reservation, [
            {"menu_item_id": sample_menu_items[0].id, "quantity": 1},
        ]))

        body = client.get(f"{API}/room-service-orders/reservation/{sample_reservation.id}").json()

        assert body["meta"]["total"] == 1
