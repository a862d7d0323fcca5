"""Menu changes reach Ordering's price list through the running app."""

from decimal import Decimal

import pytest


@pytest.fixture()
def flat_white(client):
    response = client.post("/categories", json={"name": "Espresso Drinks"})
    assert response.status_code == 201
    category_id = response.json()["category_id"]

    response = client.post(
        "/coffee-items",
        json={
            "name": "Flat White",
            "description": "Double ristretto with steamed milk",
            "price": "3.80",
            "category_id": category_id,
        },
    )
    assert response.status_code == 201
    return response.json()["coffee_item_id"]


def _place_order(client, coffee_item_id, quantity=1):
    return client.post(
        "/orders",
        json={
            "customer_id": "cust-001",
            "items": [{"coffee_item_id": coffee_item_id, "quantity": quantity}],
        },
    )


class TestOrderingFromTheMenu:
    def test_new_menu_item_can_be_ordered(self, client, flat_white):
        response = _place_order(client, flat_white, quantity=2)
        assert response.status_code == 201

        order = client.get(f"/orders/{response.json()['order_id']}").json()
        assert Decimal(order["total_price"]) == Decimal("7.60")
        assert Decimal(order["lines"][0]["unit_price"]) == Decimal("3.80")

    def test_price_change_applies_to_later_orders(self, client, flat_white):
        first = _place_order(client, flat_white).json()["order_id"]

        response = client.put(f"/coffee-items/{flat_white}/price", json={"price": "4.20"})
        assert response.status_code == 200

        second = _place_order(client, flat_white).json()["order_id"]

        assert Decimal(client.get(f"/orders/{first}").json()["total_price"]) == Decimal("3.80")
        assert Decimal(client.get(f"/orders/{second}").json()["total_price"]) == Decimal("4.20")

    def test_item_taken_off_sale_cannot_be_ordered(self, client, flat_white):
        response = client.put(f"/coffee-items/{flat_white}/availability", json={"is_available": False})
        assert response.status_code == 200

        response = _place_order(client, flat_white)
        assert response.status_code == 400
        assert "items" in response.json()["error"]

    def test_detail_edits_are_not_relayed(self, client, flat_white):
        response = client.put(
            f"/coffee-items/{flat_white}",
            json={"name": "Flat White", "description": "Oat milk on request", "price": "3.80"},
        )
        assert response.status_code == 200

        assert _place_order(client, flat_white).status_code == 201

    def test_health_lists_both_domains(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert set(response.json()["domains"]) == {"menu", "ordering"}
