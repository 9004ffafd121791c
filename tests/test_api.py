"""Tests for cart API endpoints"""
import pytest

from shopcart.database.carts import cart_db


@pytest.fixture
def cart_id(client):
    """ID of a freshly created cart"""
    response = client.post("/api/cart")
    assert response.status_code == 200
    return response.json()["cart"]["cart_id"]


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_cart(client):
    response = client.post("/api/cart")
    assert response.status_code == 200

    data = response.json()
    assert data["message"] == "Cart created"
    assert data["cart"]["items"] == []
    assert data["cart"]["total"] == 0
    assert cart_db.get_cart(data["cart"]["cart_id"]) is not None


def test_get_unknown_cart(client):
    response = client.get("/api/cart/missing")
    assert response.status_code == 404
    assert response.json()["detail"] == "Cart not found"


def test_add_items_and_get_total(client, cart_id):
    client.post(f"/api/cart/{cart_id}/items", json={"id": "1", "name": "Item 1", "price": 10, "quantity": 2})
    response = client.post(
        f"/api/cart/{cart_id}/items",
        json={"id": "2", "name": "Item 2", "price": 15, "quantity": 1},
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Added 1x Item 2 to cart"

    cart = client.get(f"/api/cart/{cart_id}").json()["cart"]
    assert cart["item_count"] == 3
    assert cart["total"] == pytest.approx(35)


@pytest.mark.parametrize("body", [
    {"id": "1", "name": "Bad", "price": -5, "quantity": 0},
    {"id": "1", "name": "Bad", "price": "10", "quantity": 1},
    {"id": "1", "name": "Bad", "price": 10, "quantity": 2.5},
    {"id": "1", "name": "Bad", "price": 10},
])
def test_add_invalid_item(client, cart_id, body):
    response = client.post(f"/api/cart/{cart_id}/items", json=body)
    assert response.status_code == 422

    cart = client.get(f"/api/cart/{cart_id}").json()["cart"]
    assert cart["item_count"] == 0


def test_add_item_to_unknown_cart(client):
    response = client.post(
        "/api/cart/missing/items",
        json={"id": "1", "name": "Item", "price": 10, "quantity": 1},
    )
    assert response.status_code == 404


def test_remove_item(client, cart_id):
    client.post(f"/api/cart/{cart_id}/items", json={"id": "1", "name": "Item", "price": 10, "quantity": 1})

    response = client.delete(f"/api/cart/{cart_id}/items/1")
    assert response.status_code == 200
    assert response.json()["cart"]["item_count"] == 0


def test_remove_missing_item_is_noop(client, cart_id):
    client.post(f"/api/cart/{cart_id}/items", json={"id": "1", "name": "Item", "price": 10, "quantity": 1})

    response = client.delete(f"/api/cart/{cart_id}/items/not-found")
    assert response.status_code == 200
    assert response.json()["cart"]["item_count"] == 1


def test_apply_discount(client, cart_id):
    client.post(f"/api/cart/{cart_id}/items", json={"id": "1", "name": "Item", "price": 100, "quantity": 1})

    response = client.post(f"/api/cart/{cart_id}/discount", json={"code": "PROMO10"})
    assert response.status_code == 200

    cart = response.json()["cart"]
    assert cart["discount_rate"] == pytest.approx(0.10)
    assert cart["subtotal"] == pytest.approx(100)
    assert cart["total"] == pytest.approx(90)


def test_apply_invalid_discount(client, cart_id):
    client.post(f"/api/cart/{cart_id}/items", json={"id": "1", "name": "Item", "price": 100, "quantity": 1})

    response = client.post(f"/api/cart/{cart_id}/discount", json={"code": "INVALIDE"})
    assert response.status_code == 400
    assert "INVALIDE" in response.json()["detail"]

    cart = client.get(f"/api/cart/{cart_id}").json()["cart"]
    assert cart["total"] == pytest.approx(100)


def test_reset_cart(client, cart_id):
    client.post(f"/api/cart/{cart_id}/items", json={"id": "1", "name": "Item", "price": 100, "quantity": 1})
    client.post(f"/api/cart/{cart_id}/discount", json={"code": "PROMO10"})

    response = client.delete(f"/api/cart/{cart_id}")
    assert response.status_code == 200

    cart = response.json()["cart"]
    assert cart["item_count"] == 0
    assert cart["total"] == 0
    assert cart["discount_rate"] == 0


def test_merge_message_uses_stored_name(client, cart_id):
    client.post(f"/api/cart/{cart_id}/items", json={"id": "1", "name": "T-shirt", "price": 20, "quantity": 1})

    response = client.post(
        f"/api/cart/{cart_id}/items",
        json={"id": "1", "name": "Renamed", "price": 20, "quantity": 2},
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Added 2x T-shirt to cart"
    assert response.json()["cart"]["items"][0]["name"] == "T-shirt"
