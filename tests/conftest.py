"""Pytest configuration and fixtures"""
import pytest
from fastapi.testclient import TestClient

from shopcart import Cart
from shopcart.database.carts import cart_db


@pytest.fixture
def cart():
    """Empty cart with the default promo codes"""
    return Cart(promo_codes={"PROMO10": 0.10})


@pytest.fixture
def tshirt():
    """A valid line item"""
    return {"id": "1", "name": "T-shirt", "price": 20, "quantity": 2}


@pytest.fixture(autouse=True)
def clear_cart_db():
    """Start every test with no stored carts"""
    cart_db.carts.clear()
    yield
    cart_db.carts.clear()


@pytest.fixture
def client():
    """Test client"""
    from shopcart.main import app

    return TestClient(app)
