"""Integration tests for the order creation endpoint.

Covers:
- Success 201: order payload with customer, line items and total.
- Validation 400: malformed payloads rendered in the standard envelope.
- Business 400: every order rejection rendered in the standard envelope.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from modules.customers.models import Customer
from modules.orders.models import Order
from modules.products.models import Product

pytestmark = pytest.mark.integration

URL = "/api/v1/orders/"


@pytest.fixture()
def customer():
    return Customer.objects.create(name="API Customer", email="api@example.com")


@pytest.fixture()
def p1():
    return Product.objects.create(name="API P1", price=Decimal("10.00"), quantity=5)


@pytest.fixture()
def p2():
    return Product.objects.create(name="API P2", price=Decimal("20.00"), quantity=2)


def _payload(customer_id, *lines):
    return {
        "customer_id": str(customer_id),
        "products": [{"id": str(pid), "quantity": qty} for pid, qty in lines],
    }


def _error(response):
    data = response.json()
    assert data["type"] == "client_error"
    return data["errors"][0]


class TestCreateOrderSuccess:
    def test_returns_201_with_order(self, api_client, customer, p1, p2):
        response = api_client.post(
            URL, _payload(customer.id, (p1.id, 2), (p2.id, 1)), format="json"
        )

        assert response.status_code == 201
        data = response.json()
        assert data["customer"] == {
            "id": str(customer.id),
            "name": "API Customer",
            "email": "api@example.com",
        }
        lines = {line["product_id"]: line for line in data["order_products"]}
        assert lines[str(p1.id)]["quantity"] == 2
        assert Decimal(lines[str(p1.id)]["price"]) == Decimal("10.00")
        assert lines[str(p2.id)]["quantity"] == 1
        assert Decimal(lines[str(p2.id)]["price"]) == Decimal("20.00")
        assert Decimal(data["total_amount"]) == Decimal("40.00")

    def test_stock_is_decremented(self, api_client, customer, p1, p2):
        api_client.post(URL, _payload(customer.id, (p1.id, 2), (p2.id, 1)), format="json")

        p1.refresh_from_db()
        p2.refresh_from_db()
        assert (p1.quantity, p2.quantity) == (3, 1)

    def test_echoes_request_id(self, api_client, customer, p1):
        response = api_client.post(
            URL,
            _payload(customer.id, (p1.id, 1)),
            format="json",
            HTTP_X_REQUEST_ID="order-req-1",
        )

        assert response["X-Request-ID"] == "order-req-1"


class TestCreateOrderRejected:
    def test_unknown_customer(self, api_client, p1):
        response = api_client.post(URL, _payload(uuid4(), (p1.id, 1)), format="json")

        assert response.status_code == 400
        error = _error(response)
        assert error["code"] == "customer_not_found"
        assert error["detail"] == "Could not find any customer with the given id."

    def test_no_products_found(self, api_client, customer):
        response = api_client.post(URL, _payload(customer.id, (uuid4(), 1)), format="json")

        assert response.status_code == 400
        assert _error(response)["code"] == "no_products_found"

    def test_product_not_found(self, api_client, customer, p1):
        missing = uuid4()
        response = api_client.post(
            URL, _payload(customer.id, (p1.id, 1), (missing, 1)), format="json"
        )

        assert response.status_code == 400
        assert _error(response)["detail"] == f"Could not find product {missing}."

    def test_insufficient_stock(self, api_client, customer, p1):
        response = api_client.post(URL, _payload(customer.id, (p1.id, 10)), format="json")

        assert response.status_code == 400
        error = _error(response)
        assert error["code"] == "insufficient_stock"
        assert error["detail"] == (
            f"The quantity 10 is not available for {p1.id} (available: 5)."
        )
        assert Order.objects.count() == 0
        p1.refresh_from_db()
        assert p1.quantity == 5


class TestCreateOrderValidation:
    def test_empty_products(self, api_client, customer):
        response = api_client.post(URL, _payload(customer.id), format="json")

        assert response.status_code == 400
        assert _error(response)["attr"] == "products"

    def test_zero_quantity(self, api_client, customer, p1):
        response = api_client.post(URL, _payload(customer.id, (p1.id, 0)), format="json")

        assert response.status_code == 400
        assert _error(response)["attr"] == "products.0.quantity"

    def test_malformed_customer_id(self, api_client, p1):
        response = api_client.post(URL, _payload("C1", (p1.id, 1)), format="json")

        assert response.status_code == 400
        assert _error(response)["attr"] == "customer_id"

    def test_malformed_json(self, api_client):
        response = api_client.post(URL, data="{", content_type="application/json")

        assert response.status_code == 400
        assert _error(response)["code"] == "parse_error"

    def test_get_is_not_allowed(self, api_client):
        response = api_client.get(URL)

        assert response.status_code == 405
        assert _error(response)["code"] == "method_not_allowed"
