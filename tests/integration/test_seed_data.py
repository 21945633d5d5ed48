"""Integration test for the ``seed_data`` management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.customers.models import Customer
from modules.orders.models import Order
from modules.products.models import Product

pytestmark = pytest.mark.integration


class TestSeedData:
    def test_seeds_customers_products_and_orders(self):
        out = StringIO()

        call_command("seed_data", "--orders", "5", stdout=out)

        assert Customer.objects.count() == 5
        assert Product.objects.count() == 10
        assert Order.objects.count() == 5
        assert all(order.total_amount > 0 for order in Order.objects.all())
        assert "Seed completed" in out.getvalue()

    def test_is_idempotent_for_catalog(self):
        call_command("seed_data", "--orders", "0", stdout=StringIO())
        call_command("seed_data", "--orders", "0", stdout=StringIO())

        assert Customer.objects.count() == 5
        assert Product.objects.count() == 10
        assert Order.objects.count() == 0
