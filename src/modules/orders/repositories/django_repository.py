"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
``create`` is wrapped in ``transaction.atomic()`` so the Order
aggregate (Order + OrderProducts) is persisted atomically.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

import structlog
from django.db import transaction

from modules.core.identifiers import to_uuid
from modules.orders.models import Order, OrderProduct
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its line items atomically.

        ``data`` keys:
        - ``customer`` (required): a persisted ``Customer``
        - ``products`` (required): list of dicts with ``product_id``,
          ``quantity``, ``price``
        """
        order = Order(customer=data["customer"])
        order.save()

        lines = [
            OrderProduct(
                order=order,
                product_id=line["product_id"],
                quantity=line["quantity"],
                price=line["price"],
            )
            for line in data.get("products", [])
        ]
        OrderProduct.objects.bulk_create(lines)

        order.total_amount = sum((line.subtotal for line in lines), Decimal("0.00"))
        order.save(update_fields=["total_amount"])

        logger.info(
            "order.persisted",
            order_id=str(order.id),
            line_count=len(lines),
            total_amount=str(order.total_amount),
        )
        return self.find_by_id(str(order.id)) or order

    def find_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with eager-loaded relations.

        Uses ``select_related`` for the customer FK and
        ``prefetch_related`` for the line items.  Returns ``None`` for
        non-existent or malformed IDs.
        """
        pk = to_uuid(id)
        if pk is None:
            return None
        return (
            Order.objects.select_related("customer")
            .prefetch_related("order_products")
            .filter(id=pk)
            .first()
        )
