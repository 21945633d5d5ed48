"""Order service layer (Use Cases).

Validates and persists a sales order: the customer must exist, every
requested product must exist and have enough stock, line items are
priced from the current catalog, the order is persisted and the stock
of each product is decremented.

The whole use case runs inside one ``transaction.atomic`` block: a
rejected request writes nothing, and a failure while decrementing stock
rolls the freshly created order back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List

import structlog

from django.db import transaction

from modules.orders.dtos import OrderLineRequestDTO
from modules.orders.exceptions import (
    CustomerNotFound,
    InsufficientStock,
    NoProductsFound,
    OrderCreationError,
    ProductNotFound,
)
from modules.products.dtos import ProductQuantityDTO

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def merge_duplicate_lines(
    lines: List[OrderLineRequestDTO],
    normalize_id: Callable[[str], str] = lambda id: id,
) -> List[OrderLineRequestDTO]:
    """Collapse lines naming the same product into one, summing quantities.

    Ids are rewritten with ``normalize_id`` first, so different spellings
    of one product merge.  The merged line keeps the position of the
    product's first occurrence, so "first offending line in request
    order" stays well defined.
    """
    totals: Dict[str, int] = {}
    for line in lines:
        product_id = normalize_id(line.product_id)
        totals[product_id] = totals.get(product_id, 0) + line.quantity
    return [
        OrderLineRequestDTO(product_id=product_id, quantity=quantity)
        for product_id, quantity in totals.items()
    ]


class OrderService:
    """Application service for the order-creation use case.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._product_repo = product_repository

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create an order and decrement the stock of its products.

        Steps, in order:
        1. Resolve the customer.
        2. Merge duplicate lines, then resolve all products in one batch.
        3. Reject unknown products, then lines exceeding stock.
        4. Persist the order with line items priced from the catalog.
        5. Persist the new stock levels in one batch.

        Raises:
            CustomerNotFound: the customer does not exist.
            NoProductsFound: none of the requested products exist.
            ProductNotFound: one requested product does not exist.
            InsufficientStock: a requested quantity exceeds stock.
        """
        log = logger.bind(customer_id=dto.customer_id)
        log.info("order.creation_started", line_count=len(dto.products))

        try:
            customer = self._customer_repo.find_by_id(dto.customer_id)
            if not customer:
                raise CustomerNotFound(dto.customer_id)

            lines = merge_duplicate_lines(
                dto.products, self._product_repo.normalize_id
            )
            catalog = self._resolve_products(lines)
            self._check_stock(lines, catalog)
        except OrderCreationError as exc:
            log.warning("order.rejected", code=exc.code, reason=exc.message)
            raise

        order = self._order_repo.create(
            {
                "customer": customer,
                "products": [
                    {
                        "product_id": catalog[line.product_id].id,
                        "quantity": line.quantity,
                        "price": catalog[line.product_id].price,
                    }
                    for line in lines
                ],
            }
        )

        self._product_repo.update_quantity(
            [
                ProductQuantityDTO(
                    id=str(catalog[line.product_id].id),
                    quantity=catalog[line.product_id].quantity - line.quantity,
                )
                for line in lines
            ]
        )

        log.info("order.created", order_id=str(order.id), line_count=len(lines))
        return order

    # ------------------------------------------------------------------
    # Validation steps
    # ------------------------------------------------------------------

    def _resolve_products(
        self, lines: List[OrderLineRequestDTO]
    ) -> Dict[str, Product]:
        """Fetch the requested products keyed by their normalised id."""
        products = self._product_repo.find_all_by_id(
            [line.product_id for line in lines]
        )
        if not products:
            raise NoProductsFound()

        by_id = {
            self._product_repo.normalize_id(str(product.id)): product
            for product in products
        }
        catalog: Dict[str, Product] = {}
        for line in lines:
            product = by_id.get(line.product_id)
            if product is None:
                raise ProductNotFound(line.product_id)
            catalog[line.product_id] = product
        return catalog

    @staticmethod
    def _check_stock(
        lines: List[OrderLineRequestDTO], catalog: Dict[str, Product]
    ) -> None:
        for line in lines:
            available = catalog[line.product_id].quantity
            if line.quantity > available:
                raise InsufficientStock(line.product_id, line.quantity, available)
