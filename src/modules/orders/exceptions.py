"""Order domain exceptions.

Raised by ``OrderService`` when an order cannot be created.  They are
all the same kind of failure — an ``AppError`` with a readable
message — and differ only in the details they carry.  The API layer
renders them through ``modules.core.exceptions.api_exception_handler``.
"""

from __future__ import annotations

from modules.core.exceptions import AppError


class OrderCreationError(AppError):
    """Base class for every reason an order is rejected."""

    default_code = "order_rejected"


class CustomerNotFound(OrderCreationError):
    """The customer referenced by the order does not exist."""

    default_code = "customer_not_found"

    def __init__(self, customer_id: str) -> None:
        super().__init__("Could not find any customer with the given id.")
        self.customer_id = customer_id


class NoProductsFound(OrderCreationError):
    """None of the requested products exist."""

    default_code = "no_products_found"

    def __init__(self) -> None:
        super().__init__("Could not find any products with the given ids.")


class ProductNotFound(OrderCreationError):
    """A requested product does not exist (first one in request order)."""

    default_code = "product_not_found"

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Could not find product {product_id}.")
        self.product_id = product_id


class InsufficientStock(OrderCreationError):
    """Requested quantity exceeds the product's current stock."""

    default_code = "insufficient_stock"

    def __init__(self, product_id: str, requested: int, available: int) -> None:
        super().__init__(
            f"The quantity {requested} is not available for {product_id} "
            f"(available: {available})."
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available
