"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``OrderLineRequestDTO``: a requested ``(product, quantity)`` pair.
- ``CreateOrderDTO``: input for order creation (nested lines).
"""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, field_validator


def _clean_identifier(v: Any, label: str) -> str:
    """Accept UUIDs (or anything printable) where an opaque id is expected."""
    if v is None:
        raise ValueError(f"{label} id is required.")
    value = str(v).strip()
    if not value:
        raise ValueError(f"{label} id must not be empty.")
    return value


class OrderLineRequestDTO(BaseModel):
    """Immutable DTO for a single requested line.

    The caller sends ``product_id`` and ``quantity``; the price is
    resolved by the Service Layer from the product catalog.
    """

    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int

    @field_validator("product_id", mode="before")
    @classmethod
    def product_id_must_not_be_empty(cls, v: Any) -> str:
        return _clean_identifier(v, "Product")

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates:
    - ``customer_id`` is a non-empty identifier.
    - ``products`` contains at least one line.

    Duplicate product ids are accepted here; ``OrderService`` merges them.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: str
    products: List[OrderLineRequestDTO]

    @field_validator("customer_id", mode="before")
    @classmethod
    def customer_id_must_not_be_empty(cls, v: Any) -> str:
        return _clean_identifier(v, "Customer")

    @field_validator("products")
    @classmethod
    def products_must_not_be_empty(
        cls, v: List[OrderLineRequestDTO]
    ) -> List[OrderLineRequestDTO]:
        if not v:
            raise ValueError("Order must have at least one product.")
        return v
