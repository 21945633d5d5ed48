"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``ProductQuantityDTO``: one entry of a batch stock update.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class ProductQuantityDTO(BaseModel):
    """New absolute stock level for a single product."""

    model_config = ConfigDict(frozen=True)

    id: str
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity cannot be negative.")
        return v
