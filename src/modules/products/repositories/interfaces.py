"""Product repository interface.

Extends ``IRepository[Product]`` with the batch look-up and the batch
stock update required by order creation.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional, Sequence

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.dtos import ProductQuantityDTO
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by id, or ``None`` when it does not exist."""

    @abstractmethod
    def normalize_id(self, id: str) -> str:
        """Return the canonical spelling of ``id`` used as the product's key.

        Two spellings that address the same product normalise to the same
        string; ids the store cannot parse are returned unchanged.
        """

    @abstractmethod
    def find_all_by_id(self, ids: Sequence[str]) -> List[Product]:
        """Retrieve every existing product among ``ids``.

        Missing (or malformed) ids are silently omitted: the result is
        the subset that exists, so callers compare it against ``ids``.
        """

    @abstractmethod
    def update_quantity(self, updates: Sequence[ProductQuantityDTO]) -> None:
        """Set the stock level of several products in one call."""
