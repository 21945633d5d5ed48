"""Order repository interface.

Extends ``IRepository[Order]`` with the single mutation the order
workflow performs: creating an order together with its line items.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The Order aggregate includes its OrderProduct children; creating it
    must be atomic.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its line items atomically.

        ``data`` must include ``customer`` (the resolved customer) and
        ``products`` (list of dicts with ``product_id``, ``quantity``
        and ``price``).
        """

    @abstractmethod
    def find_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with its customer and line items."""
