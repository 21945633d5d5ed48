"""Customer repository interface.

The order workflow reaches customers exclusively through this contract.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def find_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a customer by id, or ``None`` when it does not exist."""
