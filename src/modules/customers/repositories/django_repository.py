"""Django ORM implementation of the Customer repository.

Error handling follows the Null Object pattern: methods return ``None``
instead of raising — the Service Layer decides how to translate a
missing customer into a domain error.
"""

from __future__ import annotations

from typing import Optional

from modules.core.identifiers import to_uuid
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def find_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        pk = to_uuid(id)
        if pk is None:
            return None
        return Customer.objects.filter(id=pk).first()
