"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return
``None`` or omit rows instead of raising.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import structlog

from django.db import transaction
from django.utils import timezone

from modules.core.identifiers import to_uuid, to_uuids
from modules.products.dtos import ProductQuantityDTO
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        pk = to_uuid(id)
        if pk is None:
            return None
        return Product.objects.filter(id=pk).first()

    def normalize_id(self, id: str) -> str:
        """Canonical hyphenated lower-case form of a UUID spelling.

        Upper-case, braced, hyphen-less and ``urn:uuid:`` spellings all
        collapse to ``str(UUID)``; malformed ids come back unchanged.
        """
        pk = to_uuid(id)
        return str(pk) if pk is not None else id

    def find_all_by_id(self, ids: Sequence[str]) -> List[Product]:
        """Retrieve the existing products among ``ids`` with a row lock.

        Rows are locked with ``SELECT ... FOR UPDATE`` in primary-key
        order so two orders touching the same products cannot deadlock,
        and the stock read here cannot change until the caller's
        transaction ends.  Must run inside ``transaction.atomic``.
        """
        pks = to_uuids(ids)
        if not pks:
            return []
        return list(
            Product.objects.select_for_update().filter(id__in=pks).order_by("id")
        )

    @transaction.atomic
    def update_quantity(self, updates: Sequence[ProductQuantityDTO]) -> None:
        """Write the new stock levels; all or nothing."""
        now = timezone.now()
        for update in updates:
            Product.objects.filter(id=update.id).update(
                quantity=update.quantity, updated_at=now
            )

        logger.info(
            "product.quantities_updated",
            products={update.id: update.quantity for update in updates},
        )
