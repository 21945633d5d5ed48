"""Helpers for opaque entity identifiers.

Callers hand identifiers around as strings; the ORM stores UUIDs.
Malformed values are treated as "no such entity" by the repositories.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Union
from uuid import UUID


def to_uuid(value: Union[str, UUID, None]) -> Optional[UUID]:
    """Return ``value`` as a ``UUID`` or ``None`` when it is not one."""
    if value is None:
        return None
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def to_uuids(values: Iterable[Union[str, UUID]]) -> List[UUID]:
    """Parse ``values`` keeping only well-formed UUIDs (order preserved)."""
    parsed = (to_uuid(value) for value in values)
    return [value for value in parsed if value is not None]
