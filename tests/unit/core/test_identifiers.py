from __future__ import annotations

from uuid import UUID, uuid4

import pytest

from modules.core.identifiers import to_uuid, to_uuids

pytestmark = pytest.mark.unit


class TestToUuid:
    def test_parses_string(self):
        value = uuid4()
        assert to_uuid(str(value)) == value

    def test_passes_uuid_through(self):
        value = uuid4()
        assert to_uuid(value) is value

    @pytest.mark.parametrize("raw", [None, "", "C1", "not-a-uuid"])
    def test_malformed_is_none(self, raw):
        assert to_uuid(raw) is None

    def test_to_uuids_drops_malformed_and_keeps_order(self):
        a, b = uuid4(), uuid4()
        assert to_uuids([str(b), "P9", str(a)]) == [b, a]
        assert all(isinstance(v, UUID) for v in to_uuids([str(a)]))
