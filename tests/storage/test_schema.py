"""Tests for datastore boundary arithmetic and object keys."""

import pytest

from ledgerbridge.storage.schema import DataStoreSchema


@pytest.fixture
def schema():
    return DataStoreSchema(ledgers_per_file=10, files_per_partition=5)


class TestBoundaries:

    def test_start_rounds_down(self, schema):
        assert schema.start_boundary(23) == 20

    def test_end_rounds_up(self, schema):
        assert schema.end_boundary(57) == 60

    @pytest.mark.parametrize("ledger", [0, 10, 20, 640])
    def test_aligned_values_unchanged(self, schema, ledger):
        assert schema.start_boundary(ledger) == ledger
        assert schema.end_boundary(ledger) == ledger

    def test_realigning_is_noop(self, schema):
        once = schema.end_boundary(57)
        assert schema.end_boundary(once) == once
        start = schema.start_boundary(23)
        assert schema.start_boundary(start) == start

    def test_single_ledger_files_are_identity(self):
        schema = DataStoreSchema(ledgers_per_file=1, files_per_partition=64000)
        assert schema.start_boundary(12345) == 12345
        assert schema.end_boundary(12345) == 12345

    def test_zero_ledgers_per_file(self):
        schema = DataStoreSchema()
        assert schema.start_boundary(99) == 0
        assert schema.end_boundary(99) == 99


class TestObjectKey:

    def test_partitioned_key(self, schema):
        # partition 0-49, file 20-29
        assert schema.object_key(23) == "FFFFFFFF--0-49/FFFFFFEB--20-29.xdr.zstd"

    def test_unpartitioned_key(self):
        schema = DataStoreSchema(ledgers_per_file=64, files_per_partition=1)
        assert schema.object_key(130) == "FFFFFF7F--128-191.xdr.zstd"

    def test_single_ledger_file_has_no_range_suffix(self):
        schema = DataStoreSchema(ledgers_per_file=1, files_per_partition=1)
        assert schema.object_key(5) == "FFFFFFFA--5.xdr.zstd"

    def test_newer_ledgers_sort_first(self, schema):
        assert schema.object_key(500) < schema.object_key(20)
