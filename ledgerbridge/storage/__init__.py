"""Datastore schema and config validation."""

from .schema import FILE_SUFFIX, MAX_LEDGER_SEQUENCE, DataStoreSchema

__all__ = ["FILE_SUFFIX", "MAX_LEDGER_SEQUENCE", "DataStoreSchema"]
