"""Datastore partitioning schema and ledger boundary arithmetic.

Ledgers are written in fixed-size contiguous blocks (one block per file),
and files are grouped into partitions. Object keys embed the inverted
start sequence so that a lexical listing returns the newest data first:

  {FFFFFFFF-partStart:08X}--{partStart}-{partEnd}/{FFFFFFFF-fileStart:08X}--{fileStart}-{fileEnd}.xdr.zstd
"""

from __future__ import annotations

from pydantic import BaseModel, Field

MAX_LEDGER_SEQUENCE = 0xFFFFFFFF
FILE_SUFFIX = ".xdr.zstd"


class DataStoreSchema(BaseModel):
    """How ledgers map onto files and files onto partitions."""

    ledgers_per_file: int = Field(default=0, ge=0)
    files_per_partition: int = Field(default=0, ge=0)

    @property
    def partition_size(self) -> int:
        return self.ledgers_per_file * self.files_per_partition

    def start_boundary(self, ledger: int) -> int:
        """Round a ledger down to the first ledger of its file."""
        if self.ledgers_per_file == 0:
            return 0
        return (ledger // self.ledgers_per_file) * self.ledgers_per_file

    def end_boundary(self, ledger: int) -> int:
        """Round a ledger up to the next file boundary (no-op when aligned)."""
        if self.ledgers_per_file == 0:
            return ledger
        return -(-ledger // self.ledgers_per_file) * self.ledgers_per_file

    def object_key(self, ledger: int) -> str:
        """Object key of the file holding ``ledger``."""
        key = ""
        if self.files_per_partition > 1:
            size = self.partition_size
            part_start = (ledger // size) * size
            part_end = part_start + size - 1
            key = f"{MAX_LEDGER_SEQUENCE - part_start:08X}--{part_start}-{part_end}/"

        file_start = self.start_boundary(ledger)
        file_end = file_start + max(self.ledgers_per_file, 1) - 1
        key += f"{MAX_LEDGER_SEQUENCE - file_start:08X}--{file_start}"
        if file_start != file_end:
            key += f"-{file_end}"
        return key + FILE_SUFFIX


__all__ = ["FILE_SUFFIX", "MAX_LEDGER_SEQUENCE", "DataStoreSchema"]
