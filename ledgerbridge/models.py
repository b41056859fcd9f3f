"""Pydantic models for export-plan resolution.

Inputs:
- ExportRequest: what the operator asked for on the command line
- StorageConfig: datastore section of the config document, narrowed to
  typed backend params (GCSParams, S3Params, FilesystemParams) on validation

Outputs (immutable once built):
- NetworkConfig: preset + explicit overrides, merged
- ResolvedExportPlan: validated, boundary-aligned range handed to the exporter
- EngineConfig: parameters the streaming engine is launched with
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ledgerbridge.storage.params import BackendParams
from ledgerbridge.storage.schema import MAX_LEDGER_SEQUENCE, DataStoreSchema

# Ledger 1 is genesis and is never exported on its own.
MIN_EXPORT_LEDGER = 2

DEFAULT_CHECKPOINT_FREQUENCY = 64
DEFAULT_USER_AGENT = "ledgerbridge"


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


class ExportMode(str, Enum):
    """How the exporter treats the requested range."""

    SCAN_AND_FILL = "scan-and-fill"
    APPEND = "append"

    @property
    def display_name(self) -> str:
        return "Scan and Fill" if self is ExportMode.SCAN_AND_FILL else "Append"

    @property
    def resumable(self) -> bool:
        """Append continues from wherever the dataset last stopped."""
        return self is ExportMode.APPEND


class ExportRequest(BaseModel):
    """Operator request. ``end_ledger == 0`` means unbounded."""

    model_config = ConfigDict(frozen=True)

    start_ledger: int = Field(ge=0, le=MAX_LEDGER_SEQUENCE)
    end_ledger: int = Field(default=0, ge=0, le=MAX_LEDGER_SEQUENCE)
    mode: ExportMode
    config_path: str


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


class StorageConfig(BaseModel):
    """Datastore section: backend kind, free-form params, partition schema."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    kind: str = Field(default="", alias="type")
    params: dict[str, str] = Field(default_factory=dict)
    partition_schema: DataStoreSchema = Field(
        default_factory=DataStoreSchema, alias="schema"
    )


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------


class NetworkName(str, Enum):
    NONE = ""
    PUBLIC = "pubnet"
    TEST = "testnet"


class NetworkConfig(BaseModel):
    """Fully resolved network settings; passphrase and archives never empty."""

    model_config = ConfigDict(frozen=True)

    name: NetworkName = NetworkName.NONE
    passphrase: str = Field(min_length=1)
    archive_urls: tuple[str, ...] = Field(min_length=1)
    checkpoint_frequency: int = Field(default=0, ge=0)
    binary_path: str = ""
    core_config_payload: bytes = b""
    storage_path: str = ""
    user_agent: str = DEFAULT_USER_AGENT


# ---------------------------------------------------------------------------
# Combined config + outputs
# ---------------------------------------------------------------------------


class LedgerRange(BaseModel):
    """Boundary-aligned export range. ``end == 0`` means unbounded."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int = 0

    @property
    def bounded(self) -> bool:
        return self.end != 0


class ExportConfig(BaseModel):
    """Everything read from the request and config document, pre-range."""

    model_config = ConfigDict(frozen=True)

    request: ExportRequest
    admin_port: int = 0
    network: NetworkConfig
    storage: StorageConfig
    storage_params: BackendParams


class EngineConfig(BaseModel):
    """Launch parameters for the external streaming engine."""

    model_config = ConfigDict(frozen=True)

    binary_path: str
    network_passphrase: str
    history_archive_urls: tuple[str, ...]
    checkpoint_frequency: int = DEFAULT_CHECKPOINT_FREQUENCY
    toml: dict[str, Any] = Field(default_factory=dict)
    user_agent: str = DEFAULT_USER_AGENT
    use_db: bool = True
    storage_path: str = ""
    core_version: str = ""


class ResolvedExportPlan(BaseModel):
    """Final plan handed to the export pipeline. Never mutated after build."""

    model_config = ConfigDict(frozen=True)

    start_ledger: int
    end_ledger: int = 0
    mode: ExportMode
    network: NetworkConfig
    storage: StorageConfig
    storage_params: BackendParams
    core_version: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def resumable(self) -> bool:
        return self.mode.resumable


__all__ = [
    "DEFAULT_CHECKPOINT_FREQUENCY",
    "DEFAULT_USER_AGENT",
    "MIN_EXPORT_LEDGER",
    "EngineConfig",
    "ExportConfig",
    "ExportMode",
    "ExportRequest",
    "LedgerRange",
    "NetworkConfig",
    "NetworkName",
    "ResolvedExportPlan",
    "StorageConfig",
]
