"""Export-plan resolution for ledger datastore exports.

Turns an operator's export request and config document into:
- ResolvedExportPlan: validated, file-boundary aligned ledger range
- EngineConfig: launch parameters for the streaming engine

Both are immutable and handed to the export pipeline in-process.
"""

from .engine import build_engine_config, read_core_version
from .errors import (
    BuildError,
    BuildReason,
    ConfigError,
    ConfigReason,
    ExportError,
    RangeError,
    RangeReason,
    ValidationError,
    ValidationReason,
)
from .ledger import HistoryArchiveProvider, NetworkStateProvider, align_range, resolve_range
from .models import (
    EngineConfig,
    ExportConfig,
    ExportMode,
    ExportRequest,
    LedgerRange,
    NetworkConfig,
    NetworkName,
    ResolvedExportPlan,
    StorageConfig,
)
from .network import resolve_layer, resolve_network
from .planner import ExportPlanner
from .storage import DataStoreSchema
from .storage.validator import validate as validate_storage

__all__ = [
    "BuildError",
    "BuildReason",
    "ConfigError",
    "ConfigReason",
    "DataStoreSchema",
    "EngineConfig",
    "ExportConfig",
    "ExportError",
    "ExportMode",
    "ExportPlanner",
    "ExportRequest",
    "HistoryArchiveProvider",
    "LedgerRange",
    "NetworkConfig",
    "NetworkName",
    "NetworkStateProvider",
    "RangeError",
    "RangeReason",
    "ResolvedExportPlan",
    "StorageConfig",
    "ValidationError",
    "ValidationReason",
    "align_range",
    "build_engine_config",
    "read_core_version",
    "resolve_layer",
    "resolve_network",
    "resolve_range",
    "validate_storage",
]
