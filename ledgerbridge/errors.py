"""Error taxonomy for export-plan resolution.

Every failure carries a reason code plus the context needed to act on it
from a command line (field name, offending value, computed ceiling, ...).
None of these are retried: a misconfigured export stops at startup.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ExportError(Exception):
    """Base class for all resolution failures."""

    def __init__(self, reason: Enum, message: str, **context: Any):
        self.reason = reason
        self.message = message
        self.context = context
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} ({details})"


# ---------------------------------------------------------------------------
# Storage config shape
# ---------------------------------------------------------------------------


class ValidationReason(str, Enum):
    MISSING_KIND = "MISSING_KIND"
    MISSING_PARAMETER = "MISSING_PARAMETER"
    UNSUPPORTED_KIND = "UNSUPPORTED_KIND"
    INVALID_SCHEMA = "INVALID_SCHEMA"


class ValidationError(ExportError):
    """Datastore configuration is unusable."""


# ---------------------------------------------------------------------------
# Config document parse / merge
# ---------------------------------------------------------------------------


class ConfigReason(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    PARSE_FAILURE = "PARSE_FAILURE"
    INCOMPLETE_NETWORK_CONFIG = "INCOMPLETE_NETWORK_CONFIG"
    UNKNOWN_NETWORK = "UNKNOWN_NETWORK"
    CONFIG_FILE_UNREADABLE = "CONFIG_FILE_UNREADABLE"


class ConfigError(ExportError):
    """Config document could not be read or merged."""


# ---------------------------------------------------------------------------
# Ledger range legality
# ---------------------------------------------------------------------------


class RangeReason(str, Enum):
    START_TOO_LOW = "START_TOO_LOW"
    UNBOUNDED_NOT_ALLOWED = "UNBOUNDED_NOT_ALLOWED"
    END_NOT_AFTER_START = "END_NOT_AFTER_START"
    NETWORK_STATE_UNAVAILABLE = "NETWORK_STATE_UNAVAILABLE"
    START_BEYOND_NETWORK = "START_BEYOND_NETWORK"
    END_BEYOND_NETWORK = "END_BEYOND_NETWORK"


class RangeError(ExportError):
    """Requested ledger range is illegal for the mode or the network."""


# ---------------------------------------------------------------------------
# Engine config assembly
# ---------------------------------------------------------------------------


class BuildReason(str, Enum):
    NO_BINARY_PATH = "NO_BINARY_PATH"
    VERSION_LOOKUP_FAILED = "VERSION_LOOKUP_FAILED"
    INVALID_ENGINE_CONFIG = "INVALID_ENGINE_CONFIG"


class BuildError(ExportError):
    """Streaming-engine parameters could not be assembled."""


__all__ = [
    "BuildError",
    "BuildReason",
    "ConfigError",
    "ConfigReason",
    "ExportError",
    "RangeError",
    "RangeReason",
    "ValidationError",
    "ValidationReason",
]
