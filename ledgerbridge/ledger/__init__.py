"""Ledger range resolution against live network state."""

from .provider import HistoryArchiveProvider, NetworkStateProvider
from .range import align_range, resolve_range

__all__ = ["HistoryArchiveProvider", "NetworkStateProvider", "align_range", "resolve_range"]
