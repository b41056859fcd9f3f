"""Ledger range validation and datastore boundary alignment.

Validation runs before alignment and the first failure wins:

1. start >= 2 (ledger 1 is genesis)
2. scan-and-fill needs a bounded end
3. a bounded end is strictly after start
4. both ends lie under the network ceiling, which is the latest ledger plus
   two checkpoints of slack for ledgers not yet checkpoint-finalized

Alignment then widens the range to whole files: start rounds down (floored
at 2 afterwards), a bounded end rounds up.
"""

from __future__ import annotations

import asyncio
from typing import Any

import bittensor as bt

from ledgerbridge.errors import RangeError, RangeReason
from ledgerbridge.models import MIN_EXPORT_LEDGER, ExportMode, LedgerRange
from ledgerbridge.storage.schema import DataStoreSchema

from .provider import NetworkStateProvider

# Checkpoints of slack past the latest ledger.
CEILING_CHECKPOINTS = 2


def align_range(start: int, end: int, schema: DataStoreSchema) -> LedgerRange:
    """Widen ``[start, end]`` to file boundaries. Idempotent."""
    aligned_start = max(MIN_EXPORT_LEDGER, schema.start_boundary(start))
    aligned_end = schema.end_boundary(end) if end != 0 else 0
    return LedgerRange(start=aligned_start, end=aligned_end)


def _check_request(start: int, end: int, mode: ExportMode) -> None:
    if start < MIN_EXPORT_LEDGER:
        raise RangeError(
            RangeReason.START_TOO_LOW,
            "invalid start value, must be greater than one",
            start=start,
        )
    if mode is ExportMode.SCAN_AND_FILL and end == 0:
        raise RangeError(
            RangeReason.UNBOUNDED_NOT_ALLOWED,
            "invalid end value, unbounded mode not supported, end must be greater than start",
            mode=mode.value,
            end=end,
        )
    if end != 0 and end <= start:
        raise RangeError(
            RangeReason.END_NOT_AFTER_START,
            "invalid end value, must be greater than start",
            start=start,
            end=end,
        )


async def _latest_ledger(provider: NetworkStateProvider, timeout: float | None) -> int:
    try:
        return await asyncio.wait_for(provider.latest_ledger_sequence(), timeout)
    except asyncio.TimeoutError as e:
        raise RangeError(
            RangeReason.NETWORK_STATE_UNAVAILABLE,
            "timed out retrieving the latest ledger sequence",
            timeout=timeout,
        ) from e
    except Exception as e:
        raise RangeError(
            RangeReason.NETWORK_STATE_UNAVAILABLE,
            "failed to retrieve the latest ledger sequence from history archives",
            error=str(e),
        ) from e


async def resolve_range(
    start: int,
    end: int,
    mode: ExportMode,
    schema: DataStoreSchema,
    provider: NetworkStateProvider,
    *,
    timeout: float | None = None,
    logger: Any = None,
) -> LedgerRange:
    """Validate a requested range against mode rules and the network tip.

    Args:
        start: Requested first ledger.
        end: Requested last ledger, 0 for unbounded.
        mode: Export mode.
        schema: Datastore partitioning schema used for alignment.
        provider: Source of the latest ledger and checkpoint frequency.
        timeout: Deadline in seconds for the network-state query.

    Returns:
        The file-boundary aligned range.

    Raises:
        RangeError: on the first rule the request breaks.
    """
    log = logger or bt.logging
    _check_request(start, end, mode)

    latest = await _latest_ledger(provider, timeout)
    ceiling = latest + CEILING_CHECKPOINTS * provider.checkpoint_frequency()
    log.info({"range_resolver": {"latest_ledger": latest, "ceiling": ceiling}})

    if start > ceiling:
        raise RangeError(
            RangeReason.START_BEYOND_NETWORK,
            f"start {start} exceeds latest network ledger {ceiling}",
            start=start,
            ceiling=ceiling,
        )
    if end != 0 and end > ceiling:
        raise RangeError(
            RangeReason.END_BEYOND_NETWORK,
            f"end {end} exceeds latest network ledger {ceiling}",
            end=end,
            ceiling=ceiling,
        )

    aligned = align_range(start, end, schema)
    log.info({
        "range_resolver": {
            "requested": {"start": start, "end": end},
            "effective": {"start": aligned.start, "end": aligned.end},
        }
    })
    return aligned


__all__ = ["CEILING_CHECKPOINTS", "align_range", "resolve_range"]
