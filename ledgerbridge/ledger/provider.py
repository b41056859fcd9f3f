"""Network-state providers - where the range resolver learns the chain tip.

Implementations: HistoryArchiveProvider (reads archive root state over
HTTP), plus any test double exposing the same two methods.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

import bittensor as bt
import httpx

from ledgerbridge.models import DEFAULT_CHECKPOINT_FREQUENCY, DEFAULT_USER_AGENT

ROOT_STATE_PATH = "/.well-known/stellar-history.json"


@runtime_checkable
class NetworkStateProvider(Protocol):
    """Read-only view of live network state."""

    async def latest_ledger_sequence(self) -> int:
        """Latest ledger sequence known to the network."""
        ...

    def checkpoint_frequency(self) -> int:
        """Ledgers between stable checkpoints."""
        ...


class HistoryArchiveProvider:
    """Reads the latest ledger from a pool of history archives.

    Archives are tried in order; the first one that answers wins. There is
    no backoff here, callers decide whether a failed resolution is retried.
    """

    def __init__(
        self,
        archive_urls: Sequence[str],
        user_agent: str = DEFAULT_USER_AGENT,
        checkpoint_frequency: int = 0,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: Any = None,
    ):
        if not archive_urls:
            raise ValueError("at least one history archive URL is required")
        self.archive_urls = [u.rstrip("/") for u in archive_urls]
        self._frequency = checkpoint_frequency or DEFAULT_CHECKPOINT_FREQUENCY
        self._log = logger or bt.logging
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HistoryArchiveProvider:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def latest_ledger_sequence(self) -> int:
        last_error: Exception | None = None
        for url in self.archive_urls:
            try:
                resp = await self._client.get(f"{url}{ROOT_STATE_PATH}")
                resp.raise_for_status()
                return int(resp.json()["currentLedger"])
            except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
                last_error = e
                self._log.warning({"history_archive": {"url": url, "error": str(e)}})
        raise ConnectionError(f"no history archive answered: {last_error}") from last_error

    def checkpoint_frequency(self) -> int:
        return self._frequency


__all__ = ["HistoryArchiveProvider", "NetworkStateProvider", "ROOT_STATE_PATH"]
