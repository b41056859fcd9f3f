"""Tests for the history-archive network-state provider."""

import httpx
import pytest

from ledgerbridge.ledger.provider import (
    ROOT_STATE_PATH,
    HistoryArchiveProvider,
    NetworkStateProvider,
)
from ledgerbridge.models import DEFAULT_CHECKPOINT_FREQUENCY


def _transport(responses: dict[str, httpx.Response], seen: list[httpx.Request]):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        for prefix, response in responses.items():
            if str(request.url).startswith(prefix):
                return response
        raise httpx.ConnectError("unreachable", request=request)
    return httpx.MockTransport(handler)


class TestHistoryArchiveProvider:

    def test_satisfies_protocol(self):
        provider = HistoryArchiveProvider(["https://a.example"])
        assert isinstance(provider, NetworkStateProvider)

    @pytest.mark.asyncio
    async def test_reads_current_ledger(self):
        seen: list[httpx.Request] = []
        transport = _transport(
            {"https://a.example": httpx.Response(200, json={"version": 1, "currentLedger": 51234567})},
            seen,
        )
        async with HistoryArchiveProvider(
            ["https://a.example/"], user_agent="test-agent", transport=transport,
        ) as provider:
            assert await provider.latest_ledger_sequence() == 51234567
        assert str(seen[0].url) == f"https://a.example{ROOT_STATE_PATH}"
        assert seen[0].headers["User-Agent"] == "test-agent"

    @pytest.mark.asyncio
    async def test_fails_over_to_next_archive(self, recording_logger):
        seen: list[httpx.Request] = []
        transport = _transport(
            {
                "https://bad.example": httpx.Response(503),
                "https://good.example": httpx.Response(200, json={"currentLedger": 777}),
            },
            seen,
        )
        async with HistoryArchiveProvider(
            ["https://bad.example", "https://good.example"],
            transport=transport,
            logger=recording_logger,
        ) as provider:
            assert await provider.latest_ledger_sequence() == 777
        assert len(seen) == 2
        assert recording_logger.records[0][0] == "warning"

    @pytest.mark.asyncio
    async def test_all_archives_fail(self, recording_logger):
        transport = _transport({"https://a.example": httpx.Response(200, json={"nope": 1})}, [])
        async with HistoryArchiveProvider(
            ["https://a.example", "https://b.example"],
            transport=transport,
            logger=recording_logger,
        ) as provider:
            with pytest.raises(ConnectionError):
                await provider.latest_ledger_sequence()

    def test_checkpoint_frequency_default(self):
        assert HistoryArchiveProvider(["https://a.example"]).checkpoint_frequency() == DEFAULT_CHECKPOINT_FREQUENCY

    def test_checkpoint_frequency_configured(self):
        assert HistoryArchiveProvider(["https://a.example"], checkpoint_frequency=8).checkpoint_frequency() == 8

    def test_requires_archives(self):
        with pytest.raises(ValueError):
            HistoryArchiveProvider([])
