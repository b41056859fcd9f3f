"""Shared fixtures: config documents on disk and fake network state."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


class FakeNetworkState:
    """In-memory NetworkStateProvider."""

    def __init__(self, latest: int = 1000, frequency: int = 64, error: Exception | None = None):
        self.latest = latest
        self.frequency = frequency
        self.error = error
        self.calls = 0

    async def latest_ledger_sequence(self) -> int:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.latest

    def checkpoint_frequency(self) -> int:
        return self.frequency


class RecordingLogger:
    """Captures structured log payloads."""

    def __init__(self):
        self.records: list[tuple[str, object]] = []

    def _record(self, level: str, payload: object) -> None:
        self.records.append((level, payload))

    def debug(self, payload):
        self._record("debug", payload)

    def info(self, payload):
        self._record("info", payload)

    def warning(self, payload):
        self._record("warning", payload)

    def error(self, payload):
        self._record("error", payload)


@pytest.fixture
def network_state():
    def _make(**kwargs) -> FakeNetworkState:
        return FakeNetworkState(**kwargs)
    return _make


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a TOML config document and return its path."""
    def _write(body: str, name: str = "config.toml") -> str:
        path = tmp_path / name
        path.write_text(textwrap.dedent(body))
        return str(path)
    return _write


@pytest.fixture
def fs_datastore_toml(tmp_path: Path) -> str:
    return textwrap.dedent(f"""\
        [datastore_config]
        type = "FS"

        [datastore_config.params]
        base_path = "{tmp_path / 'ledgers'}"

        [datastore_config.schema]
        ledgers_per_file = 64
        files_per_partition = 10
        """)
