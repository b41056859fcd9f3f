"""Tests for the exporter command line."""

import json

import pytest

from ledgerbridge.entrypoints import export
from ledgerbridge.errors import RangeError, RangeReason
from ledgerbridge.models import (
    EngineConfig,
    ExportMode,
    NetworkConfig,
    ResolvedExportPlan,
    StorageConfig,
)
from ledgerbridge.storage.params import FilesystemParams


@pytest.fixture(autouse=True)
def _test_env(monkeypatch):
    monkeypatch.setenv("LEDGERBRIDGE_TEST_MODE", "true")
    for var in ("LEDGERBRIDGE_START", "LEDGERBRIDGE_END", "LEDGERBRIDGE_CONFIG_FILE"):
        monkeypatch.delenv(var, raising=False)


class _StubPlanner:
    requests = []
    error = None

    def __init__(self, binary_path_override=""):
        self.binary_path_override = binary_path_override

    async def plan(self, request):
        _StubPlanner.requests.append(request)
        if _StubPlanner.error is not None:
            raise _StubPlanner.error
        network = NetworkConfig(passphrase="p", archive_urls=("https://a.example",))
        plan = ResolvedExportPlan(
            start_ledger=request.start_ledger,
            end_ledger=request.end_ledger,
            mode=request.mode,
            network=network,
            storage=StorageConfig(kind="FS", params={"base_path": "/d"}),
            storage_params=FilesystemParams(base_path="/d"),
            core_version="v1",
        )
        engine = EngineConfig(
            binary_path="/bin/core", network_passphrase="p", history_archive_urls=("https://a.example",),
        )
        return plan, engine


@pytest.fixture
def stub_planner(monkeypatch):
    _StubPlanner.requests = []
    _StubPlanner.error = None
    monkeypatch.setattr(export, "ExportPlanner", _StubPlanner)
    return _StubPlanner


class TestParser:

    def test_scan_and_fill_args(self):
        args = export.build_parser().parse_args(
            ["scan-and-fill", "--start", "2", "--end", "100", "--config-file", "c.toml"],
        )
        assert args.command == "scan-and-fill"
        assert (args.start, args.end, args.config_file) == (2, 100, "c.toml")

    def test_append_defaults(self):
        args = export.build_parser().parse_args(["append", "--start", "10"])
        assert args.end == 0
        assert args.config_file == "config.toml"

    def test_command_required(self):
        with pytest.raises(SystemExit):
            export.build_parser().parse_args([])


class TestMain:

    def test_prints_plan(self, stub_planner, capsys):
        export.main(["append", "--start", "10", "--config-file", "c.toml"])
        out = json.loads(capsys.readouterr().out)
        assert out["start_ledger"] == 10
        assert out["resumable"] is True
        assert "core_config_payload" not in out["network"]
        request = stub_planner.requests[0]
        assert request.mode is ExportMode.APPEND
        assert request.config_path == "c.toml"

    def test_env_overrides_flags(self, stub_planner, monkeypatch, capsys):
        monkeypatch.setenv("LEDGERBRIDGE_START", "20")
        monkeypatch.setenv("LEDGERBRIDGE_END", "40")
        monkeypatch.setenv("LEDGERBRIDGE_CONFIG_FILE", "env.toml")
        export.main(["scan-and-fill", "--start", "2", "--end", "3"])
        request = stub_planner.requests[0]
        assert (request.start_ledger, request.end_ledger, request.config_path) == (20, 40, "env.toml")

    def test_binary_override_from_env(self, stub_planner, monkeypatch):
        created = []

        class Recording(_StubPlanner):
            def __init__(self, binary_path_override=""):
                super().__init__(binary_path_override)
                created.append(binary_path_override)

        monkeypatch.setattr(export, "ExportPlanner", Recording)
        monkeypatch.setenv("STELLAR_CORE_BINARY_PATH", "/custom/stellar-core")
        export.main(["append", "--start", "10"])
        assert created == ["/custom/stellar-core"]

    def test_export_error_exits_nonzero(self, stub_planner):
        stub_planner.error = RangeError(RangeReason.START_TOO_LOW, "invalid start value", start=1)
        with pytest.raises(SystemExit) as exc_info:
            export.main(["append", "--start", "1"])
        assert exc_info.value.code == 1

    def test_negative_start_rejected(self, stub_planner):
        with pytest.raises(SystemExit) as exc_info:
            export.main(["append", "--start", "-5"])
        assert exc_info.value.code == 2
        assert stub_planner.requests == []
