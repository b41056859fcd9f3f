"""Exporter entrypoint.

Resolves the requested export into a validated plan and streaming-engine
config, then prints the plan. Running the export itself is the job of the
pipeline that consumes the plan.

    ledgerbridge scan-and-fill --start 2 --end 100000 --config-file config.toml
    ledgerbridge append --start 50000000 --config-file config.toml
"""

from __future__ import annotations

import argparse
import asyncio
import os
import shutil
import sys

import bittensor as bt
import pydantic
from dotenv import load_dotenv

from ledgerbridge.errors import ExportError
from ledgerbridge.models import ExportMode, ExportRequest
from ledgerbridge.planner import ExportPlanner

CORE_BINARY_NAME = "stellar-core"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledgerbridge",
        description="Export ledger ranges from the network into a datastore",
    )
    bt.logging.add_args(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    for mode, help_text in (
        (ExportMode.SCAN_AND_FILL, "Export a bounded range, skipping files already present."),
        (ExportMode.APPEND, "Continue exporting from where the datastore left off."),
    ):
        sub = subparsers.add_parser(mode.value, help=help_text)
        sub.add_argument("--start", type=int, default=0, help="Starting ledger (inclusive).")
        sub.add_argument(
            "--end", type=int, default=0,
            help="Ending ledger (inclusive). 0 means unbounded (append only).",
        )
        sub.add_argument(
            "--config-file", type=str, default="config.toml",
            help="Path to the TOML config file.",
        )
    return parser


def _core_binary_from_env() -> str:
    return os.environ.get("STELLAR_CORE_BINARY_PATH") or shutil.which(CORE_BINARY_NAME) or ""


def main(argv: list[str] | None = None) -> None:
    if os.environ.get("LEDGERBRIDGE_TEST_MODE") != "true":
        load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    # Env takes precedence over CLI
    try:
        request = ExportRequest(
            start_ledger=int(os.environ.get("LEDGERBRIDGE_START", args.start)),
            end_ledger=int(os.environ.get("LEDGERBRIDGE_END", args.end)),
            mode=ExportMode(args.command),
            config_path=os.environ.get("LEDGERBRIDGE_CONFIG_FILE", args.config_file),
        )
    except (ValueError, pydantic.ValidationError) as e:
        parser.error(f"invalid ledger range arguments: {e}")

    planner = ExportPlanner(binary_path_override=_core_binary_from_env())
    try:
        plan, engine = asyncio.run(planner.plan(request))
    except ExportError as e:
        bt.logging.error({"exporter": {"reason": e.reason.value, "error": str(e)}})
        sys.exit(1)

    bt.logging.info({"exporter": {"engine_binary": engine.binary_path, "core_version": engine.core_version}})
    print(plan.model_dump_json(indent=2, exclude={"network": {"core_config_payload"}}))


if __name__ == "__main__":
    main()
