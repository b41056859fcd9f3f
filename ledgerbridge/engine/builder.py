"""Streaming-engine config assembly.

Produces the EngineConfig the engine launcher starts the external binary
with. Nothing here starts or supervises the process.
"""

from __future__ import annotations

import subprocess
from typing import Any, Callable

import bittensor as bt

from ledgerbridge.errors import BuildError, BuildReason
from ledgerbridge.models import DEFAULT_CHECKPOINT_FREQUENCY, EngineConfig, NetworkConfig

from .toml import materialize

VersionReader = Callable[[str], str]


def read_core_version(binary_path: str) -> str:
    """Run ``<binary> version`` and return the first line of its output."""
    output = subprocess.check_output(
        [binary_path, "version"],
        stderr=subprocess.DEVNULL,
        text=True,
        timeout=30,
    ).strip()
    if not output:
        raise ValueError(f"{binary_path} version printed nothing")
    return output.splitlines()[0].strip()


def build_engine_config(
    network: NetworkConfig,
    binary_path_override: str = "",
    version_reader: VersionReader | None = None,
    *,
    logger: Any = None,
) -> EngineConfig:
    """Assemble engine launch parameters.

    Args:
        network: Resolved network config.
        binary_path_override: Binary found outside the config document (env,
            PATH). Used only when the document leaves the path empty.
        version_reader: Returns the engine version for a binary path.
            Defaults to ``read_core_version``.

    Raises:
        BuildError: no binary path, failed version lookup, or an engine
            payload that can't be materialized.
    """
    log = logger or bt.logging
    reader = version_reader or read_core_version

    binary_path = network.binary_path or binary_path_override
    if not binary_path:
        raise BuildError(
            BuildReason.NO_BINARY_PATH,
            "invalid captive core config, no stellar-core binary path was provided",
            field="stellar_core_config.stellar_core_binary_path",
        )

    try:
        core_version = reader(binary_path)
    except Exception as e:
        raise BuildError(
            BuildReason.VERSION_LOOKUP_FAILED,
            "failed to set stellar-core version info",
            binary_path=binary_path,
            error=str(e),
        ) from e
    log.info({"engine_builder": {"binary_path": binary_path, "core_version": core_version}})

    toml = materialize(network.core_config_payload, network.passphrase, network.archive_urls)

    return EngineConfig(
        binary_path=binary_path,
        network_passphrase=network.passphrase,
        history_archive_urls=network.archive_urls,
        checkpoint_frequency=network.checkpoint_frequency or DEFAULT_CHECKPOINT_FREQUENCY,
        toml=toml,
        user_agent=network.user_agent,
        use_db=True,
        storage_path=network.storage_path,
        core_version=core_version,
    )


__all__ = ["VersionReader", "build_engine_config", "read_core_version"]
