"""Network preset resolution.

Each network field resolves through the same three tiers, first non-empty
value wins:

    explicit value in the config document
    -> value from the selected named preset
    -> built-in default (empty unless noted)

The engine config payload is the exception: naming a file in the document
always uses that file's bytes, an empty file included.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

import bittensor as bt

from ledgerbridge.config.document import ConfigDocument, load_document
from ledgerbridge.errors import ConfigError, ConfigReason
from ledgerbridge.models import DEFAULT_USER_AGENT, NetworkConfig, NetworkName

from . import presets

T = TypeVar("T")


def resolve_layer(explicit: T, preset: T, default: T) -> T:
    """Return the first non-empty of ``explicit``, ``preset``, ``default``."""
    if explicit:
        return explicit
    if preset:
        return preset
    return default


def _read_payload(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ConfigError(
            ConfigReason.CONFIG_FILE_UNREADABLE,
            "failed to load captive_core_toml_path file",
            field="stellar_core_config.captive_core_toml_path",
            path=path,
            error=str(e),
        ) from e


def resolve_network(
    document: ConfigDocument | str | Path,
    *,
    logger: Any = None,
) -> NetworkConfig:
    """Merge the selected preset with explicit overrides from the document.

    Either ``network`` names a preset, or all of ``network_passphrase``,
    ``history_archive_urls`` and ``captive_core_toml_path`` are set.

    Raises:
        ConfigError: document unreadable/malformed, neither a preset nor a
            complete explicit config, unknown network name, or unreadable
            engine config file.
    """
    log = logger or bt.logging
    if not isinstance(document, ConfigDocument):
        document = load_document(document)

    core = document.stellar_core_config
    network = core.network.strip()

    explicit_complete = bool(
        core.network_passphrase and core.history_archive_urls and core.captive_core_toml_path
    )
    if not network and not explicit_complete:
        raise ConfigError(
            ConfigReason.INCOMPLETE_NETWORK_CONFIG,
            "the 'network' parameter must be set to pubnet or testnet, or "
            "'stellar_core_config.history_archive_urls', 'stellar_core_config.network_passphrase' "
            "and 'stellar_core_config.captive_core_toml_path' must all be set",
            missing=[
                name
                for name, value in (
                    ("network_passphrase", core.network_passphrase),
                    ("history_archive_urls", core.history_archive_urls),
                    ("captive_core_toml_path", core.captive_core_toml_path),
                )
                if not value
            ],
        )

    preset = None
    if network:
        preset = presets.lookup(network)
        if preset is None:
            raise ConfigError(
                ConfigReason.UNKNOWN_NETWORK,
                "network must be set to 'pubnet' or 'testnet', or network_passphrase, "
                "history_archive_urls and captive_core_toml_path must be set",
                field="stellar_core_config.network",
                value=network,
            )

    # A named engine config file replaces the preset payload even when empty.
    if core.captive_core_toml_path:
        payload = _read_payload(core.captive_core_toml_path)
    else:
        payload = preset.default_config if preset else b""

    resolved = NetworkConfig(
        name=preset.name if preset else NetworkName.NONE,
        passphrase=resolve_layer(
            core.network_passphrase, preset.passphrase if preset else "", "",
        ),
        archive_urls=resolve_layer(
            tuple(core.history_archive_urls), preset.archive_urls if preset else (), (),
        ),
        core_config_payload=payload,
        checkpoint_frequency=core.checkpoint_frequency,
        binary_path=core.stellar_core_binary_path,
        storage_path=core.storage_path,
        user_agent=resolve_layer(document.user_agent, "", DEFAULT_USER_AGENT),
    )

    log.info({
        "network_resolver": {
            "network": resolved.name.value or "custom",
            "passphrase": resolved.passphrase,
            "archive_urls": list(resolved.archive_urls),
            "binary_path": resolved.binary_path,
            "core_config_bytes": len(resolved.core_config_payload),
        }
    })
    return resolved


__all__ = ["resolve_layer", "resolve_network"]
