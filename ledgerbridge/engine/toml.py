"""Streaming-engine config payload materialization.

The payload is the engine's own TOML document (validators, quorum, history
commands). It stays opaque apart from the keys we must pin:
NETWORK_PASSPHRASE, HISTORY (when the payload has none) and DATABASE.
"""

from __future__ import annotations

import tomllib
from typing import Any, Sequence

from ledgerbridge.errors import BuildError, BuildReason

DEFAULT_DATABASE = "sqlite3://stellar.db"
HISTORY_GET_TEMPLATE = "curl -sf {url}/{{0}} -o {{1}}"


def _history_configured(doc: dict[str, Any]) -> bool:
    if doc.get("HISTORY"):
        return True
    validators = doc.get("VALIDATORS") or []
    return any(isinstance(v, dict) and v.get("HISTORY") for v in validators)


def history_entries(archive_urls: Sequence[str]) -> dict[str, dict[str, str]]:
    """``[HISTORY.hN]`` tables fetching from each archive in order."""
    return {
        f"h{i}": {"get": HISTORY_GET_TEMPLATE.format(url=url.rstrip("/"))}
        for i, url in enumerate(archive_urls)
    }


def materialize(
    payload: bytes,
    passphrase: str,
    archive_urls: Sequence[str],
    use_db: bool = True,
) -> dict[str, Any]:
    """Parse the payload and substitute in the network parameters.

    Raises:
        BuildError: INVALID_ENGINE_CONFIG if the payload isn't TOML or names
            a different network passphrase.
    """
    try:
        doc = tomllib.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise BuildError(
            BuildReason.INVALID_ENGINE_CONFIG,
            "failed to create captive-core toml",
            error=str(e),
        ) from e

    existing = doc.get("NETWORK_PASSPHRASE")
    if existing and existing != passphrase:
        raise BuildError(
            BuildReason.INVALID_ENGINE_CONFIG,
            "NETWORK_PASSPHRASE in captive-core toml does not match the configured passphrase",
            toml_passphrase=existing,
            passphrase=passphrase,
        )
    doc["NETWORK_PASSPHRASE"] = passphrase

    if not _history_configured(doc):
        doc["HISTORY"] = history_entries(archive_urls)
    if use_db and not doc.get("DATABASE"):
        doc["DATABASE"] = DEFAULT_DATABASE
    return doc


__all__ = ["DEFAULT_DATABASE", "history_entries", "materialize"]
