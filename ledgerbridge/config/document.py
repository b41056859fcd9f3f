"""Config document (TOML) loading.

Example::

    admin_port = 6061
    user_agent = "my-exporter"

    [datastore_config]
    type = "GCS"

    [datastore_config.params]
    destination_bucket_path = "exporter-bucket/pubnet"

    [datastore_config.schema]
    ledgers_per_file = 1
    files_per_partition = 64000

    [stellar_core_config]
    network = "pubnet"
    stellar_core_binary_path = "/usr/bin/stellar-core"

Unknown keys are ignored at every level.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from ledgerbridge.errors import ConfigError, ConfigReason
from ledgerbridge.models import StorageConfig


class CoreSection(BaseModel):
    """Raw ``[stellar_core_config]`` table, before preset merging."""

    model_config = ConfigDict(extra="ignore")

    network: str = ""
    network_passphrase: str = ""
    history_archive_urls: list[str] = Field(default_factory=list)
    stellar_core_binary_path: str = ""
    captive_core_toml_path: str = ""
    checkpoint_frequency: int = Field(default=0, ge=0)
    storage_path: str = ""


class ConfigDocument(BaseModel):
    """Top level of the config document."""

    model_config = ConfigDict(extra="ignore")

    admin_port: int = 0
    user_agent: str = ""
    datastore_config: StorageConfig = Field(default_factory=StorageConfig)
    stellar_core_config: CoreSection = Field(default_factory=CoreSection)


def load_document(path: str | Path) -> ConfigDocument:
    """Read and parse a config document from disk.

    Raises:
        ConfigError: NOT_FOUND if the file can't be read, PARSE_FAILURE if it
            isn't valid TOML or a known field has the wrong type.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(
            ConfigReason.NOT_FOUND,
            f"config file {path} was not found",
            path=str(path),
            error=str(e),
        ) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            ConfigReason.PARSE_FAILURE,
            "error parsing TOML config",
            path=str(path),
            error=str(e),
        ) from e

    try:
        return ConfigDocument.model_validate(data)
    except pydantic.ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigError(
            ConfigReason.PARSE_FAILURE,
            "error unmarshalling TOML config",
            path=str(path),
            fields=fields,
        ) from e


__all__ = ["ConfigDocument", "CoreSection", "load_document"]
