"""Datastore config validation.

The config document carries a free-form ``params`` mapping so new backend
options can be added without a schema change. Validation narrows it into a
typed parameter record for the selected backend kind.
"""

from __future__ import annotations

from enum import Enum

from ledgerbridge.errors import ValidationError, ValidationReason
from ledgerbridge.models import StorageConfig
from ledgerbridge.storage.params import (
    BackendParams,
    FilesystemParams,
    GCSParams,
    S3Params,
    _BackendParams,
)


class StorageKind(str, Enum):
    GCS = "GCS"
    S3 = "S3"
    FS = "FS"


# kind -> (required param, typed record)
_BACKENDS: dict[StorageKind, tuple[str, type[_BackendParams]]] = {
    StorageKind.GCS: ("destination_bucket_path", GCSParams),
    StorageKind.S3: ("bucket_name", S3Params),
    StorageKind.FS: ("base_path", FilesystemParams),
}


def validate(config: StorageConfig) -> BackendParams:
    """Check a datastore config and return its typed backend parameters.

    Raises:
        ValidationError: empty or unknown kind, missing required parameter,
            or a zero partition-schema field.
    """
    if not config.kind:
        raise ValidationError(
            ValidationReason.MISSING_KIND,
            "datastore type is required",
            field="datastore_config.type",
        )

    try:
        kind = StorageKind(config.kind)
    except ValueError:
        raise ValidationError(
            ValidationReason.UNSUPPORTED_KIND,
            f"unsupported datastore type: {config.kind}",
            field="datastore_config.type",
            supported=[k.value for k in StorageKind],
        ) from None

    required, record = _BACKENDS[kind]
    if required not in config.params:
        raise ValidationError(
            ValidationReason.MISSING_PARAMETER,
            f"{required} is required for {kind.value}",
            field=f"datastore_config.params.{required}",
            parameter=required,
        )

    schema = config.partition_schema
    if schema.ledgers_per_file == 0:
        raise ValidationError(
            ValidationReason.INVALID_SCHEMA,
            "ledgers_per_file must be greater than 0",
            field="datastore_config.schema.ledgers_per_file",
        )
    if schema.files_per_partition == 0:
        raise ValidationError(
            ValidationReason.INVALID_SCHEMA,
            "files_per_partition must be greater than 0",
            field="datastore_config.schema.files_per_partition",
        )

    return record(**config.params)


__all__ = [
    "BackendParams",
    "FilesystemParams",
    "GCSParams",
    "S3Params",
    "StorageKind",
    "validate",
]
