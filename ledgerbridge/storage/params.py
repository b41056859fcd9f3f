"""Typed backend parameter records, one per datastore kind."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict


class _BackendParams(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class GCSParams(_BackendParams):
    destination_bucket_path: str


class S3Params(_BackendParams):
    bucket_name: str
    region: str = ""
    endpoint_url: str = ""


class FilesystemParams(_BackendParams):
    base_path: str


BackendParams = Union[GCSParams, S3Params, FilesystemParams]


__all__ = ["BackendParams", "FilesystemParams", "GCSParams", "S3Params"]
