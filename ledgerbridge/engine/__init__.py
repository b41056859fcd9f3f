"""Streaming-engine config building."""

from .builder import VersionReader, build_engine_config, read_core_version
from .toml import materialize

__all__ = ["VersionReader", "build_engine_config", "materialize", "read_core_version"]
