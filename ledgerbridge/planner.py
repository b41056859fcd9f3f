"""Export planning: request + config document -> validated export plan.

Pipeline (runs once, at startup, before any ledger is exported):

    config document --+--> network preset resolution --+
                      +--> datastore validation -------+--> ExportConfig
    ExportConfig + network state --> aligned ledger range
    NetworkConfig + engine binary --> EngineConfig
"""

from __future__ import annotations

from typing import Any, Callable

import bittensor as bt

from ledgerbridge.config.document import load_document
from ledgerbridge.engine.builder import VersionReader, build_engine_config
from ledgerbridge.ledger.provider import HistoryArchiveProvider, NetworkStateProvider
from ledgerbridge.ledger.range import resolve_range
from ledgerbridge.models import (
    EngineConfig,
    ExportConfig,
    ExportRequest,
    NetworkConfig,
    ResolvedExportPlan,
)
from ledgerbridge.network.resolver import resolve_network
from ledgerbridge.storage import validator

ProviderFactory = Callable[[NetworkConfig], NetworkStateProvider]


class ExportPlanner:
    """Resolves an ExportRequest into a (ResolvedExportPlan, EngineConfig) pair."""

    def __init__(
        self,
        provider_factory: ProviderFactory | None = None,
        version_reader: VersionReader | None = None,
        binary_path_override: str = "",
        network_timeout: float | None = 30.0,
        logger: Any = None,
    ):
        self.provider_factory = provider_factory
        self.version_reader = version_reader
        self.binary_path_override = binary_path_override
        self.network_timeout = network_timeout
        self.log = logger or bt.logging

    def load_config(self, request: ExportRequest) -> ExportConfig:
        """Read the config document, merge the network, validate the datastore."""
        self.log.info({
            "export_planner": {
                "mode": request.mode.display_name,
                "start": request.start_ledger,
                "end": request.end_ledger,
            }
        })
        document = load_document(request.config_path)
        network = resolve_network(document, logger=self.log)
        storage_params = validator.validate(document.datastore_config)
        return ExportConfig(
            request=request,
            admin_port=document.admin_port,
            network=network,
            storage=document.datastore_config,
            storage_params=storage_params,
        )

    def _default_provider(self, network: NetworkConfig) -> HistoryArchiveProvider:
        return HistoryArchiveProvider(
            network.archive_urls,
            user_agent=network.user_agent,
            checkpoint_frequency=network.checkpoint_frequency,
            logger=self.log,
        )

    async def plan(self, request: ExportRequest) -> tuple[ResolvedExportPlan, EngineConfig]:
        """Run the full resolution.

        Raises:
            ConfigError, ValidationError, RangeError, BuildError: first
                failure, with context. Nothing is retried.
        """
        config = self.load_config(request)
        schema = config.storage.partition_schema

        if self.provider_factory is not None:
            ledger_range = await resolve_range(
                request.start_ledger,
                request.end_ledger,
                request.mode,
                schema,
                self.provider_factory(config.network),
                timeout=self.network_timeout,
                logger=self.log,
            )
        else:
            async with self._default_provider(config.network) as provider:
                ledger_range = await resolve_range(
                    request.start_ledger,
                    request.end_ledger,
                    request.mode,
                    schema,
                    provider,
                    timeout=self.network_timeout,
                    logger=self.log,
                )

        engine = build_engine_config(
            config.network,
            self.binary_path_override,
            self.version_reader,
            logger=self.log,
        )

        plan = ResolvedExportPlan(
            start_ledger=ledger_range.start,
            end_ledger=ledger_range.end,
            mode=request.mode,
            network=config.network,
            storage=config.storage.model_copy(deep=True),
            storage_params=config.storage_params,
            core_version=engine.core_version,
        )
        self.log.info({
            "export_planner": {
                "start": plan.start_ledger,
                "end": plan.end_ledger,
                "resumable": plan.resumable,
                "first_object_key": schema.object_key(plan.start_ledger),
            }
        })
        return plan, engine


__all__ = ["ExportPlanner", "ProviderFactory"]
