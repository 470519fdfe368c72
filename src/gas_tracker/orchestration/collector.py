"""
Gas Price Collector
===================

Runs one collection pass over every tracked network:

    Idle -> FetchingReference (if enabled) -> FanningOut -> Done

The reference price is fetched once up front; when enabled and unavailable
the run aborts before any table is touched. Networks are then collected
concurrently. Each network's branch owns its own table and swallows its own
failures, so one network can never stop the others.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any

from gas_tracker.common.utils.date_utils import current_date_str
from gas_tracker.infrastructure.observability import get_pipeline_logger
from gas_tracker.ingestion.adapters.coingecko import CoinGeckoClient
from gas_tracker.ingestion.reference_price import fetch_reference_price
from gas_tracker.ingestion.sources import PriceClients, PriceSource
from gas_tracker.shared.models.enums import NetworkOutcome, RunStatus
from gas_tracker.shared.models.gas_price import GasPriceRecord
from gas_tracker.storage.csv_store import GasPriceCsvStore


@dataclass
class NetworkResult:
    """Outcome of one network's collection."""

    network: str
    outcome: NetworkOutcome
    gas_price: str | None = None
    error: str | None = None


@dataclass
class RunSummary:
    """Result of a collector run."""

    status: RunStatus
    run_date: str
    reference_price: str | None = None
    results: list[NetworkResult] = field(default_factory=list)

    @property
    def written(self) -> int:
        return sum(1 for r in self.results if r.outcome.wrote_row)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.outcome == NetworkOutcome.SKIPPED)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.outcome == NetworkOutcome.FAILED)

    @property
    def is_partial(self) -> bool:
        """True when the run aborted or any network's table was not updated."""
        return self.status == RunStatus.ABORTED or self.written < len(self.results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "run_date": self.run_date,
            "reference_price": self.reference_price,
            "written": self.written,
            "skipped": self.skipped,
            "failed": self.failed,
            "results": {r.network: r.outcome.value for r in self.results},
        }


class GasPriceCollector:
    """
    Collects today's gas price for every tracked network into its CSV table.

    Dependencies are injected so tests can run with a reduced network set,
    fake endpoints and a temporary data directory.
    """

    def __init__(
        self,
        sources: list[PriceSource],
        clients: PriceClients,
        store: GasPriceCsvStore,
        reference_client: CoinGeckoClient | None = None,
        run_date: str | None = None,
    ):
        """
        Args:
            sources: One price source per tracked network
            clients: Provider and JSON-RPC clients shared by the sources
            store: Table store for all networks
            reference_client: Price index client; None disables the
                reference price and its all-or-nothing dependency
            run_date: YYYY-MM-DD to stamp rows with (default: today, UTC)
        """
        self.sources = sources
        self.clients = clients
        self.store = store
        self.reference_client = reference_client
        self.run_date = run_date

    async def collect_network(
        self,
        source: PriceSource,
        run_date: str,
        reference_price: str | None = None,
    ) -> NetworkResult:
        """Fetch one network's gas price and upsert today's row. Never raises."""
        network = source.network_id
        log = get_pipeline_logger(network=network, run_date=run_date)

        try:
            gas_price = await source.fetch_gas_price(self.clients)

            if not gas_price:
                # Fetch failure was already logged by the source
                return NetworkResult(network=network, outcome=NetworkOutcome.SKIPPED)

            record = GasPriceRecord(
                date=run_date,
                network=network,
                gas_price=gas_price,
                eth_price=reference_price,
            )
            upsert = self.store.upsert(network, record)

            log.info(
                "network_collected",
                outcome=upsert.value,
                gas_price=gas_price,
                eth_price=reference_price,
            )
            return NetworkResult(
                network=network,
                outcome=NetworkOutcome.from_upsert(upsert),
                gas_price=gas_price,
            )

        except Exception as e:
            log.error(
                "network_collection_failed",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return NetworkResult(
                network=network, outcome=NetworkOutcome.FAILED, error=str(e)
            )

    async def run(self) -> RunSummary:
        """Execute one full collection pass."""
        run_date = self.run_date or current_date_str()
        log = get_pipeline_logger(run_date=run_date)
        log.info("run_started", networks=[s.network_id for s in self.sources])

        reference_price = None
        if self.reference_client is not None:
            reference_price = await fetch_reference_price(self.reference_client)
            if reference_price is None:
                log.error("run_aborted", reason="reference price unavailable")
                return RunSummary(status=RunStatus.ABORTED, run_date=run_date)

        results = await asyncio.gather(
            *(
                self.collect_network(source, run_date, reference_price)
                for source in self.sources
            )
        )

        summary = RunSummary(
            status=RunStatus.COMPLETED,
            run_date=run_date,
            reference_price=reference_price,
            results=list(results),
        )
        log.info("run_completed", **summary.to_dict())
        return summary
