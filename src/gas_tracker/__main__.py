"""
Collector entry point: `python -m gas_tracker` or the `gas-tracker` script.

Takes no arguments; configuration comes from config/tracker.yaml and the
environment (ALCHEMY_API_KEY, LOG_LEVEL, GAS_TRACKER_DATA_DIR).
"""

import asyncio
import sys

from gas_tracker.config import TrackerConfig, get_config
from gas_tracker.infrastructure.observability import get_pipeline_logger, setup_logging
from gas_tracker.ingestion.adapters import AlchemyClient, CoinGeckoClient, JsonRpcClient
from gas_tracker.ingestion.connectors import AiohttpClient
from gas_tracker.ingestion.sources import PriceClients
from gas_tracker.orchestration import GasPriceCollector, RunSummary
from gas_tracker.storage import CsvPathBuilder, GasPriceCsvStore


async def run_collector(config: TrackerConfig) -> RunSummary:
    """Wire clients, store and sources from `config` and run one pass."""
    async with AiohttpClient(config.http_client_config()) as http_client:
        clients = PriceClients(
            alchemy=AlchemyClient(config.alchemy_client_config(), http_client),
            rpc=JsonRpcClient(http_client),
        )
        reference_client = (
            CoinGeckoClient(http_client, config.reference_client_config())
            if config.reference_price.enabled
            else None
        )
        store = GasPriceCsvStore(
            CsvPathBuilder(config.storage.data_dir, config.storage.file_pattern),
            schema=config.csv_schema,
        )
        collector = GasPriceCollector(
            sources=config.build_sources(),
            clients=clients,
            store=store,
            reference_client=reference_client,
        )
        return await collector.run()


def main() -> int:
    config = get_config()
    setup_logging(level=config.logging.level, json_logs=config.logging.json_logs)

    log = get_pipeline_logger()
    if not config.provider.api_key:
        log.warning("provider_api_key_missing", env_var="ALCHEMY_API_KEY")

    summary = asyncio.run(run_collector(config))

    if config.fail_on_partial and summary.is_partial:
        log.error("run_incomplete", **summary.to_dict())
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
