"""
Price Sources
=============

A tracked network's gas price comes from one of two kinds of source:

- ProviderBackedSource: the hosted provider's endpoint for that network
- DirectRpcSource: a fixed JSON-RPC endpoint the provider does not cover

Both expose the same fetch contract: a gwei decimal string on success, None
on any failure (logged here, never raised).
"""

from dataclasses import dataclass
from typing import Protocol

from gas_tracker.common.utils.units import format_gwei, parse_hex_quantity
from gas_tracker.infrastructure.observability import get_ingestion_logger
from gas_tracker.ingestion.adapters.alchemy import AlchemyClient
from gas_tracker.ingestion.adapters.jsonrpc import JsonRpcClient
from gas_tracker.shared.models.enums import SourceKind


@dataclass(frozen=True)
class PriceClients:
    """Clients shared by every source within one run."""

    alchemy: AlchemyClient
    rpc: JsonRpcClient


class PriceSource(Protocol):
    network_id: str
    kind: SourceKind

    async def fetch_gas_price(self, clients: PriceClients) -> str | None: ...


@dataclass(frozen=True)
class ProviderBackedSource:
    """Gas price from the hosted provider."""

    network_id: str
    kind: SourceKind = SourceKind.PROVIDER

    async def fetch_gas_price(self, clients: PriceClients) -> str | None:
        log = get_ingestion_logger("alchemy-client", network=self.network_id)
        log.info("fetching_gas_price")
        try:
            wei = await clients.alchemy.get_gas_price(self.network_id)
            gas_price = format_gwei(wei)
        except Exception as e:
            log.error("gas_price_fetch_failed", error=str(e), error_type=type(e).__name__)
            return None

        log.info("gas_price_fetched", gas_price=gas_price)
        return gas_price


@dataclass(frozen=True)
class DirectRpcSource:
    """Gas price from an `eth_gasPrice` call to a fixed endpoint."""

    network_id: str
    endpoint_url: str
    kind: SourceKind = SourceKind.DIRECT_RPC

    async def fetch_gas_price(self, clients: PriceClients) -> str | None:
        log = get_ingestion_logger("jsonrpc-client", network=self.network_id)
        log.info("fetching_gas_price", endpoint=self.endpoint_url)
        try:
            result = await clients.rpc.call(self.endpoint_url, "eth_gasPrice")
            gas_price = format_gwei(parse_hex_quantity(result))
        except Exception as e:
            log.error("gas_price_fetch_failed", error=str(e), error_type=type(e).__name__)
            return None

        log.info("gas_price_fetched", gas_price=gas_price)
        return gas_price
