"""Hosted blockchain API provider client (Alchemy).

Alchemy serves standard node JSON-RPC per network at
https://<network>.g.alchemy.com/v2/<api_key>, so the gas price is one
`eth_gasPrice` call routed to the network's endpoint.
"""

from gas_tracker.common.utils.units import parse_hex_quantity
from gas_tracker.ingestion.adapters.jsonrpc import JsonRpcClient
from gas_tracker.ingestion.config.value_objects import AlchemyClientConfig
from gas_tracker.ingestion.exceptions import ConfigurationError, PriceParseError
from gas_tracker.ingestion.ports.http import IHttpClient


class AlchemyClient:
    """Async client for the provider's per-network node endpoints."""

    def __init__(self, config: AlchemyClientConfig, http_client: IHttpClient):
        self.config = config
        self.rpc = JsonRpcClient(http_client)

    async def get_gas_price(self, network: str) -> int:
        """Current gas price of `network` in wei.

        Raises:
            ConfigurationError: No API key configured
            PriceFetchError: Transport, envelope or parse failure
        """
        if not self.config.api_key:
            raise ConfigurationError("ALCHEMY_API_KEY is not set")

        result = await self.rpc.call(
            self.config.endpoint_for(network), "eth_gasPrice"
        )
        try:
            return parse_hex_quantity(result)
        except ValueError as e:
            raise PriceParseError(str(e), source=network) from e
