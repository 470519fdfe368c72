"""Configuration value objects for dependency injection.

Clients receive these small frozen dataclasses instead of the whole
TrackerConfig, which keeps constructor contracts explicit in tests.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuration for HTTP client."""

    timeout: float = 30.0


@dataclass(frozen=True)
class AlchemyClientConfig:
    """Configuration for the hosted provider client."""

    api_key: str
    url_template: str = "https://{network}.g.alchemy.com/v2/{api_key}"

    def endpoint_for(self, network: str) -> str:
        return self.url_template.format(network=network, api_key=self.api_key)


@dataclass(frozen=True)
class ReferencePriceClientConfig:
    """Configuration for the public price index client."""

    url: str = "https://api.coingecko.com/api/v3/simple/price"
    asset: str = "ethereum"
    fiat: str = "usd"
