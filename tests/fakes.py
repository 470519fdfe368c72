"""
Test doubles shared across the suite.

FakeHttpClient implements IHttpClient with canned responses keyed by
(method, url), so clients are exercised end to end without a network.
"""

from dataclasses import dataclass
from typing import Any

from gas_tracker.ingestion.ports.http import HttpResponse
from gas_tracker.ingestion.sources import PriceClients
from gas_tracker.shared.models.enums import SourceKind

COINGECKO_URL = "https://prices.test/simple/price"
ALCHEMY_TEMPLATE = "https://{network}.alchemy.test/v2/{api_key}"


class FakeHttpClient:
    """IHttpClient double: canned responses or exceptions per (method, url)."""

    def __init__(self):
        self.routes: dict[tuple[str, str], HttpResponse | Exception] = {}
        self.calls: list[dict[str, Any]] = []

    def add(
        self,
        method: str,
        url: str,
        body: Any = None,
        status: int = 200,
        exc: Exception | None = None,
    ) -> None:
        self.routes[(method, url)] = exc or HttpResponse(
            status_code=status, body=body, headers={}, url=url
        )

    def _respond(self, method: str, url: str) -> HttpResponse:
        route = self.routes.get((method, url))
        if route is None:
            raise ConnectionError(f"No route for {method} {url}")
        if isinstance(route, Exception):
            raise route
        return route

    async def get(self, url, params=None, headers=None, timeout=None) -> HttpResponse:
        self.calls.append({"method": "GET", "url": url, "params": params})
        return self._respond("GET", url)

    async def post(self, url, data=None, headers=None, timeout=None) -> HttpResponse:
        self.calls.append(
            {"method": "POST", "url": url, "data": data, "headers": headers}
        )
        return self._respond("POST", url)


@dataclass(frozen=True)
class StubSource:
    """PriceSource double returning a fixed price (None = failed fetch)."""

    network_id: str
    price: str | None = None
    error: Exception | None = None
    kind: SourceKind = SourceKind.PROVIDER

    async def fetch_gas_price(self, clients: PriceClients) -> str | None:
        if self.error is not None:
            raise self.error
        return self.price


def rpc_result(result: Any, request_id: int = 1) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def price_index_body(price: Any, asset: str = "ethereum", fiat: str = "usd") -> dict:
    return {asset: {fiat: price}}
