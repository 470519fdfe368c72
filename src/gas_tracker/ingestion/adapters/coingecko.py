"""Public price index client (CoinGecko simple/price, no authentication)."""

from gas_tracker.ingestion.config.value_objects import ReferencePriceClientConfig
from gas_tracker.ingestion.exceptions import PriceParseError, RpcHttpError
from gas_tracker.ingestion.ports.http import IHttpClient


class CoinGeckoClient:
    """Fetches the spot price of one asset quoted in one fiat currency."""

    def __init__(
        self,
        http_client: IHttpClient,
        config: ReferencePriceClientConfig | None = None,
    ):
        self.http_client = http_client
        self.config = config or ReferencePriceClientConfig()

    async def get_spot_price(self) -> str:
        """Spot price as a decimal string, e.g. "3012.45".

        Raises:
            RpcHttpError: Non-200 HTTP status
            PriceParseError: Asset or fiat missing from the response
        """
        asset, fiat = self.config.asset, self.config.fiat
        response = await self.http_client.get(
            self.config.url,
            params={"ids": asset, "vs_currencies": fiat},
        )

        if response.status_code != 200:
            raise RpcHttpError(
                f"HTTP {response.status_code} from price index: {response.body}",
                status_code=response.status_code,
                source="coingecko",
            )

        body = response.body
        try:
            price = body[asset][fiat]
        except (KeyError, TypeError) as e:
            raise PriceParseError(
                f"No {asset}/{fiat} price in response: {body!r}", source="coingecko"
            ) from e

        if not isinstance(price, (int, float)) or isinstance(price, bool):
            raise PriceParseError(
                f"Invalid {asset}/{fiat} price: {price!r}", source="coingecko"
            )
        return str(price)
