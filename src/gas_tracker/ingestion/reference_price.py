"""Reference (ETH/USD) price fetch with the same None-on-failure contract as the sources."""

from gas_tracker.infrastructure.observability import get_ingestion_logger
from gas_tracker.ingestion.adapters.coingecko import CoinGeckoClient


async def fetch_reference_price(client: CoinGeckoClient) -> str | None:
    """Spot price of the configured asset, or None when it cannot be fetched."""
    log = get_ingestion_logger(
        "coingecko-client", asset=client.config.asset, fiat=client.config.fiat
    )
    log.info("fetching_reference_price")
    try:
        price = await client.get_spot_price()
    except Exception as e:
        log.error(
            "reference_price_fetch_failed", error=str(e), error_type=type(e).__name__
        )
        return None

    log.info("reference_price_fetched", price=price)
    return price
