"""Tests for the reference price index client."""

import pytest
from fakes import COINGECKO_URL, price_index_body

from gas_tracker.ingestion.exceptions import PriceParseError, RpcHttpError


@pytest.mark.asyncio
async def test_get_spot_price(http_client, coingecko_client):
    http_client.add("GET", COINGECKO_URL, body=price_index_body(3012.45))

    assert await coingecko_client.get_spot_price() == "3012.45"
    assert http_client.calls[0]["params"] == {"ids": "ethereum", "vs_currencies": "usd"}


@pytest.mark.asyncio
async def test_integer_price(http_client, coingecko_client):
    http_client.add("GET", COINGECKO_URL, body=price_index_body(3000))

    assert await coingecko_client.get_spot_price() == "3000"


@pytest.mark.asyncio
async def test_rate_limited_raises(http_client, coingecko_client):
    http_client.add("GET", COINGECKO_URL, body="Too Many Requests", status=429)

    with pytest.raises(RpcHttpError) as exc_info:
        await coingecko_client.get_spot_price()
    assert exc_info.value.status_code == 429


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [{}, {"ethereum": {}}, {"ethereum": {"usd": None}}, {"ethereum": {"usd": "3000"}}],
)
async def test_unusable_body_raises_parse_error(http_client, coingecko_client, body):
    http_client.add("GET", COINGECKO_URL, body=body)

    with pytest.raises(PriceParseError):
        await coingecko_client.get_spot_price()
