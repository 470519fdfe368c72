"""Tests for the reference price fetch boundary."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from fakes import COINGECKO_URL, price_index_body

from gas_tracker.ingestion.reference_price import fetch_reference_price


@pytest.mark.asyncio
async def test_returns_price_string(http_client, coingecko_client):
    http_client.add("GET", COINGECKO_URL, body=price_index_body(2999.99))

    assert await fetch_reference_price(coingecko_client) == "2999.99"


@pytest.mark.asyncio
async def test_timeout_returns_none(http_client, coingecko_client):
    http_client.add("GET", COINGECKO_URL, exc=asyncio.TimeoutError())

    assert await fetch_reference_price(coingecko_client) is None


@pytest.mark.asyncio
async def test_bad_body_returns_none(http_client, coingecko_client):
    http_client.add("GET", COINGECKO_URL, body={"bitcoin": {"usd": 1}})

    assert await fetch_reference_price(coingecko_client) is None


@pytest.mark.asyncio
async def test_unexpected_client_error_returns_none():
    client = MagicMock()
    client.config.asset = "ethereum"
    client.config.fiat = "usd"
    client.get_spot_price = AsyncMock(side_effect=RuntimeError("boom"))

    assert await fetch_reference_price(client) is None
    client.get_spot_price.assert_awaited_once()
