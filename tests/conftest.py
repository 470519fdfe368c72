"""
Fixtures shared by the collector tests.
"""

import pytest
from fakes import ALCHEMY_TEMPLATE, COINGECKO_URL, FakeHttpClient

from gas_tracker.ingestion.adapters import AlchemyClient, CoinGeckoClient, JsonRpcClient
from gas_tracker.ingestion.config.value_objects import (
    AlchemyClientConfig,
    ReferencePriceClientConfig,
)
from gas_tracker.ingestion.sources import PriceClients
from gas_tracker.shared.models.gas_price import GAS_WITH_ETH_SCHEMA
from gas_tracker.storage import CsvPathBuilder, GasPriceCsvStore


@pytest.fixture
def http_client():
    return FakeHttpClient()


@pytest.fixture
def alchemy_config():
    return AlchemyClientConfig(api_key="test-key", url_template=ALCHEMY_TEMPLATE)


@pytest.fixture
def price_clients(http_client, alchemy_config):
    return PriceClients(
        alchemy=AlchemyClient(alchemy_config, http_client),
        rpc=JsonRpcClient(http_client),
    )


@pytest.fixture
def coingecko_client(http_client):
    return CoinGeckoClient(http_client, ReferencePriceClientConfig(url=COINGECKO_URL))


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def store(data_dir):
    return GasPriceCsvStore(CsvPathBuilder(data_dir), GAS_WITH_ETH_SCHEMA)
