from .alchemy import AlchemyClient
from .coingecko import CoinGeckoClient
from .jsonrpc import JsonRpcClient, build_request

__all__ = ["AlchemyClient", "CoinGeckoClient", "JsonRpcClient", "build_request"]
