"""
Price Fetch Exception Hierarchy

Typed errors raised inside the price clients. They never cross a fetcher
boundary: sources and the reference price fetcher log them and return None.
"""


class PriceFetchError(Exception):
    """Base exception for all price fetch errors."""

    def __init__(
        self, message: str, status_code: int | None = None, source: str | None = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.source = source


class RpcHttpError(PriceFetchError):
    """Endpoint answered with a non-200 HTTP status."""

    pass


class JsonRpcError(PriceFetchError):
    """JSON-RPC envelope carried an error object or no result."""

    def __init__(self, message: str, code: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.code = code


class PriceParseError(PriceFetchError):
    """Response body did not contain a usable price."""

    pass


class ConfigurationError(Exception):
    """Required configuration (e.g. the provider API key) is missing."""

    pass
