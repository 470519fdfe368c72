"""Concrete HTTP client implementation for async requests.

Wraps aiohttp behind IHttpClient abstraction.
"""

from typing import Any

import aiohttp

from gas_tracker.ingestion.config.value_objects import HttpClientConfig
from gas_tracker.ingestion.ports.http import HttpResponse, IHttpClient


class AiohttpClient(IHttpClient):
    """HTTP client implementation using aiohttp.

    One session is shared by every request of a run; close() it (or use the
    client as an async context manager) when the run is over.
    """

    def __init__(self, config: HttpClientConfig | None = None):
        self.config = config or HttpClientConfig()
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "AiohttpClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    @staticmethod
    async def _to_response(resp: aiohttp.ClientResponse) -> HttpResponse:
        if resp.status == 200:
            body = await resp.json(content_type=None)
        else:
            body = await resp.text()
        return HttpResponse(
            status_code=resp.status,
            body=body,
            headers=dict(resp.headers),
            url=str(resp.url),
        )

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute GET request.

        Raises:
            aiohttp.ClientError: On connection errors
        """
        session = await self._get_session()
        timeout_obj = aiohttp.ClientTimeout(total=timeout or self.config.timeout)

        async with session.get(
            url,
            params=params,
            headers=headers,
            timeout=timeout_obj,
        ) as resp:
            return await self._to_response(resp)

    async def post(
        self,
        url: str,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute POST request with a JSON body.

        Raises:
            aiohttp.ClientError: On connection errors
        """
        session = await self._get_session()
        timeout_obj = aiohttp.ClientTimeout(total=timeout or self.config.timeout)

        async with session.post(
            url,
            json=data,
            headers=headers,
            timeout=timeout_obj,
        ) as resp:
            return await self._to_response(resp)

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
