"""HTTP communication abstractions for price clients.

Separates HTTP transport from request building and response parsing.
Allows easy faking of endpoints in tests.
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass
class HttpResponse:
    """HTTP response data container."""

    status_code: int
    body: Any  # JSON-decoded response body, or raw text on non-JSON errors
    headers: dict[str, str]
    url: str


class IHttpClient(Protocol):
    """Abstraction for HTTP client.

    Single Responsibility: Execute HTTP requests and return responses.
    Does NOT handle:
    - Response parsing
    - Error mapping
    - API key injection
    """

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute GET request.

        Args:
            url: Full URL to request
            params: Query parameters
            headers: HTTP headers
            timeout: Request timeout in seconds
        """
        ...

    async def post(
        self,
        url: str,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Execute POST request.

        Args:
            url: Full URL to request
            data: Request body as JSON-serializable dict
            headers: HTTP headers
            timeout: Request timeout in seconds
        """
        ...
