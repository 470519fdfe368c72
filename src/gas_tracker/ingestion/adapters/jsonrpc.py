"""Minimal JSON-RPC 2.0 client over IHttpClient."""

from typing import Any

from gas_tracker.infrastructure.observability import get_ingestion_logger
from gas_tracker.ingestion.exceptions import JsonRpcError, RpcHttpError
from gas_tracker.ingestion.ports.http import IHttpClient

JSONRPC_VERSION = "2.0"
DEFAULT_REQUEST_ID = 1


def build_request(
    method: str, params: list[Any] | None = None, request_id: int = DEFAULT_REQUEST_ID
) -> dict[str, Any]:
    """Build a JSON-RPC request envelope."""
    return {
        "jsonrpc": JSONRPC_VERSION,
        "method": method,
        "params": params or [],
        "id": request_id,
    }


class JsonRpcClient:
    """Issues single JSON-RPC calls against arbitrary endpoints.

    Single Responsibility: envelope in, `result` out. Error envelopes and
    non-200 answers become typed exceptions; nothing is retried.
    """

    def __init__(self, http_client: IHttpClient):
        self.http_client = http_client
        self.log = get_ingestion_logger("jsonrpc-client")

    async def call(
        self,
        url: str,
        method: str,
        params: list[Any] | None = None,
        request_id: int = DEFAULT_REQUEST_ID,
    ) -> Any:
        """Invoke `method` at `url` and return the envelope's `result`.

        Raises:
            RpcHttpError: Non-200 HTTP status
            JsonRpcError: Error object in the envelope, or no result
        """
        payload = build_request(method, params, request_id)
        response = await self.http_client.post(
            url,
            data=payload,
            headers={"Content-Type": "application/json"},
        )

        if response.status_code != 200:
            raise RpcHttpError(
                f"HTTP {response.status_code} from {method}: {response.body}",
                status_code=response.status_code,
                source=method,
            )

        body = response.body
        if not isinstance(body, dict):
            raise JsonRpcError(f"Unexpected {method} response: {body!r}", source=method)

        if body.get("error"):
            error = body["error"]
            code = error.get("code") if isinstance(error, dict) else None
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise JsonRpcError(
                f"{method} failed: {message}",
                code=code,
                status_code=response.status_code,
                source=method,
            )

        if "result" not in body or body["result"] is None:
            raise JsonRpcError(f"{method} returned no result", source=method)

        self.log.debug("rpc_call_succeeded", method=method, request_id=request_id)
        return body["result"]
