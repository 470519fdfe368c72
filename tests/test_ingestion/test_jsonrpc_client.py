"""Tests for the JSON-RPC client."""

import pytest
from fakes import rpc_result

from gas_tracker.ingestion.adapters.jsonrpc import JsonRpcClient, build_request
from gas_tracker.ingestion.exceptions import JsonRpcError, PriceFetchError, RpcHttpError

URL = "https://rpc.example.test"


def test_build_request_envelope():
    assert build_request("eth_gasPrice") == {
        "jsonrpc": "2.0",
        "method": "eth_gasPrice",
        "params": [],
        "id": 1,
    }


@pytest.mark.asyncio
async def test_call_posts_envelope_and_returns_result(http_client):
    http_client.add("POST", URL, body=rpc_result("0x3b9aca00"))

    result = await JsonRpcClient(http_client).call(URL, "eth_gasPrice")

    assert result == "0x3b9aca00"
    call = http_client.calls[0]
    assert call["method"] == "POST"
    assert call["data"] == build_request("eth_gasPrice")
    assert call["headers"] == {"Content-Type": "application/json"}


@pytest.mark.asyncio
async def test_error_envelope_raises_json_rpc_error(http_client):
    http_client.add(
        "POST",
        URL,
        body={"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "nope"}},
    )

    with pytest.raises(JsonRpcError) as exc_info:
        await JsonRpcClient(http_client).call(URL, "eth_gasPrice")

    assert exc_info.value.code == -32601
    assert "nope" in str(exc_info.value)


@pytest.mark.asyncio
async def test_missing_result_raises(http_client):
    http_client.add("POST", URL, body={"jsonrpc": "2.0", "id": 1})

    with pytest.raises(JsonRpcError):
        await JsonRpcClient(http_client).call(URL, "eth_gasPrice")


@pytest.mark.asyncio
async def test_non_200_raises_http_error(http_client):
    http_client.add("POST", URL, body="Service Unavailable", status=503)

    with pytest.raises(RpcHttpError) as exc_info:
        await JsonRpcClient(http_client).call(URL, "eth_gasPrice")

    assert exc_info.value.status_code == 503
    assert isinstance(exc_info.value, PriceFetchError)


@pytest.mark.asyncio
async def test_non_object_body_raises(http_client):
    http_client.add("POST", URL, body=["not", "an", "envelope"])

    with pytest.raises(JsonRpcError):
        await JsonRpcClient(http_client).call(URL, "eth_gasPrice")
