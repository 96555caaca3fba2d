"""Tests for the HTTP transport"""

import json

import httpx
import pytest

from cuey.config import ClientSettings
from cuey.errors import ConfigurationError, InternalServerError, NotFoundError
from cuey.http import HttpClient


def _http(handler, api_key="secret"):
    settings = ClientSettings(api_key=api_key, api_url="https://api.test")
    return HttpClient(settings, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_request_sends_auth_and_json():
    """Test bearer auth, content type and JSON body on every request"""
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": {"ok": True}})

    http = _http(handler)
    result = await http.post("/api/v1/events", {"a": 1})

    request = seen[0]
    assert result == {"data": {"ok": True}}
    assert request.method == "POST"
    assert str(request.url) == "https://api.test/api/v1/events"
    assert request.headers["Authorization"] == "Bearer secret"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"a": 1}


@pytest.mark.asyncio
async def test_none_query_params_are_dropped():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    await _http(handler).get("/api/v1/crons", params={"page": 2, "limit": None, "is_active": "false"})

    assert dict(seen[0].url.params) == {"page": "2", "is_active": "false"}


@pytest.mark.asyncio
async def test_empty_response_returns_none():
    """Test that 204 No Content decodes to None"""
    result = await _http(lambda request: httpx.Response(204)).delete("/api/v1/events/1")

    assert result is None


@pytest.mark.asyncio
async def test_text_response_returned_as_text():
    handler = lambda request: httpx.Response(200, text="ok")

    assert await _http(handler).get("/health") == "ok"


@pytest.mark.asyncio
async def test_error_response_raises_typed_error():
    def handler(request):
        return httpx.Response(404, json={"error": {"message": "Event not found", "code": "NOT_FOUND"}})

    with pytest.raises(NotFoundError) as exc_info:
        await _http(handler).get("/api/v1/events/missing")

    assert exc_info.value.message == "Event not found"


@pytest.mark.asyncio
async def test_invalid_json_is_internal_server_error():
    """Test an unreadable JSON body collapses into InternalServerError"""
    def handler(request):
        return httpx.Response(200, content=b"{not json", headers={"Content-Type": "application/json"})

    with pytest.raises(InternalServerError) as exc_info:
        await _http(handler).get("/api/v1/events")

    assert "Failed to parse JSON response" in exc_info.value.message


@pytest.mark.asyncio
async def test_missing_api_key_fails_before_request():
    """Test that a missing key raises on use without touching the network"""
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={})

    with pytest.raises(ConfigurationError, match="API key is required"):
        await _http(handler, api_key=None).get("/api/v1/events")

    assert seen == []


@pytest.mark.asyncio
async def test_transport_errors_propagate():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.ConnectError):
        await _http(handler).get("/api/v1/events")
