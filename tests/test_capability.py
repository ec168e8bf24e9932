"""Tests for tools/capability.py — delegated capability HTTP client."""
import json

import httpx
import pytest
import respx

from portfolio.tools.capability import SSL_CHECKER, CapabilityClient, CapabilityError

BASE = "http://functions.test/v1"


class TestCapabilityClient:
    def test_base_url_trailing_slash(self):
        assert CapabilityClient(BASE + "/").base_url == BASE

    @pytest.mark.asyncio
    @respx.mock
    async def test_invoke_posts_json(self):
        route = respx.post(f"{BASE}/{SSL_CHECKER}").mock(
            return_value=httpx.Response(200, json={"score": 95, "grade": "A+"})
        )
        client = CapabilityClient(BASE, api_key="anon-key")
        data = await client.invoke(SSL_CHECKER, {"domain": "example.com"})

        assert data == {"score": 95, "grade": "A+"}
        request = route.calls.last.request
        assert json.loads(request.content) == {"domain": "example.com"}
        assert request.headers["Authorization"] == "Bearer anon-key"
        assert request.headers["apikey"] == "anon-key"

    @pytest.mark.asyncio
    @respx.mock
    async def test_no_auth_header_without_key(self):
        route = respx.post(f"{BASE}/{SSL_CHECKER}").mock(return_value=httpx.Response(200, json={"score": 1}))
        await CapabilityClient(BASE).invoke(SSL_CHECKER, {})
        assert "Authorization" not in route.calls.last.request.headers

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_error(self):
        respx.post(f"{BASE}/{SSL_CHECKER}").mock(return_value=httpx.Response(500))
        with pytest.raises(CapabilityError) as exc:
            await CapabilityClient(BASE).invoke(SSL_CHECKER, {})
        assert "HTTP 500" in str(exc.value)
        assert exc.value.name == SSL_CHECKER

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error(self):
        respx.post(f"{BASE}/{SSL_CHECKER}").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(CapabilityError):
            await CapabilityClient(BASE).invoke(SSL_CHECKER, {})

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_object_body(self):
        respx.post(f"{BASE}/{SSL_CHECKER}").mock(return_value=httpx.Response(200, json=[1, 2]))
        with pytest.raises(CapabilityError):
            await CapabilityClient(BASE).invoke(SSL_CHECKER, {})

    @pytest.mark.asyncio
    @respx.mock
    async def test_invalid_json(self):
        respx.post(f"{BASE}/{SSL_CHECKER}").mock(return_value=httpx.Response(200, content=b"<html>"))
        with pytest.raises(CapabilityError):
            await CapabilityClient(BASE).invoke(SSL_CHECKER, {})

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_only_body(self):
        respx.post(f"{BASE}/{SSL_CHECKER}").mock(return_value=httpx.Response(200, json={"error": "Domain unreachable"}))
        with pytest.raises(CapabilityError) as exc:
            await CapabilityClient(BASE).invoke(SSL_CHECKER, {})
        assert "Domain unreachable" in str(exc.value)
