"""Tests for the OpenWeatherMap client with mocked httpx."""

import asyncio

import httpx
import pytest
import respx

from weatherglance.ingest.owm_client import OwmClient

BASE = "https://test-owm.example.com/data/2.5"


class TestGetCurrent:
    @respx.mock
    def test_request_params(self, owm: OwmClient, london_current: dict):
        route = respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(200, json=london_current)
        )

        resp = asyncio.run(owm.get_current("São Paulo", "key-123"))

        assert resp.status_code == 200
        assert route.call_count == 1
        params = route.calls[0].request.url.params
        assert params["q"] == "São Paulo"
        assert params["appid"] == "key-123"
        assert params["units"] == "metric"

    @respx.mock
    def test_user_agent_header(self, owm: OwmClient, london_current: dict):
        route = respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(200, json=london_current)
        )

        asyncio.run(owm.get_current("London", "key-123"))
        assert "weather-glance" in route.calls[0].request.headers["user-agent"]

    @respx.mock
    def test_error_status_returned_unchecked(self, owm: OwmClient):
        respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(404, json={"cod": "404", "message": "city not found"})
        )

        resp = asyncio.run(owm.get_current("Nowhere", "key-123"))
        assert resp.status_code == 404


class TestGetForecast:
    @respx.mock
    def test_success(self, owm: OwmClient, london_forecast: dict):
        route = respx.get(f"{BASE}/forecast").mock(
            return_value=httpx.Response(200, json=london_forecast)
        )

        resp = asyncio.run(owm.get_forecast("London", "key-123"))
        assert len(resp.json()["list"]) == 14
        assert route.calls[0].request.url.params["q"] == "London"

    @respx.mock
    def test_transport_error_propagates(self, owm: OwmClient):
        respx.get(f"{BASE}/forecast").mock(side_effect=httpx.ConnectError("boom"))

        with pytest.raises(httpx.ConnectError):
            asyncio.run(owm.get_forecast("London", "key-123"))


class TestInjectedClient:
    @respx.mock
    def test_uses_shared_async_client(self, london_current: dict):
        route = respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(200, json=london_current)
        )

        async def run() -> httpx.Response:
            async with httpx.AsyncClient() as http:
                client = OwmClient(base_url=f"{BASE}/", http=http)
                return await client.get_current("London", "key-123")

        resp = asyncio.run(run())
        assert resp.json()["name"] == "London"
        assert route.called
