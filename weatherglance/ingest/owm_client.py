"""OpenWeatherMap API client for current conditions and the 5-day/3-hour forecast."""

import logging

import httpx

from weatherglance.config.defaults import OWM_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weather-glance/0.1.0"


class OwmClient:
    """Async client for the two city-name endpoints.

    Responses are returned unchecked; callers decide which status codes
    matter. No retry is attempted.
    """

    def __init__(
        self,
        base_url: str = OWM_BASE_URL,
        units: str = "metric",
        timeout: float = 30.0,
        http: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout
        self._http = http

    async def get_current(self, city: str, credential: str) -> httpx.Response:
        """GET /weather?q=<city> for the current conditions."""
        return await self._get("/weather", city, credential)

    async def get_forecast(self, city: str, credential: str) -> httpx.Response:
        """GET /forecast?q=<city> for the 5-day/3-hour forecast list."""
        return await self._get("/forecast", city, credential)

    async def _get(self, endpoint: str, city: str, credential: str) -> httpx.Response:
        url = f"{self.base_url}{endpoint}"
        params = {"q": city, "appid": credential, "units": self.units}
        headers = {"User-Agent": DEFAULT_USER_AGENT, "Accept": "application/json"}
        logger.debug("GET %s q=%s", url, city)

        if self._http is not None:
            resp = await self._http.get(url, params=params, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params, headers=headers)

        logger.debug("%s returned %d", url, resp.status_code)
        return resp
