"""Weather query service: two concurrent provider calls, normalized results."""

import asyncio
import logging

from weatherglance.config.defaults import DEFAULT_CREDENTIAL_ENV, MAX_FORECAST_DAYS
from weatherglance.forecast.aggregator import aggregate
from weatherglance.ingest.normalize import forecast_entries, parse_current
from weatherglance.ingest.owm_client import OwmClient
from weatherglance.models.errors import (
    InvalidInput,
    MissingCredential,
    NotFound,
    TransportOrParseError,
)
from weatherglance.models.weather import QueryResult, WeatherReport

logger = logging.getLogger(__name__)


class WeatherQueryService:
    def __init__(
        self,
        client: OwmClient,
        credential_env: str = DEFAULT_CREDENTIAL_ENV,
        forecast_days: int = MAX_FORECAST_DAYS,
    ):
        self.client = client
        self.credential_env = credential_env
        self.forecast_days = forecast_days

    def check_inputs(self, city: str | None, credential: str | None) -> str:
        """Run the pre-network guards. Returns the trimmed city name."""
        if credential is None or not credential.strip():
            raise MissingCredential(self.credential_env)
        trimmed = (city or "").strip()
        if not trimmed:
            raise InvalidInput()
        return trimmed

    async def query(self, city: str | None, credential: str | None) -> QueryResult:
        """Fetch current conditions and the raw forecast list for a city.

        Both requests run concurrently and are awaited together. Only the
        current-conditions status decides between success and NotFound.
        """
        trimmed = self.check_inputs(city, credential)
        assert credential is not None

        responses = await asyncio.gather(
            self.client.get_current(trimmed, credential),
            self.client.get_forecast(trimmed, credential),
            return_exceptions=True,
        )
        for resp in responses:
            if isinstance(resp, Exception):
                logger.error("Weather request failed for %s: %s", trimmed, resp)
                raise TransportOrParseError.from_exception(resp) from resp
        current_resp, forecast_resp = responses

        if not current_resp.is_success:
            logger.info(
                "Current conditions for %s returned %d", trimmed, current_resp.status_code
            )
            raise NotFound(current_resp.status_code)

        try:
            current = parse_current(current_resp.json())
            raw_samples = forecast_entries(forecast_resp.json())
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Malformed weather response for %s: %s", trimmed, e)
            raise TransportOrParseError.from_exception(e) from e

        logger.info(
            "Fetched %s, %s with %d forecast samples",
            current.city, current.country_code, len(raw_samples),
        )
        return QueryResult(current=current, raw_samples=raw_samples)

    async def report(self, city: str | None, credential: str | None) -> WeatherReport:
        """Query a city and aggregate its forecast into daily summaries."""
        result = await self.query(city, credential)
        return WeatherReport(
            current=result.current,
            daily=aggregate(result.raw_samples, max_days=self.forecast_days),
        )
