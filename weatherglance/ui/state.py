"""Widget state container.

The widget moves between four states, each carrying only the data that is
valid in it:

    Idle -> Loading -> Ready | Failed

``Loading`` keeps the report of the previous search, if any, so it stays
on display until the new outcome is committed.

``WeatherWidget.state`` is replaced in a single assignment, so observers
never see a new error next to stale results. Every search, including one
rejected by the input guards, takes a monotonically increasing request id,
and a completion is applied only if its id is still the latest one issued;
a slower, superseded search can no longer overwrite a newer result.
"""

import itertools
import logging
from dataclasses import dataclass

from weatherglance.config.defaults import DEFAULT_CITY
from weatherglance.models.errors import QueryError
from weatherglance.models.weather import CurrentConditions, DailySummary, WeatherReport
from weatherglance.query.service import WeatherQueryService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    query: str


@dataclass(frozen=True)
class Loading:
    query: str
    request_id: int
    previous: WeatherReport | None = None


@dataclass(frozen=True)
class Ready:
    query: str
    report: WeatherReport


@dataclass(frozen=True)
class Failed:
    query: str
    message: str


WidgetState = Idle | Loading | Ready | Failed


class WeatherWidget:
    def __init__(
        self,
        service: WeatherQueryService,
        credential: str | None,
        default_city: str = DEFAULT_CITY,
    ):
        self.service = service
        self.credential = credential
        self.default_city = default_city
        self.state: WidgetState = Idle(query=default_city)
        self._request_ids = itertools.count(1)
        self._latest_request = 0

    @property
    def api_ready(self) -> bool:
        return bool(self.credential and self.credential.strip())

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def error(self) -> str | None:
        return self.state.message if isinstance(self.state, Failed) else None

    @property
    def current(self) -> CurrentConditions | None:
        report = self._visible_report()
        return report.current if report is not None else None

    @property
    def forecast(self) -> list[DailySummary]:
        report = self._visible_report()
        return list(report.daily) if report is not None else []

    def _visible_report(self) -> WeatherReport | None:
        if isinstance(self.state, Ready):
            return self.state.report
        if isinstance(self.state, Loading):
            return self.state.previous
        return None

    async def start(self) -> WidgetState:
        """Initial search for the default city, skipped without a credential."""
        if not self.api_ready:
            logger.info("No credential configured; staying idle")
            return self.state
        return await self.search(self.default_city)

    async def search(self, city: str) -> WidgetState:
        """Run one search and commit its outcome to ``state``.

        Results shown before the search stay visible while it is loading.
        """
        request_id = next(self._request_ids)
        self._latest_request = request_id

        try:
            self.service.check_inputs(city, self.credential)
        except QueryError as e:
            self.state = Failed(query=city, message=e.message)
            return self.state

        self.state = Loading(
            query=city, request_id=request_id, previous=self._visible_report()
        )

        try:
            report = await self.service.report(city, self.credential)
            outcome: WidgetState = Ready(query=city, report=report)
        except QueryError as e:
            logger.info("Search for %r failed: %s", city, e.message)
            outcome = Failed(query=city, message=e.message)

        if request_id != self._latest_request:
            logger.debug(
                "Dropping result of request %d; request %d is newer",
                request_id, self._latest_request,
            )
            return self.state

        self.state = outcome
        return self.state
