"""Weather data models: current conditions, forecast samples and daily summaries."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CurrentConditions:
    city: str
    country_code: str
    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    wind_speed_ms: float
    description: str
    icon_code: str
    observed_at: int  # Unix epoch seconds


@dataclass(frozen=True)
class RawForecastSample:
    """One validated 3-hour forecast point."""

    date: str  # YYYY-MM-DD
    temp_min: float
    temp_max: float
    icon_code: str
    description: str


@dataclass(frozen=True)
class DailySummary:
    date: str  # YYYY-MM-DD
    min_c: float
    max_c: float
    icon_code: str
    description: str


@dataclass(frozen=True)
class QueryResult:
    current: CurrentConditions
    raw_samples: list[dict] = field(default_factory=list)


@dataclass(frozen=True)
class WeatherReport:
    current: CurrentConditions
    daily: list[DailySummary] = field(default_factory=list)
