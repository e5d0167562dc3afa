"""Map provider JSON bodies onto typed weather records."""

import logging
from numbers import Real
from typing import Any

from weatherglance.models.weather import CurrentConditions, RawForecastSample

logger = logging.getLogger(__name__)


def parse_current(payload: dict) -> CurrentConditions:
    """Build CurrentConditions from a /weather response body.

    Missing fields raise KeyError/IndexError/TypeError instead of being
    defaulted.
    """
    main = payload["main"]
    weather = payload["weather"][0]
    return CurrentConditions(
        city=payload["name"],
        country_code=payload["sys"]["country"],
        temperature_c=main["temp"],
        feels_like_c=main["feels_like"],
        humidity_pct=main["humidity"],
        wind_speed_ms=payload["wind"]["speed"],
        description=weather["description"],
        icon_code=weather["icon"],
        observed_at=payload["dt"],
    )


def forecast_entries(payload: dict) -> list[dict]:
    """Return the raw 3-hour sample list from a /forecast response body."""
    entries = payload.get("list") if isinstance(payload, dict) else None
    return list(entries or [])


def extract_sample(entry: Any) -> RawForecastSample | None:
    """Validate one raw forecast entry. Returns None for unusable entries."""
    if not isinstance(entry, dict):
        return None

    dt_txt = entry.get("dt_txt")
    date = dt_txt.split(" ")[0] if isinstance(dt_txt, str) else ""
    if not date:
        return None

    main = entry.get("main")
    if not isinstance(main, dict):
        return None
    temp_min = main.get("temp_min")
    temp_max = main.get("temp_max")
    if not _is_number(temp_min) or not _is_number(temp_max):
        return None

    weather = entry.get("weather")
    first = weather[0] if isinstance(weather, list) and weather else None
    if not isinstance(first, dict):
        return None
    icon = first.get("icon")
    description = first.get("description")
    if not icon or not description:
        return None

    return RawForecastSample(
        date=date,
        temp_min=temp_min,
        temp_max=temp_max,
        icon_code=icon,
        description=description,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)
