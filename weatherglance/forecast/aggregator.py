"""Collapse 3-hour forecast samples into per-day min/max summaries."""

import logging
from collections.abc import Iterable
from typing import Any

from weatherglance.config.defaults import MAX_FORECAST_DAYS
from weatherglance.ingest.normalize import extract_sample
from weatherglance.models.weather import DailySummary

logger = logging.getLogger(__name__)


def aggregate(
    entries: Iterable[Any], max_days: int = MAX_FORECAST_DAYS
) -> list[DailySummary]:
    """Reduce raw forecast entries to at most ``max_days`` daily summaries.

    Days keep the order in which they were first seen. The icon and
    description of a day come from its first valid sample and are never
    replaced. Invalid entries are skipped.
    """
    days: dict[str, dict[str, Any]] = {}
    skipped = 0

    for entry in entries:
        sample = extract_sample(entry)
        if sample is None:
            skipped += 1
            continue

        day = days.get(sample.date)
        if day is None:
            days[sample.date] = {
                "min": sample.temp_min,
                "max": sample.temp_max,
                "icon": sample.icon_code,
                "description": sample.description,
            }
            continue

        day["min"] = min(day["min"], sample.temp_min)
        day["max"] = max(day["max"], sample.temp_max)

    if skipped:
        logger.debug("Skipped %d invalid forecast entries", skipped)

    return [
        DailySummary(
            date=date,
            min_c=day["min"],
            max_c=day["max"],
            icon_code=day["icon"],
            description=day["description"],
        )
        for date, day in list(days.items())[:max_days]
    ]
