"""Output formatters for weather reports."""

import json
import math
from dataclasses import asdict
from datetime import datetime

from weatherglance.config.defaults import OWM_ICON_BASE_URL
from weatherglance.models.weather import WeatherReport


def format_temp(value: float) -> str:
    """Whole degrees, halves rounded up: 12.5 -> '13°C', -2.5 -> '-2°C'."""
    return f"{math.floor(value + 0.5)}°C"


def icon_url(icon_code: str, base_url: str = OWM_ICON_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{icon_code}@2x.png"


def format_day(date_str: str) -> str:
    """Short weekday and month under the current LC_TIME locale, e.g. 'Mon, Jan 1'."""
    d = datetime.strptime(date_str, "%Y-%m-%d")
    return f"{d:%a, %b} {d.day}"


def format_observed(epoch: int) -> str:
    """Local time of day for an observation timestamp."""
    return datetime.fromtimestamp(epoch).strftime("%X")


def format_report_text(report: WeatherReport, icon_base_url: str = OWM_ICON_BASE_URL) -> str:
    """Plain text report for the terminal."""
    c = report.current
    lines = [
        f"=== {c.city}, {c.country_code} | Updated {format_observed(c.observed_at)} ===",
        f"{format_temp(c.temperature_c)}  {c.description}",
        f"Feels like: {format_temp(c.feels_like_c)} | "
        f"Humidity: {c.humidity_pct}% | Wind: {c.wind_speed_ms:.1f} m/s",
        f"Icon: {icon_url(c.icon_code, icon_base_url)}",
        "",
        f"{len(report.daily)}-day forecast (high / low)",
    ]
    if not report.daily:
        lines.append("  No forecast available.")
    for day in report.daily:
        lines.append(
            f"  {format_day(day.date):<14} {format_temp(day.max_c):>6} / "
            f"{format_temp(day.min_c):<6} {day.description}"
        )
    return "\n".join(lines)


def format_report_json(report: WeatherReport, icon_base_url: str = OWM_ICON_BASE_URL) -> str:
    """JSON report for programmatic consumption."""
    data = {
        "current": {
            **asdict(report.current),
            "icon_url": icon_url(report.current.icon_code, icon_base_url),
        },
        "daily": [
            {**asdict(day), "icon_url": icon_url(day.icon_code, icon_base_url)}
            for day in report.daily
        ],
    }
    return json.dumps(data, indent=2)
