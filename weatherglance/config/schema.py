"""Pydantic v2 configuration schema with strict validation."""

from typing import Literal

from pydantic import BaseModel, Field

from weatherglance.config.defaults import (
    DEFAULT_CITY,
    DEFAULT_CREDENTIAL_ENV,
    MAX_FORECAST_DAYS,
    OWM_BASE_URL,
    OWM_ICON_BASE_URL,
)


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OWM_BASE_URL
    icon_base_url: str = OWM_ICON_BASE_URL
    units: Literal["metric"] = "metric"
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_city: str = Field(default=DEFAULT_CITY, min_length=1)
    forecast_days: int = Field(default=MAX_FORECAST_DAYS, ge=1, le=MAX_FORECAST_DAYS)
    locale: str | None = None


class GlanceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    display: DisplayConfig = DisplayConfig()
    credential_env: str = Field(default=DEFAULT_CREDENTIAL_ENV, min_length=1)
