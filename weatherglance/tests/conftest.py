"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherglance.config.schema import GlanceConfig
from weatherglance.ingest.owm_client import OwmClient
from weatherglance.query.service import WeatherQueryService

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-owm.example.com/data/2.5"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def london_current() -> dict:
    with open(FIXTURE_DIR / "owm_current_london.json") as f:
        return json.load(f)


@pytest.fixture
def london_forecast() -> dict:
    with open(FIXTURE_DIR / "owm_forecast_london.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> GlanceConfig:
    return GlanceConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a config YAML pointing at the test provider and return its path."""
    data = {
        "api": {"base_url": TEST_BASE_URL},
        "display": {"default_city": "London"},
        "credential_env": "GLANCE_TEST_KEY",
    }
    path = tmp_path / "glance.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def owm() -> OwmClient:
    return OwmClient(base_url=TEST_BASE_URL, timeout=5.0)


@pytest.fixture
def service(owm: OwmClient) -> WeatherQueryService:
    return WeatherQueryService(owm)
