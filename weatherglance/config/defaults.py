"""Provider endpoints and display defaults."""

OWM_BASE_URL = "https://api.openweathermap.org/data/2.5"
OWM_ICON_BASE_URL = "https://openweathermap.org/img/wn"
DEFAULT_CITY = "London"
DEFAULT_CREDENTIAL_ENV = "OWM_API_KEY"
DEFAULT_CONFIG_PATH = "glance.yaml"
MAX_FORECAST_DAYS = 5
