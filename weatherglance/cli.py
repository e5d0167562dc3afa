"""CLI entry point for the weather lookup."""

import argparse
import asyncio
import locale
import logging
from pathlib import Path

from weatherglance.config.defaults import DEFAULT_CONFIG_PATH
from weatherglance.config.loader import get_config_value, load_config, load_credential
from weatherglance.config.schema import GlanceConfig
from weatherglance.ingest.owm_client import OwmClient
from weatherglance.query.service import WeatherQueryService
from weatherglance.reporting.formatters import format_report_json, format_report_text
from weatherglance.ui.state import Failed, Ready, WeatherWidget

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="glance",
        description="Current weather and five-day outlook for a city",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_PATH, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # show
    show_p = sub.add_parser("show", help="Look up a city")
    show_p.add_argument("city", nargs="?", help="City name (default from config)")
    show_p.add_argument("--json", action="store_true", help="Print JSON")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. display.default_city")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = _load(args.config)

    if args.command == "show":
        return _cmd_show(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _load(path: str) -> GlanceConfig:
    if path == DEFAULT_CONFIG_PATH and not Path(path).exists():
        logger.debug("No %s found, using defaults", path)
        return GlanceConfig()
    return load_config(path)


def _cmd_show(config: GlanceConfig, args) -> int:
    if config.display.locale:
        try:
            locale.setlocale(locale.LC_TIME, config.display.locale)
        except locale.Error:
            logger.warning("Locale %s unavailable, using default", config.display.locale)

    client = OwmClient(
        base_url=config.api.base_url,
        units=config.api.units,
        timeout=config.api.timeout_seconds,
    )
    service = WeatherQueryService(
        client,
        credential_env=config.credential_env,
        forecast_days=config.display.forecast_days,
    )
    widget = WeatherWidget(
        service,
        credential=load_credential(config),
        default_city=config.display.default_city,
    )

    city = args.city if args.city is not None else config.display.default_city
    state = asyncio.run(widget.search(city))

    if isinstance(state, Failed):
        print(f"Error: {state.message}")
        return 1
    assert isinstance(state, Ready)
    if args.json:
        print(format_report_json(state.report, config.api.icon_base_url))
    else:
        print(format_report_text(state.report, config.api.icon_base_url))
    return 0


def _cmd_config(config: GlanceConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e}")
            return 1
        if hasattr(value, "model_dump_json"):
            print(value.model_dump_json(indent=2))
        else:
            print(value)
        return 0
    else:
        print("Use: config show | config get KEY")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
