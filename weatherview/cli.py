"""CLI entry point for the weather forecast viewer."""

import argparse
import logging

from weatherview.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weatherview.ingest.city_codes import CityCodeIndex
from weatherview.pipeline.session import ForecastSession
from weatherview.reporting.formatters import format_forecast_json, format_forecast_text

DEFAULT_CONFIG = "weatherview.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherview",
        description="Seven-day weather forecast viewer",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # resolve
    resolve_p = sub.add_parser("resolve", help="Look up a city code")
    resolve_p.add_argument("name", help="City name, suffix optional")

    # forecast
    forecast_p = sub.add_parser("forecast", help="Fetch and show a forecast")
    forecast_p.add_argument("name", help="City name, suffix optional")
    forecast_p.add_argument(
        "--format", choices=["text", "json"], default="text", dest="fmt"
    )

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "resolve":
        return _cmd_resolve(config, args)
    elif args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_resolve(config, args) -> int:
    index = CityCodeIndex.from_path(config.dataset.path)
    code = index.resolve(args.name)
    if code is None:
        if index.load_error is not None:
            print(f"City dataset unavailable: {index.load_error}")
        else:
            print(f"City not found: {args.name}")
        return 1
    print(code)
    return 0


def _cmd_forecast(config, args) -> int:
    session = ForecastSession.from_config(config)
    outcome = session.refresh(args.name)
    if not outcome.ok:
        print(f"Error: {outcome.message} ({outcome.status})")
        return 1
    if args.fmt == "json":
        print(format_forecast_json(session.table))
    else:
        print(format_forecast_text(session.table))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            save_config(new_config, args.config)
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
