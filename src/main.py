"""
Solar Event Calculator - Command Line Entry Point
"""

import argparse
import datetime as dt
import logging
import os
import sys
from typing import List, Optional

import pytz
from pydantic import ValidationError

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from models.events import PolarCondition
from models.requests import Coordinate
from utils.config_utils import ConfigManager
from utils.solar import SolarCalculator

logger = logging.getLogger(__name__)

EVENT_LABELS = {
    "astronomical_dawn": "Astronomical dawn",
    "nautical_dawn": "Nautical dawn",
    "civil_dawn": "Civil dawn",
    "sunrise": "Sunrise",
    "solar_noon": "Solar noon",
    "sunset": "Sunset",
    "civil_dusk": "Civil dusk",
    "nautical_dusk": "Nautical dusk",
    "astronomical_dusk": "Astronomical dusk",
}


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "WARNING").upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Calculate sunrise, sunset, twilight and solar noon times"
    )
    parser.add_argument("--date", help="Date as YYYY-MM-DD (default: today)")
    parser.add_argument("--lat", type=float, help="Latitude in degrees")
    parser.add_argument("--lon", type=float, help="Longitude in degrees, east positive")
    parser.add_argument("--mask", help="Event classes, e.g. 'official|civil' or 'all'")
    parser.add_argument("--timezone", help="IANA time zone used for display")
    parser.add_argument(
        "--noon-mode", choices=["midpoint", "legacy"], help="Solar noon calculation"
    )
    parser.add_argument("--config", help="Path to a JSON configuration file")
    return parser


def format_event(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, PolarCondition):
        return value.value.replace("_", " ")
    return value.strftime("%Y-%m-%d %H:%M:%S %Z")


def run(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, calculate and print results. Returns an exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager.load_calculator_config(args.config)
        config = ConfigManager.override_from_environment(config)
        if args.noon_mode:
            config = config.model_copy(update={"solar_noon_mode": args.noon_mode})
        logger.debug(f"Configuration: {ConfigManager.get_config_summary(config)}")

        location = config.location
        latitude = args.lat if args.lat is not None else getattr(location, "latitude", None)
        longitude = (
            args.lon if args.lon is not None else getattr(location, "longitude", None)
        )
        if latitude is None or longitude is None:
            raise ValueError("Latitude and longitude are required (--lat/--lon or config)")

        timezone_name = args.timezone or getattr(location, "timezone", None) or "UTC"
        date = dt.date.fromisoformat(args.date) if args.date else dt.date.today()

        calculator = SolarCalculator(
            date=date,
            coordinate=Coordinate(latitude=latitude, longitude=longitude),
            event_mask=args.mask,
            config=config,
        )
        calculator.calculate()
        results = calculator.result.localized(timezone_name)
    except (ValidationError, ValueError, pytz.UnknownTimeZoneError) as e:
        logger.error(f"Invalid input: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

    for name, value in results.items():
        print(f"{EVENT_LABELS[name]:<18} {format_event(value)}")
    return 0


def main():
    """Main application function"""
    ConfigManager.load_environment()
    configure_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
