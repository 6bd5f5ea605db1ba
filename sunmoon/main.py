"""
sunmoon Command-Line Entry Point

Prints sun and moon events and positions for a location.

Usage:
    sunmoon sun-times --lat 50.94 --lng 6.96 --timezone Europe/Berlin
    sunmoon moon-phase --phase FULL_MOON --date 2017-09-01
    sunmoon sun-position --config /path/to/config.yaml
    sunmoon moon-times --limit-days 1 --log-level DEBUG

Entry Points:
    - CLI: `sunmoon` command (via pyproject.toml)
    - Direct: `python -m sunmoon.main`
"""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime, timedelta
from typing import Callable, Optional, Sequence

from services.almanac import (
    compute_moon_illumination,
    compute_moon_phase,
    compute_moon_position,
    compute_moon_times,
    compute_sun_position,
    compute_sun_times,
)
from sunmoon import __version__
from sunmoon.config import SunmoonConfig, load_config
from sunmoon.exceptions import SunmoonError
from sunmoon.logging_config import get_logger, setup_logging
from sunmoon.params import Location, at_midnight, in_timezone, on_date, resolve_timezone

__all__ = ["main", "create_parser"]

# Module logger
logger = get_logger(__name__)

COMMANDS = [
    "sun-times",
    "moon-times",
    "moon-phase",
    "sun-position",
    "moon-position",
    "moon-illumination",
]


# =============================================================================
# Argument Parser
# =============================================================================


def _parse_date(value: str) -> datetime | date:
    """Parse an ISO 8601 date or date-time argument."""
    try:
        if "T" in value or " " in value:
            return datetime.fromisoformat(value)
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid ISO 8601 date: {value}") from e


def _common_options() -> argparse.ArgumentParser:
    """Options shared by all subcommands."""
    common = argparse.ArgumentParser(add_help=False)

    # Configuration
    common.add_argument(
        "-c",
        "--config",
        type=str,
        metavar="PATH",
        help="Path to configuration file (default: auto-discover)",
    )

    # Location and time
    common.add_argument("--lat", type=float, help="Latitude in degrees, north positive")
    common.add_argument("--lng", type=float, help="Longitude in degrees, east positive")
    common.add_argument("--height", type=float, help="Height above sea level, in meters")
    common.add_argument(
        "--date",
        type=_parse_date,
        help="ISO 8601 date or date-time (default: today, or now for positions)",
    )
    common.add_argument("--timezone", type=str, help="IANA time zone name")

    # Computation parameters
    common.add_argument("--twilight", type=str, help="Twilight preset or angle in degrees")
    common.add_argument("--phase", type=str, help="Moon phase preset or angle in degrees")
    common.add_argument(
        "--limit-days",
        type=float,
        help="Length of the calculation window, in days",
    )

    # Logging
    common.add_argument(
        "-l",
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set logging level (overrides config file)",
    )
    common.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Path to log file (default: stdout only)",
    )
    return common


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="sunmoon",
        description="Sun and moon positions, rise/set times and phases",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    common = _common_options()
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    for command in COMMANDS:
        subparsers.add_parser(
            command,
            parents=[common],
            help=command.replace("-", " "),
        )

    return parser


# =============================================================================
# Command Handlers
# =============================================================================


def apply_overrides(config: SunmoonConfig, args: argparse.Namespace) -> SunmoonConfig:
    """Merge command-line options into the loaded configuration.

    Returns:
        New validated configuration
    """
    data = config.model_dump()
    location = data["location"]
    if args.lat is not None:
        location["latitude"] = args.lat
    if args.lng is not None:
        location["longitude"] = args.lng
    if args.height is not None:
        location["height"] = args.height
    if args.timezone is not None:
        location["timezone"] = args.timezone
    if args.twilight is not None:
        data["sun_times"]["twilight"] = args.twilight
    if args.phase is not None:
        data["moon_phase"]["phase"] = args.phase
    if args.limit_days is not None:
        data["sun_times"]["limit_days"] = args.limit_days
        data["moon_times"]["limit_days"] = args.limit_days
    if args.log_level is not None:
        data["log_level"] = args.log_level
    if args.log_file is not None:
        data["log_file"] = args.log_file
    return SunmoonConfig(**data)


def resolve_start(config: SunmoonConfig, value: Optional[datetime | date], midnight: bool) -> datetime:
    """Start time of a computation in the configured time zone.

    Args:
        config: Configuration holding the time zone
        value: Parsed --date argument, or None for the current time
        midnight: Start at the beginning of the day if no time was given

    Returns:
        Timezone-aware datetime
    """
    tz = resolve_timezone(config.location.timezone)
    if value is None:
        now = datetime.now(tz)
        return at_midnight(now) if midnight else now
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return in_timezone(value, tz)
        return value
    return on_date(value, tz)


def run_command(command: str, config: SunmoonConfig, when: Optional[datetime | date]) -> str:
    """Run one subcommand and return its printable result."""
    location: Location = config.to_location()

    handlers: dict[str, Callable[[], object]] = {
        "sun-times": lambda: compute_sun_times(
            location,
            resolve_start(config, when, midnight=True),
            config.twilight_value(),
            config.sun_times.limit,
        ),
        "moon-times": lambda: compute_moon_times(
            location,
            resolve_start(config, when, midnight=True),
            config.moon_times.limit,
        ),
        "moon-phase": lambda: compute_moon_phase(
            resolve_start(config, when, midnight=False),
            config.phase_value(),
        ),
        "sun-position": lambda: compute_sun_position(
            location, resolve_start(config, when, midnight=False)
        ),
        "moon-position": lambda: compute_moon_position(
            location, resolve_start(config, when, midnight=False)
        ),
        "moon-illumination": lambda: compute_moon_illumination(
            resolve_start(config, when, midnight=False)
        ),
    }

    logger.debug(f"Running {command} for {location}")
    return str(handlers[command]())


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the sunmoon command.

    Args:
        argv: Command-line arguments (default: sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Basic logging until the configuration is loaded
    setup_logging(log_level=args.log_level or "WARNING", log_file=args.log_file)

    try:
        logger.debug(f"Loading configuration from: {args.config or 'auto-discover'}")
        config = apply_overrides(load_config(args.config), args)
        setup_logging(log_level=config.log_level, log_file=config.log_file)
        print(run_command(args.command, config, args.date))
        return 0
    except SunmoonError as e:
        logger.error(f"sunmoon error: {e}")
        return 1
    except ValueError as e:
        # Invalid command-line values rejected by the configuration models
        logger.error(f"Invalid argument: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
