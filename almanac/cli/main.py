import argparse
import sys

from almanac import __version__
from almanac.cli.commands import run_sun, run_track


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to config.toml")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warn", "error"],
        help="Enable logging at this level",
    )
    parser.add_argument("--json", action="store_true", help="Output result as JSON")
    parser.add_argument("--lat", dest="latitude_deg", help="Latitude in decimal degrees or DMS")
    parser.add_argument("--lon", dest="longitude_deg", help="Longitude in decimal degrees or DMS, east positive")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="almanac")
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    subparsers = parser.add_subparsers(dest="command")

    sun_parser = subparsers.add_parser("sun", help="Apparent solar position and hour angle")
    _add_common_args(sun_parser)
    sun_parser.add_argument("--time", help="UTC instant (ISO 8601); defaults to the config time")
    sun_parser.add_argument(
        "--compare", action="store_true", help="Compare against astropy (requires astropy)"
    )

    track_parser = subparsers.add_parser("track", help="Solar altitude/azimuth over a span")
    _add_common_args(track_parser)
    track_parser.add_argument("--start", help="UTC start (ISO 8601); defaults to the config time")
    track_parser.add_argument("--end", help="UTC end (ISO 8601); defaults to start + 1 day")
    track_parser.add_argument("--points", type=int, default=288, help="Number of intervals")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"Almanac {__version__}")
        return 0

    if args.command == "sun":
        return run_sun(args)

    if args.command == "track":
        return run_track(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
