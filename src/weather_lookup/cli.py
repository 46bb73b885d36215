"""Command-line entry point for one-off weather lookups."""

from __future__ import annotations

import argparse
import sys

from .credentials import credential_from_settings
from .errors import WeatherLookupError
from .lookup import configure
from .settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Look up the current weather")
    location = parser.add_mutually_exclusive_group(required=True)
    location.add_argument("--name", help='Location name, e.g. "London,UK"')
    location.add_argument("--lat", help="Latitude (use with --lon)")
    parser.add_argument("--lon", help="Longitude (use with --lat)")
    parser.add_argument("--unit", default=settings.default_unit, help="C, F or K")
    parser.add_argument("--lang", default=settings.default_lang, help="2-letter ISO language code")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # --lat/--lon travel together; --name excludes both.
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    session = configure(credential_from_settings(get_settings()), unit=args.unit, lang=args.lang)
    try:
        if args.name is not None:
            weather = session.fetch_by_name(args.name)
        else:
            weather = session.fetch_by_coordinates(args.lat, args.lon)
    except WeatherLookupError as exc:
        print(f"{exc.stage} error ({exc.code}): {exc.message}", file=sys.stderr)
        return 1

    print(weather.to_json() if args.json else weather.summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
