"""Einmalige Berechnung auf der Kommandozeile, Ausgabe als JSON.

    natal-points --year 1990 --month 2 --day 10 --hour 3 --minute 30 \\
        --lat 50.53 --lon 2.64 --tz 1
"""
import argparse
import asyncio
import sys

from pydantic import ValidationError

from natal_points.config import get_settings
from natal_points.exceptions import ChartAPIException
from natal_points.models.schemas import BirthMoment
from natal_points.services.chart import assemble_chart
from natal_points.services.swisseph_provider import SwissEphemeris

# Béthune, Frankreich; tz = Versatz zu UTC (Winter +1, Sommer +2)
DEFAULTS = dict(year=1990, month=2, day=10, hour=3.0, minute=30.0, lat=50.53, lon=2.64, tz=1.0)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="natal-points", description=__doc__.splitlines()[0])
    for name in ("year", "month", "day"):
        p.add_argument(f"--{name}", type=int, default=DEFAULTS[name])
    for name in ("hour", "minute", "lat", "lon", "tz"):
        p.add_argument(f"--{name}", type=float, default=DEFAULTS[name])
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    try:
        moment = BirthMoment(**vars(args))
    except ValidationError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2
    engine = SwissEphemeris.from_settings(settings)
    try:
        result = asyncio.run(assemble_chart(moment, engine, settings.house_system))
    except ChartAPIException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(result.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
