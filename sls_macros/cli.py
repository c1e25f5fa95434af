#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
sls-macros command line
=======================
Expand the time macros in a query and print the result:

    sls-macros --from 1600000000 --to 1600003600 '* | SELECT count(1) WHERE $__timeFilter(__time__)'
    echo "\\$__timeGroup(ts, '5m')" | sls-macros --from 2024-01-01T00:00:00 --to 2024-01-02

Bounds take epoch seconds or ISO-8601 datetimes (naive values are UTC).
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from sls_macros.core.config import get_settings
from sls_macros.core.logsetup import configure_logging
from sls_macros.interpolate import interpolate_macros
from sls_macros.macros import macro_registry
from sls_macros.macros.context import to_epoch

logger = logging.getLogger(__name__)

DEFAULT_RANGE = timedelta(hours=1)


# -----------------------------------------------------------------------------

def parse_time_bound(value: str) -> int:
    """argparse type: epoch seconds or an ISO-8601 datetime."""
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return to_epoch(datetime.fromisoformat(text))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected epoch seconds or an ISO-8601 datetime, got {value!r}"
        ) from None


def resolve_range(time_from: Optional[int], time_to: Optional[int]) -> tuple[int, int]:
    """Fill in missing bounds: *to* defaults to now, *from* to one hour before *to*."""
    if time_to is None:
        time_to = to_epoch(datetime.now(tz=timezone.utc))
    if time_from is None:
        time_from = time_to - int(DEFAULT_RANGE.total_seconds())
    return time_from, time_to


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sls-macros",
        description="Expand $__time* macros in an SLS query for a time range.",
    )
    parser.add_argument("query", nargs="?", default="-",
                        help="Query text, or '-' (default) to read it from stdin")
    parser.add_argument("--from", dest="time_from", type=parse_time_bound,
                        help="Range start: epoch seconds or ISO-8601 (default: --to minus 1h)")
    parser.add_argument("--to", dest="time_to", type=parse_time_bound,
                        help="Range end: epoch seconds or ISO-8601 (default: now)")
    parser.add_argument("--list", action="store_true",
                        help="List the supported macros and exit")
    return parser


# -----------------------------------------------------------------------------

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(get_settings())

    if args.list:
        for name in macro_registry.names():
            print(name)
        return 0

    if args.query == "-":
        if sys.stdin.isatty():
            parser.error("no query given and stdin is a terminal")
        query = sys.stdin.read()
    else:
        query = args.query

    time_from, time_to = resolve_range(args.time_from, args.time_to)
    logger.debug("Interpolating for range [%d, %d)", time_from, time_to)

    sys.stdout.write(interpolate_macros(query, time_from, time_to))
    if not query.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
