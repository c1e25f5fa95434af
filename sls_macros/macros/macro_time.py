"""
Time column macros
------------------
$__time(col)          →  to_unixtime(col) as time
$__timeFilter(col)    →  col >= <from> AND col < <to>

The column is everything up to the first ``)`` and is copied verbatim.
The filter range is half-open: the lower bound is inclusive, the upper
bound exclusive.
"""

from __future__ import annotations

import re

from .context import MacroContext
from .registry import MacroRegistry

TIME_PATTERN = re.compile(r"\$__time\(([^)]+)\)")
TIME_FILTER_PATTERN = re.compile(r"\$__timeFilter\(([^)]+)\)")


def render_time(column: str) -> str:
    return f"to_unixtime({column}) as time"


def render_time_filter(column: str, ctx: MacroContext) -> str:
    return f"{column} >= {ctx.time_from:d} AND {column} < {ctx.time_to:d}"


def register(registry: MacroRegistry) -> None:

    @registry.register("$__time", TIME_PATTERN)
    def time_macro(match, ctx):
        """Select a time column as epoch seconds aliased to ``time``."""
        return render_time(match.group(1))

    @registry.register("$__timeFilter", TIME_FILTER_PATTERN)
    def time_filter_macro(match, ctx):
        """Restrict a time column to the dashboard range."""
        return render_time_filter(match.group(1), ctx)
