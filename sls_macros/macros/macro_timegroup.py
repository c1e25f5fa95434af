"""
Time bucketing macros
---------------------
$__timeGroup(col, 'interval')            →  time_series(col, 'interval', '<fmt>', '0')
$__timeGroup(col, 'interval', fill)      →  time_series(col, 'interval', '<fmt>', <fill>)
$__timeGroupAlias(col, 'interval')       →  time_series(col, 'interval', '<fmt>', '0') as time

<fmt> is always ``%Y-%m-%d %H:%i:%s``.

Fill strategies use the MySQL-style keywords on input and the SLS padding
literals on output:

  absent / 0    →  '0'
  null          →  'null'
  previous      →  'last'
  anything else →  the text itself, single-quoted

Keyword matching is case-insensitive.  Unknown fill text is quoted as-is,
even if it already carries quotes.
"""

from __future__ import annotations

import re
from typing import Optional

from .registry import MacroRegistry

TIME_SERIES_FORMAT = "%Y-%m-%d %H:%i:%s"
DEFAULT_FILL = "0"

_FILL_LITERALS = {
    "0": "'0'",
    "null": "'null'",
    "previous": "'last'",
}

TIME_GROUP_PATTERN = re.compile(
    r"\$__timeGroup\(\s*([^,]+)\s*,\s*'([^']+)'(?:\s*,\s*([^)]+))?\s*\)"
)
TIME_GROUP_ALIAS_PATTERN = re.compile(
    r"\$__timeGroupAlias\(\s*([^,]+)\s*,\s*'([^']+)'\s*\)"
)


def fill_literal(fill: Optional[str]) -> str:
    """Map a caller fill argument to the SLS ``time_series`` padding literal."""
    if fill is None:
        fill = DEFAULT_FILL
    literal = _FILL_LITERALS.get(fill.lower())
    if literal is not None:
        return literal
    return f"'{fill}'"


def render_time_series(column: str, interval: str, fill: Optional[str] = None) -> str:
    return (
        f"time_series({column}, '{interval}', '{TIME_SERIES_FORMAT}', "
        f"{fill_literal(fill)})"
    )


def register(registry: MacroRegistry) -> None:

    @registry.register("$__timeGroup", TIME_GROUP_PATTERN)
    def time_group_macro(match, ctx):
        column, interval, fill = match.groups()
        if fill is not None:
            fill = fill.strip()
        return render_time_series(column.strip(), interval, fill)

    @registry.register("$__timeGroupAlias", TIME_GROUP_ALIAS_PATTERN)
    def time_group_alias_macro(match, ctx):
        column, interval = match.groups()
        return render_time_series(column.strip(), interval) + " as time"
