#!/usr/bin/env python
# -----------------------------------------------------------------------------
"""
Query interpolation
===================
Entry point used by the query path: expand the time macros in a query
string for a given dashboard range before it is sent to SLS.

    >>> interpolate_macros("SELECT $__time(ts) FROM log", 0, 60)
    'SELECT to_unixtime(ts) as time FROM log'
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from sls_macros.macros import MacroContext, MacroEngine, macro_registry, register_all_builtins


# -----------------------------------------------------------------------------

register_all_builtins(macro_registry)
_engine = MacroEngine(registry=macro_registry)


# -----------------------------------------------------------------------------

def interpolate_macros(query: str, time_from: int, time_to: int) -> str:
    """
    Replace ``$__time``, ``$__timeFilter``, ``$__timeGroup`` and
    ``$__timeGroupAlias`` invocations in *query*.

    Anything that is not a well-formed invocation is returned unchanged.
    """
    return _engine.expand(query, MacroContext.from_range(time_from, time_to))


def interpolate_with_context(query: str, ctx: MacroContext) -> str:
    return _engine.expand(query, ctx)


# -----------------------------------------------------------------------------
