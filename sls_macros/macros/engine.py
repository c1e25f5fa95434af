"""
MacroEngine
===========
The core expansion loop.  Runs one scan-and-replace pass per registered
macro, in registration order, each over the output of the previous pass.

There is a single round of passes: text produced by a macro is never
re-scanned for further macros.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .context import MacroContext
from .registry import MacroRegistry, macro_registry

logger = logging.getLogger(__name__)


class MacroEngine:
    """
    Expand all macros embedded in a query string.

    Usage::

        engine = MacroEngine()
        sql = engine.expand(raw_query, MacroContext(time_from=0, time_to=60))
    """

    def __init__(self, registry: Optional[MacroRegistry] = None) -> None:
        self._registry = registry if registry is not None else macro_registry

    @property
    def registry(self) -> MacroRegistry:
        return self._registry

    # ----------------------------------------------------------------- public

    def expand(self, text: str, ctx: MacroContext) -> str:
        """Return *text* with every recognised macro invocation replaced."""
        if not text:
            return text

        total = 0
        for name, pattern, _handler in self._registry.entries():
            text, count = self._expand_one(name, pattern, text, ctx)
            total += count

        logger.debug("Expanded %d macro invocation(s)", total)
        return text

    # ----------------------------------------------------------------- private

    def _expand_one(
        self, name: str, pattern: re.Pattern, text: str, ctx: MacroContext
    ) -> tuple[str, int]:
        """Single pass for one macro.  Returns the new text and the match count."""
        def replace(match: re.Match) -> str:
            replacement = self._registry.call(name, match, ctx)
            logger.debug("%s: %r -> %r", name, match.group(0), replacement)
            return replacement

        return pattern.subn(replace, text)
