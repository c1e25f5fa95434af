"""
MacroRegistry — central store of all registered macro handlers.

Each macro is a name, the regex that recognises an invocation, and a handler
that renders one match:

    handler(match: re.Match, ctx: MacroContext) -> str | None

Returning ``None`` leaves the invocation exactly as written.

Register with the decorator:
    @macro_registry.register("$__time", r"\\$__time\\(([^)]+)\\)")
    def time_macro(match, ctx):
        return f"to_unixtime({match.group(1)}) as time"

Handlers run in registration order, one substitution pass each.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterator, Optional, Union

from .context import MacroContext

logger = logging.getLogger(__name__)


MacroHandler = Callable[[re.Match, MacroContext], Optional[str]]
PatternLike = Union[str, re.Pattern]


class MacroRegistry:
    def __init__(self) -> None:
        self._patterns: dict[str, re.Pattern] = {}
        self._handlers: dict[str, MacroHandler] = {}

    # ---------------------------------------------------------------- register

    def register(self, name: str, pattern: PatternLike):
        """
        Decorator that registers a function as the handler for *name*.

        Re-registering an existing name swaps the handler and pattern but the
        macro keeps its place in the pass order.
        """
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

        def decorator(fn: MacroHandler) -> MacroHandler:
            self._patterns[name] = compiled
            self._handlers[name] = fn
            logger.debug("Registered macro: %s (%s)", name, compiled.pattern)
            return fn
        return decorator

    # ------------------------------------------------------------------ lookup

    def has(self, name: str) -> bool:
        return name in self._handlers

    def entries(self) -> Iterator[tuple[str, re.Pattern, MacroHandler]]:
        for name, handler in self._handlers.items():
            yield name, self._patterns[name], handler

    def call(self, name: str, match: re.Match, ctx: MacroContext) -> str:
        """Render one invocation; anything that goes wrong yields the original text."""
        original = match.group(0)
        handler = self._handlers.get(name)
        if handler is None:
            return original

        try:
            replacement = handler(match, ctx)
        except Exception:
            logger.exception("Macro %s raised an error on %r", name, original)
            return original

        if replacement is None:
            return original
        return replacement

    # ---------------------------------------------------------- introspection

    def names(self) -> list[str]:
        """Macro names in pass order."""
        return list(self._handlers)

    def registered_names(self) -> list[str]:
        return sorted(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)


# Singleton shared across the package
macro_registry = MacroRegistry()
