"""
Built-in macro registrations.
Call register_all_builtins() once before expanding queries.

Registration order is the pass order.
"""

from typing import Optional

from .registry import MacroRegistry, macro_registry
from . import (
    macro_time,
    macro_timegroup,
)


def register_all_builtins(registry: Optional[MacroRegistry] = None) -> MacroRegistry:
    """Register every built-in macro with *registry* (default: the shared one)."""
    registry = registry if registry is not None else macro_registry
    macro_time.register(registry)
    macro_timegroup.register(registry)
    return registry
