"""
sls_macros — time macro interpolation for SLS queries.
"""

from .interpolate import interpolate_macros, interpolate_with_context
from .macros import (
    MacroContext,
    MacroEngine,
    MacroRegistry,
    macro_registry,
    register_all_builtins,
)

__version__ = "0.1.0"

__all__ = [
    "interpolate_macros",
    "interpolate_with_context",
    "MacroContext",
    "MacroEngine",
    "MacroRegistry",
    "macro_registry",
    "register_all_builtins",
]
