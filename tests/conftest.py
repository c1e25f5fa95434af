#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Test fixtures
=============
Each test that needs a registry gets a fresh one with the built-in macros,
so handlers registered by one test never leak into another.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import os

import pytest

# ── Env vars must be set before importing package modules ────────────────────
os.environ.setdefault("SLS_MACROS_ENVIRONMENT", "testing")

from sls_macros.core.config import get_settings
from sls_macros.macros import MacroContext, MacroEngine, MacroRegistry, register_all_builtins


# ── Settings cache is process-wide; reset it around every test ───────────────
@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# -----------------------------------------------------------------------------

def make_ctx(time_from: int = 0, time_to: int = 0) -> MacroContext:
    return MacroContext(time_from=time_from, time_to=time_to)


@pytest.fixture
def ctx() -> MacroContext:
    return make_ctx(1600000000, 1600003600)


@pytest.fixture
def registry() -> MacroRegistry:
    return register_all_builtins(MacroRegistry())


@pytest.fixture
def engine(registry) -> MacroEngine:
    return MacroEngine(registry=registry)


# -----------------------------------------------------------------------------
