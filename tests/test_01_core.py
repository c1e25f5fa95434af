"""
Core Test Suite
===============
Tests for:
  - MacroContext construction and validation
  - Settings (environment overrides, log level handling)
  - Logging setup

Run with:  pytest tests/test_01_core.py -v
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from sls_macros.core.config import Settings, get_settings
from sls_macros.core.logsetup import configure_logging
from sls_macros.macros.context import MacroContext, to_epoch


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 1. MacroContext
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestMacroContext:
    def test_keyword_construction(self):
        ctx = MacroContext(time_from=10, time_to=20)
        assert (ctx.time_from, ctx.time_to) == (10, 20)

    def test_from_range(self):
        ctx = MacroContext.from_range(1600000000, 1600003600)
        assert ctx.time_from == 1600000000
        assert ctx.time_to == 1600003600

    def test_negative_bounds_allowed(self):
        ctx = MacroContext.from_range(-100, -1)
        assert ctx.time_from == -100

    def test_reversed_range_not_rejected(self):
        ctx = MacroContext.from_range(200, 100)
        assert ctx.time_from > ctx.time_to

    def test_int64_limits(self):
        ctx = MacroContext.from_range(-(2 ** 63), 2 ** 63 - 1)
        assert ctx.time_to == 2 ** 63 - 1

    def test_out_of_int64_range(self):
        with pytest.raises(ValidationError):
            MacroContext.from_range(0, 2 ** 63)

    def test_frozen(self):
        ctx = MacroContext.from_range(1, 2)
        with pytest.raises(ValidationError):
            ctx.time_from = 5

    def test_from_datetimes_aware(self):
        start = datetime(2020, 9, 13, 12, 26, 40, tzinfo=timezone.utc)
        ctx = MacroContext.from_datetimes(start, start + timedelta(hours=1))
        assert ctx.time_from == 1600000000
        assert ctx.time_to == 1600003600

    def test_from_datetimes_naive_is_utc(self):
        ctx = MacroContext.from_datetimes(
            datetime(2020, 9, 13, 12, 26, 40), datetime(2020, 9, 13, 13, 26, 40)
        )
        assert ctx.time_from == 1600000000

    def test_from_datetimes_other_offset(self):
        tz8 = timezone(timedelta(hours=8))
        start = datetime(2020, 9, 13, 20, 26, 40, tzinfo=tz8)
        ctx = MacroContext.from_datetimes(start, start)
        assert ctx.time_from == 1600000000

    def test_subsecond_dropped(self):
        dt = datetime(2020, 9, 13, 12, 26, 40, 999999, tzinfo=timezone.utc)
        assert to_epoch(dt) == 1600000000


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 2. Settings
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SLS_MACROS_LOG_LEVEL", raising=False)
        monkeypatch.delenv("SLS_MACROS_DEBUG", raising=False)
        s = Settings(_env_file=None)
        assert s.app_name == "sls-macros"
        assert s.log_level == "INFO"
        assert s.effective_log_level == "INFO"

    def test_testing_environment_from_conftest(self):
        assert get_settings().is_testing

    def test_env_override_is_normalised(self, monkeypatch):
        monkeypatch.setenv("SLS_MACROS_LOG_LEVEL", "warning")
        assert Settings(_env_file=None).log_level == "WARNING"

    def test_unknown_level_rejected(self, monkeypatch):
        monkeypatch.setenv("SLS_MACROS_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_debug_forces_debug_level(self, monkeypatch):
        monkeypatch.setenv("SLS_MACROS_DEBUG", "true")
        assert Settings(_env_file=None).effective_log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 3. Logging
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestConfigureLogging:
    def test_sets_root_level(self):
        root = logging.getLogger()
        saved_level, saved_handlers = root.level, root.handlers[:]
        try:
            configure_logging(Settings(_env_file=None, log_level="ERROR"))
            assert root.level == logging.ERROR
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
