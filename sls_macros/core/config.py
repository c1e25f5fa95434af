#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Package configuration.

All values can be overridden via SLS_MACROS_* environment variables or a
.env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="SLS_MACROS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "sls-macros"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "testing", "production"] = "development"

    # ── Logging ────────────────────────────────────────────────────────────

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"unknown log level: {v}")
        return level

    @property
    def is_testing(self) -> bool:
        return self.environment == "testing"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
