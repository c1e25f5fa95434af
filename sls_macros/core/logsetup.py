"""
Logging setup for command line use.

The library modules only create loggers; handlers are attached here.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format=settings.log_format,
        stream=sys.stderr,
        force=True,
    )
