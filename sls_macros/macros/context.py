"""
MacroContext
============
The time range a query is being interpolated for.

Bounds are Unix epoch seconds.  They are emitted as decimal literals by
``$__timeFilter`` and are never reordered or clamped.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


class MacroContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    time_from: int = Field(ge=_INT64_MIN, le=_INT64_MAX)
    time_to: int = Field(ge=_INT64_MIN, le=_INT64_MAX)

    @classmethod
    def from_range(cls, time_from: int, time_to: int) -> "MacroContext":
        return cls(time_from=time_from, time_to=time_to)

    @classmethod
    def from_datetimes(cls, start: datetime, end: datetime) -> "MacroContext":
        """
        Build a context from two datetimes.

        Naive datetimes are taken to be UTC.  Sub-second precision is dropped.
        """
        return cls(time_from=to_epoch(start), time_to=to_epoch(end))


def to_epoch(dt: datetime) -> int:
    """Epoch seconds for *dt*, treating a naive value as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp() // 1)
