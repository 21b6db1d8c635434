# src/florence_time/models/__init__.py
"""Plain data records shared by the services and the API layer."""

from .clock_state import ClockState, ClockView
from .timezone import UTC_FALLBACK, LocalTimezone, TimezoneEntry

__all__ = [
    "ClockState",
    "ClockView",
    "LocalTimezone",
    "TimezoneEntry",
    "UTC_FALLBACK",
]
