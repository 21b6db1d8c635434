# src/florence_time/services/__init__.py
"""Conversion and clock services for the Florence Time application."""

from .controller import ClockController
from .ticker import ClockReading, ClockTicker
from .timezones import TimezoneTable, TimezoneTableError

__all__ = [
    "ClockController",
    "ClockReading",
    "ClockTicker",
    "TimezoneTable",
    "TimezoneTableError",
]
