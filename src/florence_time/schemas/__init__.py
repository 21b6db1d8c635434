# src/florence_time/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .clock import (
    ClockReadingOut,
    ClockStateIn,
    ClockViewOut,
    EncodedOut,
    HexDigitOut,
    HexSliderEdit,
    HexTextEdit,
    MinuteSliderEdit,
    TimeEdit,
    TimezoneSelect,
    ViewRequest,
)
from .timezone import DefaultTimezoneOut, LocalTimezoneOut, TimezoneOut

__all__ = [
    "ClockReadingOut", "ClockStateIn", "ClockViewOut", "EncodedOut", "HexDigitOut",
    "HexSliderEdit", "HexTextEdit", "MinuteSliderEdit", "TimeEdit", "TimezoneSelect",
    "ViewRequest",
    "DefaultTimezoneOut", "LocalTimezoneOut", "TimezoneOut",
]
