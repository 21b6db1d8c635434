"""Schemas for the Florence clock and the converter widgets."""
from __future__ import annotations

from pydantic import BaseModel, Field

from florence_time.core.settings import settings


class ClockReadingOut(BaseModel):
    """Current Universal Florence time."""

    epoch_ms: int
    fraction: float
    florence: str
    tick_interval_ms: int


class HexDigitOut(BaseModel):
    """Presentation metadata for one position of a Florence time string."""

    position: int
    name: str
    units_per_day: int
    si_seconds: float
    description: str


class EncodedOut(BaseModel):
    """A day fraction rendered as a Florence time string."""

    fraction: float
    resolution: int
    florence: str


class ClockStateIn(BaseModel):
    """Canonical converter state sent along with every edit."""

    fraction: float = Field(
        default_factory=lambda: settings.initial_fraction,
        ge=0.0,
        lt=1.0,
        description="Canonical day fraction.",
    )
    timezone_index: int = Field(default=0, ge=0, description="Index into the timezone table.")


class ViewRequest(BaseModel):
    state: ClockStateIn = Field(default_factory=ClockStateIn)


class HexTextEdit(BaseModel):
    state: ClockStateIn = Field(default_factory=ClockStateIn)
    raw: str = Field(..., max_length=16, description="Hex text field contents, e.g. '.8c'.")


class HexSliderEdit(BaseModel):
    state: ClockStateIn = Field(default_factory=ClockStateIn)
    raw: int = Field(..., ge=0, le=255)


class TimeEdit(BaseModel):
    state: ClockStateIn = Field(default_factory=ClockStateIn)
    raw: str = Field(..., max_length=16, description="Value of an HH:MM time input.")


class MinuteSliderEdit(BaseModel):
    state: ClockStateIn = Field(default_factory=ClockStateIn)
    raw: int = Field(..., ge=0, le=287)


class TimezoneSelect(BaseModel):
    state: ClockStateIn = Field(default_factory=ClockStateIn)
    index: int


class ClockViewOut(BaseModel):
    """New canonical state plus every derived widget value."""

    fraction: float
    timezone_index: int
    hex_text: str
    hex_slider: int
    minute_slider: int
    time: str
    hex_position: float
    accepted: bool = True
