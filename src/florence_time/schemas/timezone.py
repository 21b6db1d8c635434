"""Schemas for the timezone table."""
from __future__ import annotations

from pydantic import BaseModel


class TimezoneOut(BaseModel):
    """One selectable timezone."""

    index: int
    abbreviation: str
    full_name: str
    utc_offset: str
    label: str


class LocalTimezoneOut(BaseModel):
    abbreviation: str
    hour_offset: int | None
    name: str


class DefaultTimezoneOut(BaseModel):
    """Default selection for a viewer's environment."""

    index: int
    timezone: TimezoneOut
    local: LocalTimezoneOut
