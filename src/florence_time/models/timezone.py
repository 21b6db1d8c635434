"""Timezone table records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class TimezoneEntry:
    """One row of the timezone table.

    Attributes:
        abbreviation: Short name such as ``CET``; empty for the built-in UTC row
        full_name: Human readable name
        utc_offset: ``""`` for UTC, otherwise a signed hour optionally
            followed by ``:MM`` (``"+5:30"``, ``"-3"``)
    """

    abbreviation: str
    full_name: str
    utc_offset: str = ""

    @property
    def label(self) -> str:
        """Dropdown label, e.g. ``UTC+1: Central European Time (CET)``."""
        return f"UTC{self.utc_offset}: {self.full_name} ({self.abbreviation})"


@dataclass(frozen=True)
class LocalTimezone:
    """Timezone observed in the viewer's environment."""

    abbreviation: str
    hour_offset: int | None
    name: str


UTC_FALLBACK: Final[TimezoneEntry] = TimezoneEntry("", "Universal Coordinated Time", "")
