"""State held by the interactive converter."""

from __future__ import annotations

from dataclasses import dataclass, field

from florence_time.core.settings import settings


@dataclass
class ClockState:
    """Single source of truth for the converter widgets.

    Attributes:
        fraction: Canonical day fraction in ``[0, 1)``; defaults to
            ``INITIAL_FRACTION``
        timezone_index: Index into the loaded timezone table
    """

    fraction: float = field(default_factory=lambda: settings.initial_fraction)
    timezone_index: int = 0


@dataclass(frozen=True)
class ClockView:
    """Widget values derived from a :class:`ClockState`."""

    fraction: float
    timezone_index: int
    hex_text: str
    hex_slider: int
    minute_slider: int
    time: str
    hex_position: float
