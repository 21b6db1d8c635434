"""Synchronization of the converter widgets.

Four controls edit the same moment: a hexadecimal text field, a hexadecimal
slider (256 steps), a 5-minute slider (288 steps) and an ``HH:MM`` field, plus
a timezone selector. :class:`ClockController` keeps one canonical
:class:`ClockState` and re-derives every widget from it after each edit.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from typing import Final

from florence_time.core.florence import RADIX_POINT, fraction_to_florence
from florence_time.core.fraction import (
    MINUTES_PER_DAY,
    day_fraction_to_hhmm,
    reduce_fraction,
)
from florence_time.models.clock_state import ClockState, ClockView
from florence_time.models.timezone import UTC_FALLBACK, TimezoneEntry
from florence_time.services.offset import to_canonical, to_display

logger = logging.getLogger(__name__)

HEX_SLIDER_STEPS: Final[int] = 256
MINUTE_SLIDER_STEPS: Final[int] = 288
CONVERTER_RESOLUTION: Final[int] = 2

_HEX_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9a-fA-F]+")
_TIME_PATTERN: Final[re.Pattern[str]] = re.compile(r"(\d{1,2}):(\d{2})(?::\d{2}(?:\.\d+)?)?")


def parse_hex_text(raw: str) -> float | None:
    """Read the hex text field as a display fraction.

    A lone digit is the hexadecimal hour, so ``.8`` and ``.80`` are both noon.

    Returns:
        The display fraction, or None when ``raw`` is not ``.`` followed by
        hexadecimal digits
    """
    if not raw.startswith(RADIX_POINT):
        return None
    digits = raw[len(RADIX_POINT):]
    if not _HEX_PATTERN.fullmatch(digits):
        return None
    value = int(digits, 16)
    if len(digits) == 1:
        value *= 16
    return value / HEX_SLIDER_STEPS


def parse_time_widget(raw: str) -> float | None:
    """Read an ``HH:MM`` value (seconds are ignored) as a day fraction."""
    match = _TIME_PATTERN.fullmatch(raw.strip())
    if match is None:
        return None
    return (int(match.group(1)) * 60 + int(match.group(2))) / MINUTES_PER_DAY


class ClockController:
    """Owns the converter state and the edit handlers bound to each widget."""

    def __init__(
        self,
        timezones: Sequence[TimezoneEntry],
        state: ClockState | None = None,
        resolution: int = CONVERTER_RESOLUTION,
    ) -> None:
        self.timezones: Sequence[TimezoneEntry] = timezones or [UTC_FALLBACK]
        self.state = state or ClockState()
        self.resolution = resolution
        self.last_edit_accepted = True

    @property
    def entry(self) -> TimezoneEntry:
        """The selected timezone."""
        return self.timezones[self.state.timezone_index]

    def _reject(self, widget: str, raw: object) -> float:
        logger.debug("Ignoring %s input %r", widget, raw)
        self.last_edit_accepted = False
        return self.state.fraction

    def _commit(self, widget: str, raw: object, fraction: float | None) -> float:
        if fraction is None or not math.isfinite(fraction):
            return self._reject(widget, raw)
        self.state.fraction = reduce_fraction(fraction)
        self.last_edit_accepted = True
        return self.state.fraction

    def on_hex_text_edit(self, raw: str) -> float:
        """Handle typing in the hex text field."""
        display = parse_hex_text(raw)
        if display is None:
            return self._reject("hex text", raw)
        return self._commit("hex text", raw, to_canonical(display, self.entry))

    def on_hex_slider_drag(self, raw: int) -> float:
        """Handle the hex slider, ``raw`` in ``[0, 255]``."""
        if not math.isfinite(raw):
            return self._reject("hex slider", raw)
        return self._commit("hex slider", raw, to_canonical(raw / HEX_SLIDER_STEPS, self.entry))

    def on_time_widget_edit(self, raw: str) -> float:
        """Handle the ``HH:MM`` field; the value is already canonical."""
        return self._commit("time", raw, parse_time_widget(raw))

    def on_minute_slider_drag(self, raw: int) -> float:
        """Handle the 5-minute slider, ``raw`` in ``[0, 287]``."""
        return self._commit("minute slider", raw, raw / MINUTE_SLIDER_STEPS)

    def on_timezone_select(self, index: int) -> None:
        """Select a timezone; the canonical fraction is unchanged."""
        if not 0 <= index < len(self.timezones):
            self._reject("timezone", index)
            return
        self.state.timezone_index = index
        self.last_edit_accepted = True

    def render(self) -> ClockView:
        """Derive every widget value from the canonical state."""
        fraction = self.state.fraction
        display = to_display(fraction, self.entry)
        return ClockView(
            fraction=fraction,
            timezone_index=self.state.timezone_index,
            hex_text=fraction_to_florence(display, self.resolution),
            hex_slider=round(display * HEX_SLIDER_STEPS) % HEX_SLIDER_STEPS,
            minute_slider=round(fraction * MINUTE_SLIDER_STEPS) % MINUTE_SLIDER_STEPS,
            time=day_fraction_to_hhmm(fraction),
            hex_position=100 * display,
        )
