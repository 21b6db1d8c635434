"""Conversions between absolute time and fractions of a day.

A day fraction is a float in ``[0, 1)``: 0 is midnight, 0.5 is noon.
"""

from __future__ import annotations

import math
from typing import Final

MS_PER_DAY: Final[int] = 1000 * 24 * 60 * 60
MINUTES_PER_DAY: Final[int] = 24 * 60

# Florence sits 11.25 degrees east of Greenwich.
FLORENCE_OFFSET: Final[float] = 11.25 / 360


def reduce_fraction(value: float) -> float:
    """Reduce ``value`` modulo 1 into ``[0, 1)``.

    Args:
        value: Any finite float

    Returns:
        The fractional part, never equal to 1.0

    Raises:
        ValueError: If ``value`` is NaN or infinite
    """
    if not math.isfinite(value):
        raise ValueError(f"day fraction must be finite, got {value!r}")
    reduced = value % 1.0
    # tiny negative inputs round up to exactly 1.0
    if reduced >= 1.0:
        return 0.0
    return reduced


def millis_to_day_fraction(ms: float) -> float:
    """Convert milliseconds since the epoch to a Florence-centered day fraction.

    No viewer timezone is applied here; see
    :func:`florence_time.services.offset.to_display` for that step.
    """
    return reduce_fraction(ms / MS_PER_DAY + FLORENCE_OFFSET)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def day_fraction_to_hhmm(fraction: float) -> str:
    """Format a day fraction as ``HH:MM``.

    A minute that rounds up to 60 is not carried into the hour, so
    ``0.99999`` renders as ``"23:00"``.
    """
    hours = math.floor(24 * fraction)
    minutes = _round_half_up(MINUTES_PER_DAY * fraction) % 60
    return f"{hours:02d}:{minutes:02d}"
