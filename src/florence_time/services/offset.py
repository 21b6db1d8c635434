"""Timezone and Florence offsets applied to day fractions.

The converter keeps a canonical (universal) day fraction. What the hex
widgets show is that fraction shifted by the Florence longitude and by the
selected timezone; :func:`to_display` and :func:`to_canonical` are the two
directions of that shift.
"""

from __future__ import annotations

import re
from typing import Final, Literal

from florence_time.core.fraction import FLORENCE_OFFSET, MINUTES_PER_DAY, reduce_fraction
from florence_time.models.timezone import TimezoneEntry

Sign = Literal[1, -1]

_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(r"([+-]?)(\d{1,2})(?::(\d{2}))?")


def parse_utc_offset(text: str) -> tuple[Sign, int, int]:
    """Split a UTC offset into sign, hours and minutes.

    Args:
        text: ``""`` for UTC, or e.g. ``"+5:30"``, ``"-3"``, ``"10"``

    Returns:
        ``(sign, hours, minutes)`` with non-negative hours and minutes

    Raises:
        ValueError: If ``text`` is not a UTC offset
    """
    text = text.strip()
    if not text:
        return 1, 0, 0
    match = _OFFSET_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid UTC offset {text!r}")
    sign: Sign = -1 if match.group(1) == "-" else 1
    minutes = int(match.group(3)) if match.group(3) else 0
    return sign, int(match.group(2)), minutes


def offset_hours(entry: TimezoneEntry) -> int:
    """Return the signed whole-hour part of an entry's offset."""
    sign, hours, _ = parse_utc_offset(entry.utc_offset)
    return sign * hours


def apply_offset(
    fraction: float,
    entry: TimezoneEntry,
    direction: Sign,
    florence_sign: Sign,
) -> float:
    """Shift ``fraction`` by the Florence offset and ``entry``'s UTC offset.

    Args:
        fraction: Day fraction to shift
        entry: Selected timezone
        direction: ``+1`` adds the timezone offset, ``-1`` removes it
        florence_sign: ``+1`` adds the Florence offset, ``-1`` removes it

    Returns:
        The shifted fraction reduced into ``[0, 1)``
    """
    fraction += florence_sign * FLORENCE_OFFSET
    if entry.utc_offset:
        sign, hours, minutes = parse_utc_offset(entry.utc_offset)
        hour_sign = direction * sign
        fraction += hour_sign * hours / 24
        if minutes:
            fraction += hour_sign * minutes / MINUTES_PER_DAY
    return reduce_fraction(fraction + 1)


def to_display(fraction: float, entry: TimezoneEntry) -> float:
    """Canonical fraction to the value the hex widgets show."""
    return apply_offset(fraction, entry, direction=1, florence_sign=1)


def to_canonical(fraction: float, entry: TimezoneEntry) -> float:
    """Hex widget value back to the canonical fraction."""
    return apply_offset(fraction, entry, direction=-1, florence_sign=-1)
