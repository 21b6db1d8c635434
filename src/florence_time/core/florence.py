"""Hexadecimal Florence time encoding.

The day is written as a hexadecimal fraction: ``.8000`` is noon. Each digit
after the radix point splits the previous unit into sixteen.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Final

from florence_time.core.fraction import millis_to_day_fraction

RADIX_POINT: Final[str] = "."
DEFAULT_RESOLUTION: Final[int] = 4
SECONDS_PER_DAY: Final[int] = 24 * 60 * 60


@dataclass(frozen=True)
class HexDigit:
    """Presentation metadata for one position of a Florence time string."""

    name: str
    units_per_day: int
    description: str

    @property
    def si_seconds(self) -> float:
        """Length of one unit in SI seconds."""
        return SECONDS_PER_DAY / self.units_per_day


HEX_DIGITS: Final[tuple[HexDigit, ...]] = (
    HexDigit(
        "radix point",
        1,
        "hours, minutes and seconds are but arbitrary subdivisions of the earth day. "
        "if a full day is 1, then hours are fractional subdivisions, which should "
        "therefore be marked after the radix point.",
    ),
    HexDigit(
        "hexadecimal hour",
        16,
        "each day is broken into 16 hexadecimal hours. "
        "1 hexadecimal hour is equivalent to 1.5 SI hours.",
    ),
    HexDigit(
        "hexadecimal maxime",
        256,
        "each hexadecimal hour is broken into 16 hexadecimal maximes. "
        "1 day therefore contains 256 maximes of ~5 1/2 SI minutes each.",
    ),
    HexDigit(
        "hexadecimal minute",
        4096,
        "each maxime is broken into 16 hexadecimal minutes. "
        "1 day therefore contains 4096 hexadecimal minutes of ~21.09 SI seconds each.",
    ),
    HexDigit(
        "hexadecimal second",
        65536,
        "each hexadecimal minute is broken into 16 hexadecimal seconds. "
        "1 day therefore contains 65536 hexadecimal seconds of ~1.318 SI seconds each.",
    ),
)


def _hex_digits(fraction: float, limit: int) -> str:
    # floats are dyadic, so the expansion is finite and exact
    remainder = Fraction(fraction) % 1
    digits: list[str] = []
    while remainder and len(digits) < limit:
        remainder *= 16
        digit = int(remainder)
        digits.append(format(digit, "x"))
        remainder -= digit
    return "".join(digits)


def fraction_to_florence(
    fraction: float,
    resolution: int = DEFAULT_RESOLUTION,
    trailing_zeroes: bool = True,
) -> str:
    """Render a day fraction as a Florence time string.

    Digits beyond ``resolution`` are truncated, not rounded. A fraction with
    no hexadecimal digits to show renders as ``.0``.

    Args:
        fraction: Day fraction; only its fractional part is encoded
        resolution: Number of hexadecimal digits after the radix point
        trailing_zeroes: Right-pad with ``0`` up to ``resolution`` digits

    Returns:
        A string such as ``".8000"``

    Raises:
        ValueError: If ``fraction`` is NaN or infinite
    """
    if not math.isfinite(fraction):
        raise ValueError(f"cannot encode non-finite fraction {fraction!r}")
    hex_time = RADIX_POINT + _hex_digits(fraction, max(resolution, 0))
    if len(hex_time) < 2:
        hex_time = RADIX_POINT + "0"
    if trailing_zeroes:
        return hex_time.ljust(resolution + 1, "0")
    return hex_time


def millis_to_florence(
    ms: float,
    resolution: int = DEFAULT_RESOLUTION,
    trailing_zeroes: bool = True,
) -> str:
    """Encode milliseconds since the epoch as Universal Florence time."""
    return fraction_to_florence(millis_to_day_fraction(ms), resolution, trailing_zeroes)


def annotate_digits(hex_time: str) -> list[tuple[str, str]]:
    """Pair each character of ``hex_time`` with its hover text."""
    annotated = []
    for position, char in enumerate(hex_time):
        description = HEX_DIGITS[position].description if position < len(HEX_DIGITS) else ""
        annotated.append((char, description))
    return annotated
