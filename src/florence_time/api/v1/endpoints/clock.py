"""Universal Florence clock endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query

from florence_time.api.v1.dependencies import ClockTickerDep
from florence_time.core.florence import HEX_DIGITS, fraction_to_florence
from florence_time.core.settings import settings
from florence_time.schemas.clock import ClockReadingOut, EncodedOut, HexDigitOut

router = APIRouter(prefix="/clock", tags=["clock"])

MAX_RESOLUTION = 13


@router.get("/now", response_model=ClockReadingOut)
async def get_now(
    ticker: ClockTickerDep,
    resolution: int = Query(default=settings.clock_resolution, ge=0, le=MAX_RESOLUTION),
    trailing_zeroes: bool = True,
) -> ClockReadingOut:
    """Return the latest sample of the Universal Florence clock.

    Args:
        ticker: Background clock sampler
        resolution: Hexadecimal digits after the radix point
        trailing_zeroes: Pad the string to ``resolution`` digits

    Returns:
        The reading, re-encoded at the requested resolution
    """
    reading = ticker.latest if ticker.running else ticker.sample()
    return ClockReadingOut(
        epoch_ms=reading.epoch_ms,
        fraction=reading.fraction,
        florence=fraction_to_florence(reading.fraction, resolution, trailing_zeroes),
        tick_interval_ms=ticker.interval_ms,
    )


@router.get("/digits", response_model=list[HexDigitOut])
async def get_digits() -> list[HexDigitOut]:
    """Describe each position of a Florence time string."""
    return [
        HexDigitOut(
            position=position,
            name=digit.name,
            units_per_day=digit.units_per_day,
            si_seconds=digit.si_seconds,
            description=digit.description,
        )
        for position, digit in enumerate(HEX_DIGITS)
    ]


@router.get("/encode", response_model=EncodedOut)
async def encode_fraction(
    fraction: float = Query(..., ge=0.0, lt=1.0),
    resolution: int = Query(default=settings.clock_resolution, ge=0, le=MAX_RESOLUTION),
    trailing_zeroes: bool = True,
) -> EncodedOut:
    """Encode an arbitrary day fraction."""
    return EncodedOut(
        fraction=fraction,
        resolution=resolution,
        florence=fraction_to_florence(fraction, resolution, trailing_zeroes),
    )
