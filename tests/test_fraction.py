"""Tests for the day fraction model."""

from __future__ import annotations

import math

import pytest

from florence_time.core.fraction import (
    FLORENCE_OFFSET,
    MS_PER_DAY,
    day_fraction_to_hhmm,
    millis_to_day_fraction,
    reduce_fraction,
)


def test_florence_offset_is_a_32nd_of_a_day():
    assert FLORENCE_OFFSET == 1 / 32


def test_epoch_starts_at_florence_offset():
    assert millis_to_day_fraction(0) == 0.03125


def test_noon_utc_is_shifted_by_florence():
    assert millis_to_day_fraction(MS_PER_DAY // 2) == 0.53125


@pytest.mark.parametrize(
    "ms",
    [0, 1, 299, MS_PER_DAY - 1, MS_PER_DAY, 1_700_000_000_000, 2**53, -1, -MS_PER_DAY // 3],
)
def test_millis_always_land_in_unit_interval(ms: int):
    fraction = millis_to_day_fraction(ms)
    assert 0.0 <= fraction < 1.0


def test_reduce_fraction_wraps_both_ways():
    assert reduce_fraction(1.25) == 0.25
    assert reduce_fraction(-0.25) == 0.75
    assert reduce_fraction(0.0) == 0.0


def test_reduce_fraction_never_returns_one():
    assert reduce_fraction(-1e-20) == 0.0


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_reduce_fraction_rejects_non_finite(value: float):
    with pytest.raises(ValueError):
        reduce_fraction(value)


@pytest.mark.parametrize(
    ("fraction", "expected"),
    [
        (0.0, "00:00"),
        (0.5, "12:00"),
        (0.75, "18:00"),
        ((9 * 60 + 30) / 1440, "09:30"),
        ((23 * 60 + 59) / 1440, "23:59"),
    ],
)
def test_day_fraction_to_hhmm(fraction: float, expected: str):
    assert day_fraction_to_hhmm(fraction) == expected


def test_minute_rounding_does_not_carry_into_hour():
    # 23:59:36 rounds to minute 60, which wraps to 00 without bumping the hour
    assert day_fraction_to_hhmm(1439.6 / 1440) == "23:00"
