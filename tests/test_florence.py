"""Tests for the hexadecimal Florence encoder."""

from __future__ import annotations

import math

import pytest

from florence_time.core.florence import (
    HEX_DIGITS,
    annotate_digits,
    fraction_to_florence,
    millis_to_florence,
)


def test_noon():
    assert fraction_to_florence(0.5) == ".8000"
    assert fraction_to_florence(0.5, 2) == ".80"
    assert fraction_to_florence(0.5, 4, trailing_zeroes=False) == ".8"


def test_midnight_uses_degenerate_zero():
    assert fraction_to_florence(0.0) == ".0000"
    assert fraction_to_florence(0.0, 4, trailing_zeroes=False) == ".0"
    assert fraction_to_florence(0.0, 0) == ".0"


def test_three_quarters():
    assert fraction_to_florence(0.75, 3) == ".c00"


def test_digits_are_truncated_not_rounded():
    assert fraction_to_florence(0.999, 2) == ".ff"
    assert fraction_to_florence(1 / 3) == ".5555"


def test_unpadded_output_keeps_zeroes_inside_resolution():
    # the fifth hex digit is non-zero, so the first four are all shown
    assert fraction_to_florence(0.5 + 2**-20, 4, trailing_zeroes=False) == ".8000"


@pytest.mark.parametrize("resolution", [1, 2, 3, 4, 6])
@pytest.mark.parametrize("fraction", [0.0, 0.03125, 0.1, 0.5, 0.123456, 0.999999])
def test_padded_length_is_resolution_plus_one(fraction: float, resolution: int):
    assert len(fraction_to_florence(fraction, resolution)) == resolution + 1


def test_non_finite_fraction_is_rejected():
    with pytest.raises(ValueError):
        fraction_to_florence(math.nan)


def test_epoch_in_florence_time():
    assert millis_to_florence(0) == ".0800"


def test_digit_metadata():
    assert [d.units_per_day for d in HEX_DIGITS] == [1, 16, 256, 4096, 65536]
    assert HEX_DIGITS[1].si_seconds == 5400.0
    assert round(HEX_DIGITS[4].si_seconds, 3) == 1.318


def test_annotate_digits():
    annotated = annotate_digits(".8000")
    assert [char for char, _ in annotated] == list(".8000")
    assert annotated[0][1] == HEX_DIGITS[0].description
    assert annotated[4][1] == HEX_DIGITS[4].description
    assert annotate_digits(".800000")[5][1] == ""
