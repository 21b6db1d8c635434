"""Tests for the periodic clock sampler."""

from __future__ import annotations

import asyncio
from itertools import count

import pytest

from florence_time.core.fraction import MS_PER_DAY
from florence_time.services.ticker import ClockTicker, wall_clock_ms


def test_sample_uses_injected_clock():
    ticker = ClockTicker(interval_ms=300, now_ms=lambda: 0)
    reading = ticker.sample()
    assert reading.epoch_ms == 0
    assert reading.fraction == 0.03125
    assert reading.florence == ".0800"


def test_latest_samples_on_first_access():
    ticker = ClockTicker(now_ms=lambda: MS_PER_DAY // 2, resolution=2)
    assert ticker.latest.florence == ".88"
    assert ticker.running is False


def test_wall_clock_is_recent():
    assert wall_clock_ms() > 1_600_000_000_000


@pytest.mark.asyncio
async def test_start_and_stop_resamples():
    calls = count()
    ticker = ClockTicker(interval_ms=10, now_ms=lambda: next(calls) * 1000)

    await ticker.start()
    assert ticker.running is True
    await asyncio.sleep(0.1)
    await ticker.stop()

    assert ticker.running is False
    assert ticker.latest.epoch_ms >= 2000


@pytest.mark.asyncio
async def test_stop_without_start_is_a_no_op():
    ticker = ClockTicker(interval_ms=10)
    await ticker.stop()
    assert ticker.running is False


@pytest.mark.asyncio
async def test_ticker_can_restart():
    ticker = ClockTicker(interval_ms=10, now_ms=lambda: 0)
    await ticker.start()
    await ticker.stop()
    await ticker.start()
    assert ticker.running is True
    await ticker.stop()
