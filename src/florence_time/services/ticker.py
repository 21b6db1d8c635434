"""Periodic sampling of wall-clock time for the passive clock display."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from florence_time.core.florence import DEFAULT_RESOLUTION, fraction_to_florence
from florence_time.core.fraction import millis_to_day_fraction
from florence_time.core.settings import settings

logger = logging.getLogger(__name__)


def wall_clock_ms() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class ClockReading:
    """One sample of the Universal Florence clock."""

    epoch_ms: int
    fraction: float
    florence: str


class ClockTicker:
    """Re-samples the current moment on a fixed interval.

    The ticker only feeds the passive clock; it never touches converter state.
    """

    def __init__(
        self,
        interval_ms: int | None = None,
        now_ms: Callable[[], int] = wall_clock_ms,
        resolution: int = DEFAULT_RESOLUTION,
    ) -> None:
        self.interval_ms = settings.clock_tick_interval_ms if interval_ms is None else interval_ms
        self.resolution = resolution
        self._now_ms = now_ms
        self._latest: ClockReading | None = None
        self._task: asyncio.Task[None] | None = None
        self._stopping: asyncio.Event | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def latest(self) -> ClockReading:
        """The most recent reading, sampling now if none exists yet."""
        if self._latest is None:
            return self.sample()
        return self._latest

    def sample(self) -> ClockReading:
        """Take a reading of the current moment."""
        epoch_ms = int(self._now_ms())
        fraction = millis_to_day_fraction(epoch_ms)
        self._latest = ClockReading(
            epoch_ms=epoch_ms,
            fraction=fraction,
            florence=fraction_to_florence(fraction, self.resolution),
        )
        return self._latest

    async def start(self) -> None:
        """Start the background sampling loop."""
        if self._task is None or self._task.done():
            # bound to the running loop, so created per start
            self._stopping = asyncio.Event()
            self._task = asyncio.create_task(self._run(self._stopping))

    async def stop(self) -> None:
        """Stop the background sampling loop."""
        if self._task is None or self._stopping is None:
            return

        self._stopping.set()
        await self._task
        self._task = None

    async def _run(self, stopping: asyncio.Event) -> None:
        interval = max(0.01, self.interval_ms / 1000)
        logger.debug("Clock ticker sampling every %.3fs", interval)
        while not stopping.is_set():
            self.sample()
            try:
                await asyncio.wait_for(stopping.wait(), timeout=interval)
            except TimeoutError:
                continue


class _ClockTickerSingleton:
    """Singleton wrapper for ClockTicker."""

    _instance: ClockTicker | None = None

    @classmethod
    def get_instance(cls) -> ClockTicker:
        """Get or create the singleton ClockTicker instance."""
        if cls._instance is None:
            cls._instance = ClockTicker(resolution=settings.clock_resolution)
        return cls._instance


def get_clock_ticker() -> ClockTicker:
    """Return the process-wide clock ticker."""
    return _ClockTickerSingleton.get_instance()
