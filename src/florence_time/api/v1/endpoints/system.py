"""System endpoints for the Florence Time API."""

from __future__ import annotations

import time

from fastapi import APIRouter

from florence_time.api.v1.dependencies import ClockTickerDep, TimezoneTableDep
from florence_time.core.fraction import FLORENCE_OFFSET
from florence_time.core.settings import settings

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return a snapshot of public runtime configuration."""
    return {
        "app": {
            "name": settings.app_name,
            "version": settings.app_version,
            "debug": settings.debug,
        },
        "clock": {
            "tick_interval_ms": settings.clock_tick_interval_ms,
            "resolution": settings.clock_resolution,
            "florence_offset": FLORENCE_OFFSET,
        },
        "converter": {
            "resolution": settings.converter_resolution,
            "initial_fraction": settings.initial_fraction,
        },
        "timezones": {
            "source": settings.timezone_source,
        },
    }


@router.get("/status")
async def get_system_status(
    table: TimezoneTableDep, ticker: ClockTickerDep
) -> dict[str, object]:
    """Get overall service status.

    Returns:
        Dictionary with service information, timezone table and ticker state
    """
    return {
        "service": "florence-time",
        "version": settings.app_version,
        "status": "operational",
        "timestamp": int(time.time()),
        "components": {
            "timezones": {"loaded": table.loaded, "count": len(table)},
            "ticker": {"running": ticker.running, "interval_ms": ticker.interval_ms},
        },
        "environment": "production" if not settings.debug else "development",
    }
