"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends, HTTPException

from florence_time.core.settings import settings
from florence_time.models import ClockState
from florence_time.schemas.clock import ClockStateIn
from florence_time.services.controller import ClockController
from florence_time.services.ticker import ClockTicker, get_clock_ticker
from florence_time.services.timezones import TimezoneTable, get_timezone_table

# HTTP status codes
HTTP_UNPROCESSABLE = 422

TimezoneTableDep = Annotated[TimezoneTable, Depends(get_timezone_table)]
ClockTickerDep = Annotated[ClockTicker, Depends(get_clock_ticker)]


def build_controller(state: ClockStateIn, table: TimezoneTable) -> ClockController:
    """Rebuild a controller around the state a client sent.

    Args:
        state: Canonical state from the request body
        table: Loaded timezone table

    Returns:
        Controller holding a copy of ``state``

    Raises:
        HTTPException: If the timezone index is outside the table
    """
    if state.timezone_index >= len(table):
        raise HTTPException(
            status_code=HTTP_UNPROCESSABLE,
            detail=f"Unknown timezone index {state.timezone_index}",
        )
    return ClockController(
        table.entries,
        ClockState(fraction=state.fraction, timezone_index=state.timezone_index),
        resolution=settings.converter_resolution,
    )
