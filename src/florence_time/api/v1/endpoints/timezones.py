"""Timezone table endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from florence_time.api.v1.dependencies import TimezoneTableDep
from florence_time.models import TimezoneEntry
from florence_time.schemas.timezone import DefaultTimezoneOut, LocalTimezoneOut, TimezoneOut
from florence_time.services.timezones import (
    detect_local_timezone,
    environment_date_repr,
    resolve_default_index,
)

router = APIRouter(prefix="/timezones", tags=["timezones"])


def _timezone_out(index: int, entry: TimezoneEntry) -> TimezoneOut:
    return TimezoneOut(
        index=index,
        abbreviation=entry.abbreviation,
        full_name=entry.full_name,
        utc_offset=entry.utc_offset,
        label=entry.label,
    )


@router.get("", response_model=list[TimezoneOut])
async def list_timezones(table: TimezoneTableDep) -> list[TimezoneOut]:
    """Return the loaded timezone table in selection order."""
    return [_timezone_out(index, entry) for index, entry in enumerate(table.entries)]


@router.get("/default", response_model=DefaultTimezoneOut)
async def get_default_timezone(
    table: TimezoneTableDep,
    date_repr: str | None = None,
) -> DefaultTimezoneOut:
    """Resolve the default timezone selection.

    Args:
        table: Loaded timezone table
        date_repr: The viewer's ``Date().toString()``; the server's own
            environment is used when omitted

    Returns:
        The selected index, its entry and what was detected
    """
    local = detect_local_timezone(date_repr or environment_date_repr())
    entries = table.entries
    index = resolve_default_index(entries, local)
    return DefaultTimezoneOut(
        index=index,
        timezone=_timezone_out(index, entries[index]),
        local=LocalTimezoneOut(
            abbreviation=local.abbreviation,
            hour_offset=local.hour_offset,
            name=local.name,
        ),
    )
