"""Timezone table loading and local timezone detection.

The table is a headerless comma-separated file with one
``abbreviation,full name,utc offset`` row per timezone. Until it is loaded
(or when loading fails) the table holds a single built-in UTC row.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Final

import httpx

from florence_time.core.settings import settings
from florence_time.models.timezone import UTC_FALLBACK, LocalTimezone, TimezoneEntry
from florence_time.services.offset import offset_hours, parse_utc_offset

# Configure logger for this module
logger = logging.getLogger(__name__)

PACKAGED_TABLE_PATH: Final[Path] = Path(__file__).resolve().parents[1] / "data" / "tz.csv"
TABLE_COLUMNS: Final[int] = 3
UTC_ABBREVIATION: Final[str] = "UTC"

_GMT_PATTERN: Final[re.Pattern[str]] = re.compile(r"GMT([+-])(\d{2})(\d{2})")
_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"\(([^)]*)\)\s*$")


class TimezoneTableError(RuntimeError):
    """Raised when the timezone table cannot be read or parsed."""


def parse_timezone_table(text: str) -> list[TimezoneEntry]:
    """Parse the comma-separated timezone table.

    Blank lines are skipped. Rows with too few columns or an unreadable
    offset are skipped with a warning.

    Args:
        text: Raw table contents

    Returns:
        Entries in file order
    """
    entries: list[TimezoneEntry] = []
    for line_no, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        columns = line.split(",")
        if len(columns) < TABLE_COLUMNS:
            logger.warning("Skipping timezone row %d: expected %d columns", line_no, TABLE_COLUMNS)
            continue
        abbreviation, full_name, utc_offset = (col.strip() for col in columns[:TABLE_COLUMNS])
        try:
            parse_utc_offset(utc_offset)
        except ValueError as e:
            logger.warning("Skipping timezone row %d: %s", line_no, e)
            continue
        entries.append(TimezoneEntry(abbreviation, full_name, utc_offset))
    return entries


def environment_date_repr(now: datetime | None = None) -> str:
    """Render ``now`` the way a browser's ``Date().toString()`` does.

    Naive or missing datetimes are interpreted in the process's local zone.
    """
    if now is None or now.tzinfo is None:
        now = (now or datetime.now()).astimezone()
    return now.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")


def _abbreviate(name: str) -> str:
    words = name.split()
    if len(words) <= 1:
        return name
    return "".join(word[0] for word in words if word[0].isupper())


def detect_local_timezone(date_repr: str) -> LocalTimezone:
    """Extract the viewer's timezone from a ``Date().toString()`` style string.

    Args:
        date_repr: e.g. ``"Mon Oct 19 2026 15:54:00 GMT+0200 (Central European Summer Time)"``

    Returns:
        The detected timezone; ``hour_offset`` is None when no ``GMT±HHMM``
        part is present
    """
    hour_offset: int | None = None
    gmt = _GMT_PATTERN.search(date_repr)
    if gmt:
        hour_offset = int(gmt.group(2)) * (-1 if gmt.group(1) == "-" else 1)

    name_match = _NAME_PATTERN.search(date_repr.strip())
    name = name_match.group(1).strip() if name_match else ""
    return LocalTimezone(abbreviation=_abbreviate(name), hour_offset=hour_offset, name=name)


def utc_index(entries: Sequence[TimezoneEntry]) -> int:
    """Index of the UTC row.

    The row abbreviated ``UTC`` wins over other zero-offset rows such as
    ``GMT``. Without one, the first row with an empty offset is used, and
    0 when the table has none.
    """
    first_zero: int | None = None
    for idx, entry in enumerate(entries):
        if entry.utc_offset:
            continue
        if entry.abbreviation == UTC_ABBREVIATION:
            return idx
        if first_zero is None:
            first_zero = idx
    return 0 if first_zero is None else first_zero


def resolve_default_index(entries: Sequence[TimezoneEntry], local: LocalTimezone) -> int:
    """Pick the table row that matches the viewer's timezone.

    Full names match first. Some browsers only report an abbreviation, which
    can be ambiguous, so abbreviations must also agree on the hour offset.
    """
    if local.name:
        for idx, entry in enumerate(entries):
            if entry.full_name == local.name:
                return idx

    candidates = {name for name in (local.name, local.abbreviation) if name}
    if candidates and local.hour_offset is not None:
        for idx, entry in enumerate(entries):
            if entry.abbreviation in candidates and offset_hours(entry) == local.hour_offset:
                return idx

    return utc_index(entries)


class TimezoneTable:
    """Ordered timezone list loaded once at startup."""

    def __init__(
        self,
        *,
        path: str | Path | None = None,
        url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.path = Path(path) if path else None
        self.url = url
        self.timeout_seconds = (
            settings.timezone_fetch_timeout_seconds if timeout_seconds is None else timeout_seconds
        )
        self._transport = transport
        self._entries: list[TimezoneEntry] = [UTC_FALLBACK]
        self.loaded = False

    @property
    def entries(self) -> list[TimezoneEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> TimezoneEntry:
        return self._entries[index]

    def default_index(self, date_repr: str) -> int:
        """Resolve the default selection for a viewer's date representation."""
        return resolve_default_index(self._entries, detect_local_timezone(date_repr))

    async def _fetch_text(self) -> str:
        if self.url:
            try:
                async with httpx.AsyncClient(
                    timeout=httpx.Timeout(self.timeout_seconds),
                    transport=self._transport,
                ) as client:
                    response = await client.get(self.url)
                    response.raise_for_status()
            except httpx.HTTPError as exc:
                raise TimezoneTableError(f"Timezone table fetch failed: {exc}") from exc
            return response.text

        path = self.path or PACKAGED_TABLE_PATH
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TimezoneTableError(f"Timezone table read failed: {exc}") from exc

    async def load(self) -> list[TimezoneEntry]:
        """Load the table, keeping the current entries on failure.

        Returns:
            The entries in effect after the attempt
        """
        try:
            text = await self._fetch_text()
            entries = parse_timezone_table(text)
            if not entries:
                raise TimezoneTableError("Timezone table contains no usable rows")
        except TimezoneTableError as e:
            logger.warning("Keeping built-in timezone list: %s", e)
            return self.entries

        self._entries = entries
        self.loaded = True
        logger.info("Loaded %d timezones from %s", len(entries), self.url or self.path or "package")
        return self.entries


class _TimezoneTableSingleton:
    """Singleton wrapper for TimezoneTable."""

    _instance: TimezoneTable | None = None

    @classmethod
    def get_instance(cls) -> TimezoneTable:
        """Get or create the singleton TimezoneTable instance."""
        if cls._instance is None:
            cls._instance = TimezoneTable(
                path=settings.timezone_table_path,
                url=settings.timezone_table_url,
            )
        return cls._instance


def get_timezone_table() -> TimezoneTable:
    """Return the process-wide timezone table."""
    return _TimezoneTableSingleton.get_instance()
