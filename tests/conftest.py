# tests/conftest.py
from __future__ import annotations

import asyncio
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from florence_time.main import app as fastapi_app
from florence_time.models import TimezoneEntry
from florence_time.services.timezones import TimezoneTable, get_timezone_table

TEST_TABLE = (
    "UTC,Coordinated Universal Time,\n"
    "EST,Eastern Standard Time,-5\n"
    "IST,India Standard Time,+5:30\n"
    "NST,Newfoundland Standard Time,-3:30\n"
    "CET,Central European Time,+1\n"
    "IST,Irish Standard Time,+1\n"
)

UTC = TimezoneEntry("UTC", "Coordinated Universal Time", "")
EST = TimezoneEntry("EST", "Eastern Standard Time", "-5")
IST = TimezoneEntry("IST", "India Standard Time", "+5:30")
NST = TimezoneEntry("NST", "Newfoundland Standard Time", "-3:30")


def circular_distance(a: float, b: float) -> float:
    """Distance between two day fractions on the unit circle."""
    d = abs(a - b) % 1.0
    return min(d, 1.0 - d)


@pytest.fixture()
def table_file(tmp_path: Path) -> Path:
    path = tmp_path / "tz.csv"
    path.write_text(TEST_TABLE, encoding="utf-8")
    return path


@pytest.fixture()
def timezone_table(table_file: Path) -> TimezoneTable:
    table = TimezoneTable(path=table_file)
    asyncio.run(table.load())
    return table


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_timezone_table(app: FastAPI, timezone_table: TimezoneTable) -> Iterator[None]:
    app.dependency_overrides[get_timezone_table] = lambda: timezone_table
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_timezone_table, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client
