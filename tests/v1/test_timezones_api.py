"""Tests for the timezone endpoints."""

from fastapi import status
from fastapi.testclient import TestClient


def test_list_timezones(client: TestClient) -> None:
    r = client.get("/api/v1/timezones")
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert len(data) == 6
    assert data[0] == {
        "index": 0,
        "abbreviation": "UTC",
        "full_name": "Coordinated Universal Time",
        "utc_offset": "",
        "label": "UTC: Coordinated Universal Time (UTC)",
    }
    assert data[2]["label"] == "UTC+5:30: India Standard Time (IST)"


def test_default_by_full_name(client: TestClient) -> None:
    r = client.get(
        "/api/v1/timezones/default",
        params={"date_repr": "Mon Oct 19 2026 08:54:00 GMT-0500 (Eastern Standard Time)"},
    )
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["index"] == 1
    assert data["timezone"]["abbreviation"] == "EST"
    assert data["local"] == {
        "abbreviation": "EST",
        "hour_offset": -5,
        "name": "Eastern Standard Time",
    }


def test_default_by_abbreviation(client: TestClient) -> None:
    r = client.get(
        "/api/v1/timezones/default",
        params={"date_repr": "Mon Oct 19 2026 14:54:00 GMT+0100 (IST)"},
    )
    assert r.json()["index"] == 5


def test_default_unknown_falls_back_to_utc(client: TestClient) -> None:
    r = client.get(
        "/api/v1/timezones/default",
        params={"date_repr": "Mon Oct 19 2026 22:54:00 GMT+0900 (Japan Standard Time)"},
    )
    assert r.json()["index"] == 0


def test_default_from_server_environment(client: TestClient) -> None:
    r = client.get("/api/v1/timezones/default")
    assert r.status_code == status.HTTP_200_OK
    assert 0 <= r.json()["index"] < 6
