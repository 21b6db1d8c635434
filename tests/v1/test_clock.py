"""Tests for the Florence clock endpoints."""

from fastapi import status
from fastapi.testclient import TestClient


def test_clock_now(client: TestClient) -> None:
    r = client.get("/api/v1/clock/now")
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["florence"].startswith(".")
    assert len(data["florence"]) == 5
    assert 0.0 <= data["fraction"] < 1.0
    assert data["tick_interval_ms"] == 300


def test_clock_now_resolution(client: TestClient) -> None:
    r = client.get("/api/v1/clock/now", params={"resolution": 2})
    assert r.status_code == status.HTTP_200_OK
    assert len(r.json()["florence"]) == 3


def test_clock_now_rejects_bad_resolution(client: TestClient) -> None:
    r = client.get("/api/v1/clock/now", params={"resolution": 99})
    assert r.status_code == 422


def test_clock_digits(client: TestClient) -> None:
    r = client.get("/api/v1/clock/digits")
    assert r.status_code == status.HTTP_200_OK
    digits = r.json()
    assert [d["units_per_day"] for d in digits] == [1, 16, 256, 4096, 65536]
    assert digits[1]["si_seconds"] == 5400.0


def test_encode(client: TestClient) -> None:
    r = client.get("/api/v1/clock/encode", params={"fraction": 0.5, "resolution": 2})
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"fraction": 0.5, "resolution": 2, "florence": ".80"}


def test_encode_without_trailing_zeroes(client: TestClient) -> None:
    r = client.get(
        "/api/v1/clock/encode", params={"fraction": 0.5, "trailing_zeroes": "false"}
    )
    assert r.json()["florence"] == ".8"


def test_encode_rejects_out_of_range(client: TestClient) -> None:
    r = client.get("/api/v1/clock/encode", params={"fraction": 1.5})
    assert r.status_code == 422
