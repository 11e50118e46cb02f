"""Tests for the FastAPI application."""

from datetime import datetime, timezone

from fastapi.testclient import TestClient

from metar_decoder.api import main
from metar_decoder.api.main import app
from metar_decoder.parser.decoder import decode
from metar_decoder.realtime.feed import LatestObservation, MetarFeedError

client = TestClient(app)


def test_health_endpoint():
    """Test the health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_decode_endpoint_response_structure():
    """Decoded reports come back as plain JSON with sentinels spelled out."""
    response = client.post(
        "/decode", json={"report": "KXYZ 151854Z VRB03KT 1/2SM SN BKN008 M02/M05 A2992 RMK TEST"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["station"] == "KXYZ"
    assert data["time"] == {"day": 15, "hour": 18, "minute": 54}
    assert data["wind"]["direction"] == "VRB"
    assert data["wind"]["unit"] == "KT"
    assert data["atmospheric"]["visibility"] == {"whole": None, "numerator": 1, "denominator": 2}
    assert data["atmospheric"]["clouds"][0]["density"] == "BKN"
    assert data["temperature"] == {"temperature": -2, "dewpoint": -5}
    assert data["pressure"] == {"kind": "A", "value": 2992}
    assert data["remarks"] == "TEST"


def test_decode_endpoint_parse_error():
    """Undecodable reports are rejected with the failure location."""
    response = client.post("/decode", json={"report": "KXYZ 152554Z"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["offset"] == 5
    assert detail["element"] == "observation time"
    assert "observation time" in detail["expected"]


def test_decode_endpoint_requires_report():
    """An empty report fails request validation."""
    response = client.post("/decode", json={"report": ""})
    assert response.status_code == 422


def test_latest_endpoint(monkeypatch):
    """The latest observation is returned with its issue time."""
    raw = "KXYZ 151854Z 00000KT CAVOK"

    async def fake_fetch(icao):
        return LatestObservation(datetime(2024, 5, 15, 18, 54, tzinfo=timezone.utc), raw, decode(raw))

    monkeypatch.setattr(main, "fetch_latest", fake_fetch)
    response = client.get("/latest/KXYZ")
    assert response.status_code == 200
    data = response.json()
    assert data["raw"] == raw
    assert data["observed_at"].startswith("2024-05-15T18:54")
    assert data["report"]["atmospheric"]["cavok"] is True


def test_latest_endpoint_feed_failure(monkeypatch):
    """Feed failures map to a bad gateway."""

    async def failing_fetch(icao):
        raise MetarFeedError("Failed to fetch METAR after retries")

    monkeypatch.setattr(main, "fetch_latest", failing_fetch)
    response = client.get("/latest/KXYZ")
    assert response.status_code == 502


def test_latest_endpoint_invalid_icao():
    """Station codes must be four letters."""
    response = client.get("/latest/K1")
    assert response.status_code == 400
    assert "four letters" in response.json()["detail"]
