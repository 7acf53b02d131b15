"""
Tests for the points API routes.

Runs the FastAPI app against an in-memory database through TestClient.
"""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from gps_collector.config import settings
from gps_collector.db.session import get_db
from gps_collector.features.points import GpsPointRepository
from gps_collector.main import app


BATCH_URL = "/api/v1/points/batch"
LATEST_URL = "/api/v1/points/latest"
HIDE_URL = "/api/v1/points/hide"


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the test database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# Test batch ingestion
# =============================================================================

class TestBatchEndpoint:
    """Tests for POST /points/batch."""

    def test_valid_batch(self, client, make_item):
        response = client.post(BATCH_URL, json={
            "items": [make_item(), make_item()],
            "sentAt": "2026-05-01T12:00:00Z",
            "reason": "manual",
        })

        assert response.status_code == 200
        assert response.json() == {"ok": True, "inserted": 2, "errors": []}

    def test_partial_batch_reports_errors(self, client, make_item):
        response = client.post(BATCH_URL, json={
            "items": [make_item(), make_item(category=None), make_item(point1={"lon": "east"})],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["inserted"] == 1
        assert data["errors"] == [
            {"index": 1, "kind": "missing_field", "error": "Missing category/capturedAt/point1/point2"},
            {"index": 2, "kind": "invalid_coordinate", "error": "Invalid lat/lon"},
        ]

    def test_empty_body(self, client):
        response = client.post(BATCH_URL, content=b"  ")
        assert response.status_code == 400
        assert response.json()["detail"] == "Empty body"

    def test_invalid_json(self, client):
        response = client.post(BATCH_URL, content=b"{items: [")
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid JSON"

    def test_json_not_an_object(self, client):
        response = client.post(BATCH_URL, json=[1, 2, 3])
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid JSON"

    def test_missing_items(self, client):
        response = client.post(BATCH_URL, json={"sentAt": "2026-05-01T12:00:00Z"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Missing items[]"

    def test_storage_failure(self, client, make_item, monkeypatch):
        def failing_add(self, entity):
            raise OperationalError("INSERT INTO gps_points", {}, Exception("disk full"))

        monkeypatch.setattr(GpsPointRepository, "add", failing_add)

        response = client.post(BATCH_URL, json={"items": [make_item()]})

        assert response.status_code == 500
        assert response.json()["detail"] == "Insert failed"

    def test_trust_client_metrics_setting(self, client, make_item, monkeypatch):
        monkeypatch.setattr(settings, "trust_client_metrics", True)
        client.post(BATCH_URL, json={
            "items": [make_item(derived={"dtSec": 9, "distanceM": 3, "speedKmh": 1.2, "directionDeg": 90})],
        })

        row = client.get(LATEST_URL).json()["rows"][0]
        assert row["dt_sec"] == 9.0
        assert row["direction_deg"] == 90.0


# =============================================================================
# Test latest listing
# =============================================================================

class TestLatestEndpoint:
    """Tests for GET /points/latest."""

    def test_empty(self, client):
        response = client.get(LATEST_URL)

        assert response.status_code == 200
        assert response.json() == {"total": 0, "limit": 50, "count": 0, "rows": []}

    def test_rows_newest_first(self, client, make_item):
        client.post(BATCH_URL, json={"items": [make_item(category=c) for c in ("a", "b", "c")]})

        data = client.get(LATEST_URL, params={"limit": 2}).json()

        assert data["total"] == 3
        assert data["limit"] == 2
        assert data["count"] == 2
        assert [row["category"] for row in data["rows"]] == ["C", "B"]
        assert data["rows"][0]["id"] > data["rows"][1]["id"]

    def test_row_fields(self, client, make_item):
        client.post(BATCH_URL, json={"items": [make_item()], "reason": "timer"})

        row = client.get(LATEST_URL).json()["rows"][0]

        assert row["reason"] == "timer"
        assert row["user"] == "alice"
        assert row["dt_sec"] == 2.0
        assert row["speed_kmh"] == pytest.approx(235.0, abs=1.0)
        assert row["hidden_at"] is None
        assert "raw_json" not in row

    def test_timestamps_carry_utc_offset(self, client, make_item):
        client.post(BATCH_URL, json={"items": [make_item()]})
        point_id = client.get(LATEST_URL).json()["rows"][0]["id"]
        client.post(HIDE_URL, json={"id": point_id})

        row = client.get(LATEST_URL).json()["rows"][0]

        for name in ("received_at", "hidden_at"):
            parsed = datetime.fromisoformat(row[name].replace("Z", "+00:00"))
            assert parsed.utcoffset() == timedelta(0)

    @pytest.mark.parametrize("limit,expected", [
        ("0", 1),
        ("-5", 1),
        ("1000", 500),
        ("abc", 50),
        ("25", 25),
    ])
    def test_limit_clamped(self, client, limit, expected):
        data = client.get(LATEST_URL, params={"limit": limit}).json()
        assert data["limit"] == expected


# =============================================================================
# Test moderation
# =============================================================================

class TestHideEndpoint:
    """Tests for POST /points/hide."""

    def _insert_one(self, client, make_item) -> int:
        client.post(BATCH_URL, json={"items": [make_item()]})
        return client.get(LATEST_URL).json()["rows"][0]["id"]

    def test_hide(self, client, make_item):
        point_id = self._insert_one(client, make_item)

        response = client.post(HIDE_URL, json={"id": point_id, "reason": "  duplicate  "})

        assert response.status_code == 200
        assert response.json() == {"ok": True, "id": point_id, "hide": 1, "changed": 1}
        row = client.get(LATEST_URL).json()["rows"][0]
        assert row["hidden_at"] is not None
        assert row["hidden_reason"] == "duplicate"

    def test_unhide(self, client, make_item):
        point_id = self._insert_one(client, make_item)
        client.post(HIDE_URL, json={"id": point_id, "reason": "oops"})

        response = client.post(HIDE_URL, json={"id": point_id, "hide": 0})

        assert response.json() == {"ok": True, "id": point_id, "hide": 0, "changed": 1}
        row = client.get(LATEST_URL).json()["rows"][0]
        assert row["hidden_at"] is None
        assert row["hidden_reason"] is None

    def test_unknown_id(self, client):
        response = client.post(HIDE_URL, json={"id": 12345})
        assert response.json()["changed"] == 0

    def test_invalid_id(self, client):
        response = client.post(HIDE_URL, json={"id": "first"})
        assert response.status_code == 422


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
