"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from mergehull.main import app


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"


def test_hull_square_with_center():
    response = client.post(
        "/api/hull",
        json={"points": [[0, 0], [0, 2], [2, 0], [2, 2], [1, 1]]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["vertex_count"] == 4
    assert [1.0, 1.0] not in data["vertices"]
    assert data["collinear"] is False
    assert data["area"] == 4.0
    assert data["processing_time_ms"] >= 0


def test_hull_collinear():
    response = client.post("/api/hull", json={"points": [[3, 0], [1, 0], [0, 0], [2, 0]]})
    assert response.status_code == 200
    data = response.json()
    assert data["vertices"] == [[0.0, 0.0], [1.0, 0.0], [2.0, 0.0], [3.0, 0.0]]
    assert data["collinear"] is True
    assert data["area"] == 0.0


def test_hull_not_enough_points():
    response = client.post("/api/hull", json={"points": [[1, 1]]})
    assert response.status_code == 422
    assert "at least 2" in response.json()["detail"]


def test_hull_malformed_points():
    response = client.post("/api/hull", json={"points": [[1, 1, 1]]})
    assert response.status_code == 422
