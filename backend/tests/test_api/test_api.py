"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from ventmap.config import Settings
from ventmap.dependencies import get_settings
from ventmap.main import app
from tests.conftest import EXAMPLE_DIAGRAM_AXIS, EXAMPLE_LINES


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"


def test_overlaps_axis_aligned():
    response = client.post("/api/overlaps", json={"lines": EXAMPLE_LINES, "render": True})
    assert response.status_code == 200
    data = response.json()
    assert data["width"] == 10
    assert data["height"] == 10
    assert data["threshold"] == 2
    assert data["overlap_count"] == 5
    assert data["segments_total"] == 10
    assert data["segments_skipped"] == 4
    assert data["cells"][0] == {"x": 3, "y": 4, "count": 2}
    assert data["diagram"] == EXAMPLE_DIAGRAM_AXIS
    assert data["histogram"] == {"1": 16, "2": 5}


def test_overlaps_with_diagonals():
    response = client.post(
        "/api/overlaps",
        json={"lines": EXAMPLE_LINES, "allow_diagonal": True},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["overlap_count"] == 12
    assert {"x": 4, "y": 4, "count": 3} in data["cells"]
    assert data["diagram"] is None


def test_overlaps_custom_threshold():
    response = client.post(
        "/api/overlaps",
        json={"lines": EXAMPLE_LINES, "allow_diagonal": True, "threshold": 3},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["overlap_count"] == 2
    assert [(c["x"], c["y"]) for c in data["cells"]] == [(4, 4), (6, 4)]


def test_overlaps_rejects_non_conforming_line():
    response = client.post(
        "/api/overlaps",
        json={"lines": "0,0 -> 3,5\n", "allow_diagonal": True},
    )
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "NonConformingShapeError"


def test_overlaps_parse_error():
    response = client.post("/api/overlaps", json={"lines": "0,0 -> 3,5\nnonsense\n"})
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "ParseError"
    assert "line 2" in data["detail"]


def test_overlaps_empty_input():
    response = client.post("/api/overlaps", json={"lines": "\n\n"})
    assert response.status_code == 422
    assert response.json()["error"] == "EmptyInputError"


def test_overlaps_negative_threshold():
    response = client.post("/api/overlaps", json={"lines": EXAMPLE_LINES, "threshold": -1})
    assert response.status_code == 422


def test_overlaps_grid_too_large():
    app.dependency_overrides[get_settings] = lambda: Settings(max_grid_cells=50)
    try:
        response = client.post("/api/overlaps", json={"lines": EXAMPLE_LINES})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 413
    assert response.json()["error"] == "GridTooLargeError"
