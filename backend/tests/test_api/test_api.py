"""Tests for API endpoints."""

from __future__ import annotations

import copy

from fastapi.testclient import TestClient

from trophicnet.main import app
from tests.conftest import FOOD_CHAIN_PAYLOAD


client = TestClient(app)


def _invalid_payload() -> dict:
    payload = copy.deepcopy(FOOD_CHAIN_PAYLOAD)
    payload["levels"][0]["populations"] = [0.5, 0.4]
    payload["levels"][2]["occupationPerPreviousLevel"] = [[0.2, 0.3]]
    return payload


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_validate_valid_network():
    response = client.post("/api/validate", json=FOOD_CHAIN_PAYLOAD)
    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is True
    assert data["issues"] == []
    assert data["report"] == ""


def test_validate_reports_every_defect():
    response = client.post("/api/validate", json=_invalid_payload())
    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is False
    kinds = [issue["kind"] for issue in data["issues"]]
    assert kinds == ["stochastic_sum", "shape_mismatch", "stochastic_sum"]
    assert [issue["level"] for issue in data["issues"]] == [0, 2, 2]
    assert len(data["report"].splitlines()) == 3


def test_network_scene():
    response = client.post("/api/network", json=FOOD_CHAIN_PAYLOAD)
    assert response.status_code == 200
    data = response.json()
    assert data["width"] == 600
    assert data["height"] == 390
    assert [len(level["species"]) for level in data["levels"]] == [2, 3, 1]
    assert [len(band["flows"]) for band in data["flow_bands"]] == [5, 3]
    assert data["levels"][0]["species"][0]["label"] == "Tit"
    assert data["levels"][2]["species"][0]["rect"]["width"] == 600


def test_network_accepts_snake_case_fields():
    payload = {
        "levels": [
            {"populations": [1.0]},
            {"populations": [1.0], "occupation_per_previous_level": [[1.0]]},
        ],
        "options": {"separator_width": 0, "canvas_width": 100},
    }
    response = client.post("/api/network", json=payload)
    assert response.status_code == 200
    (band,) = response.json()["flow_bands"]
    assert band["flows"][0]["points"] == [[0.0, 180.0], [50.0, 30.0], [100.0, 180.0]]


def test_network_rejects_invalid_levels():
    response = client.post("/api/network", json=_invalid_payload())
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert "trophic level #1" in detail["message"]
    assert len(detail["issues"]) == 3


def test_network_rejects_single_level():
    response = client.post("/api/network", json={"levels": [{"populations": [1.0]}]})
    assert response.status_code == 422
    assert response.json()["detail"]["issues"][0]["kind"] == "structural"


def test_malformed_body():
    response = client.post("/api/network", json={"levels": [{"populations": "many"}]})
    assert response.status_code == 422


def test_network_svg():
    response = client.post("/api/network/svg", json=FOOD_CHAIN_PAYLOAD)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.text.count("<polygon") == 8
    assert "<title>Trophic network</title>" in response.text


NAN_BODY = (
    '{"levels": [{"populations": [NaN]},'
    ' {"populations": [1.0], "occupationPerPreviousLevel": [[1.0]]}]}'
)


def test_validate_rejects_nan():
    response = client.post(
        "/api/validate",
        content=NAN_BODY,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422


def test_network_rejects_infinity():
    body = NAN_BODY.replace("NaN", "Infinity")
    response = client.post(
        "/api/network",
        content=body,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
