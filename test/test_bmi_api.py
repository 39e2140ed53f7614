# test/test_bmi_api.py
import logging

from fastapi.testclient import TestClient
from app import app

client = TestClient(app)


def test_health_check():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_root():
    resp = client.get("/")
    assert resp.status_code == 200
    assert "message" in resp.json()


def test_calculate_bmi():
    resp = client.post("/api/bmi", json={"height": 1.75, "weight": 70})
    assert resp.status_code == 200
    assert resp.json() == {"bmi": 22.9, "category": "Normal"}


def test_calculate_bmi_obese():
    resp = client.post("/api/bmi", json={"height": 1.60, "weight": 90})
    assert resp.status_code == 200
    assert resp.json() == {"bmi": 35.2, "category": "Obese"}


def test_calculate_bmi_numeric_strings():
    # 폼 입력값이 문자열 그대로 넘어오는 경우
    resp = client.post("/api/bmi", json={"height": "1.75", "weight": "70"})
    assert resp.status_code == 200
    assert resp.json()["bmi"] == 22.9


def test_missing_field():
    resp = client.post("/api/bmi", json={"height": 1.75})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Please enter both height and weight."}


def test_empty_body_object():
    resp = client.post("/api/bmi", json={})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Please enter both height and weight."


def test_no_body():
    resp = client.post("/api/bmi")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Please enter both height and weight."


def test_zero_height():
    resp = client.post("/api/bmi", json={"height": 0, "weight": 70})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Please enter valid positive numbers."}


def test_negative_weight():
    resp = client.post("/api/bmi", json={"height": 1.75, "weight": -5})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Please enter valid positive numbers."


def test_non_numeric():
    resp = client.post("/api/bmi", json={"height": "tall", "weight": 70})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Please enter valid positive numbers."


def test_boolean_rejected():
    resp = client.post("/api/bmi", json={"height": True, "weight": 70})
    assert resp.status_code == 400


def test_malformed_json():
    resp = client.post(
        "/api/bmi",
        content="{height: 1.75",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "Please enter valid positive numbers."


def test_body_not_object():
    resp = client.post("/api/bmi", json=[1.75, 70])
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_tiny_height():
    resp = client.post("/api/bmi", json={"height": 1e-14, "weight": 1})
    assert resp.status_code == 200
    assert resp.json()["category"] == "Obese"


def test_height_underflow():
    resp = client.post("/api/bmi", json={"height": 1e-200, "weight": 70})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Please enter valid positive numbers."}


def test_huge_integer_height():
    resp = client.post("/api/bmi", json={"height": 10**400, "weight": 70})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Please enter valid positive numbers."}


def test_unexpected_error(monkeypatch, caplog):
    def broken_compute(height, weight):
        raise RuntimeError("boom")

    monkeypatch.setattr("app.compute", broken_compute)
    safe_client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.ERROR):
        resp = safe_client.post("/api/bmi", json={"height": 1.75, "weight": 70})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}

    record = next(r for r in caplog.records if r.name == "app")
    assert "boom" in record.getMessage()
    assert record.exc_info is not None


def test_categories():
    resp = client.get("/api/bmi/categories")
    assert resp.status_code == 200

    data = resp.json()["categories"]
    assert [c["category"] for c in data] == [
        "Underweight", "Normal", "Overweight", "Obese",
    ]
    assert data[0]["min"] is None
    assert data[1] == {"category": "Normal", "min": 18.5, "max": 25.0}
    assert data[-1]["max"] is None


def test_cors_preflight():
    resp = client.options(
        "/api/bmi",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"
