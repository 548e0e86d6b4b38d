"""
FastAPI endpoint tests for the PAN Validator API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from pan_validator import __version__
from pan_validator.pipeline import PanValidationPipeline

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_pipeline() -> None:
    """Initialise the pipeline once for all API tests (bypasses lifespan)."""
    api._pipeline = PanValidationPipeline()
    yield  # type: ignore[misc]
    api._pipeline = None


RAW_ROWS = [" axbcd1243f ", "AXBCD1243F", "ABCDE1234F", None, ""]


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__


class TestValidateEndpoint:
    def test_summary_counts(self) -> None:
        resp = client.post("/validate", json={"pans": RAW_ROWS})
        assert resp.status_code == 200
        assert resp.json()["summary"] == {
            "total_processed": 5,
            "total_valid": 1,
            "total_invalid": 1,
            "missing_incomplete": 3,
        }

    def test_results_per_distinct_pan(self) -> None:
        data = client.post("/validate", json={"pans": RAW_ROWS}).json()
        results = {r["pan"]: r for r in data["results"]}
        assert set(results) == {"ABCDE1234F", "AXBCD1243F"}
        assert results["AXBCD1243F"]["status"] == "VALID"
        assert results["ABCDE1234F"]["status"] == "INVALID"
        assert "SEQUENTIAL_LETTERS" in results["ABCDE1234F"]["violations"]

    def test_input_hash_present(self) -> None:
        data = client.post("/validate", json={"pans": RAW_ROWS}).json()
        assert len(data["input_hash"]) == 64  # SHA-256 hex

    def test_empty_batch(self) -> None:
        data = client.post("/validate", json={"pans": []}).json()
        assert data["summary"]["total_processed"] == 0
        assert data["results"] == []


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/validate", json={})
        assert resp.status_code == 422

    def test_pans_must_be_a_list(self) -> None:
        resp = client.post("/validate", json={"pans": "ABCDE1234F"})
        assert resp.status_code == 422

    def test_missing_content_type_returns_422(self) -> None:
        resp = client.post("/validate")
        assert resp.status_code == 422


class TestClassifyEndpoint:
    def test_valid_pan(self) -> None:
        data = client.get("/classify/AXBCD1243F").json()
        assert data == {"pan": "AXBCD1243F", "status": "VALID", "violations": []}

    def test_lowercase_not_normalized(self) -> None:
        data = client.get("/classify/axbcd1243f").json()
        assert data["status"] == "INVALID"
        assert data["violations"] == ["FORMAT_MISMATCH"]


class TestFileUploadEndpoint:
    def test_upload_text_file(self) -> None:
        resp = client.post(
            "/validate/file",
            files={"file": ("pans.txt", b"axbcd1243f\nAXBCD1243F\n\n", "text/plain")},
        )
        assert resp.status_code == 200
        summary = resp.json()["summary"]
        assert summary["total_processed"] == 3
        assert summary["total_valid"] == 1
        assert summary["missing_incomplete"] == 2

    def test_upload_non_utf8_file(self) -> None:
        resp = client.post(
            "/validate/file",
            files={"file": ("pans.txt", b"\xff\xfeABCDE1234F", "text/plain")},
        )
        assert resp.status_code == 400
