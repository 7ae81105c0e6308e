"""Contract tests for OpenAPI schema validation.

These tests verify that the API conforms to its OpenAPI specification
and that endpoints return expected response structures.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))


@pytest.fixture
def app():
    from infrastructure.container import reset_container
    from presentation.main import create_app

    reset_container()
    yield create_app()
    reset_container()


@pytest.fixture
def client(app):
    from starlette.testclient import TestClient

    return TestClient(app)


@pytest.mark.contract
class TestOpenAPIContract:

    def test_health_endpoint(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert "version" in data
        assert "timestamp" in data

    def test_openapi_schema_available(self, client):
        resp = client.get("/openapi.json")
        assert resp.status_code == 200
        schema = resp.json()
        assert schema["info"]["title"] == "Page Window Pagination Service"
        assert "/api/v1/pagination" in schema["paths"]

    def test_preview_response_schema_documented(self, client):
        schema = client.get("/openapi.json").json()
        props = schema["components"]["schemas"]["PagePreviewResponse"]["properties"]
        for field in ("page", "per_page", "total_pages", "total", "pages", "html"):
            assert field in props

    def test_page_params_documented(self, client):
        schema = client.get("/openapi.json").json()
        params = schema["paths"]["/api/v1/pagination"]["get"]["parameters"]
        names = {p["name"] for p in params}
        assert {"total", "uri", "page", "per_page"} <= names
        page = next(p for p in params if p["name"] == "page")
        assert page["required"] is False

    def test_request_id_header(self, client):
        resp = client.get("/health")
        assert resp.headers["X-Request-ID"]

    def test_request_id_header_propagated(self, client):
        resp = client.get("/health", headers={"X-Request-ID": "req-42"})
        assert resp.headers["X-Request-ID"] == "req-42"

    def test_error_responses_follow_rfc9457(self, client):
        resp = client.get("/api/v1/pagination")
        assert resp.status_code == 422
        assert resp.headers["content-type"].startswith("application/problem+json")
        data = resp.json()
        assert data["status"] == 422
        assert data["title"] == "Validation Error"
        assert "type" in data
        assert "detail" in data
