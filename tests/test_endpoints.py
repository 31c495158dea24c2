"""
API Endpoint Tests

Tests for the FastAPI endpoints using pytest and httpx.
Run with: pytest tests/test_endpoints.py -v
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi import FastAPI
from fastapi.testclient import TestClient
from main import app
from middleware.api_key import APIKeyMiddleware


client = TestClient(app)


class TestHealthEndpoint:
    """Test /api/v1/health endpoint."""

    def test_health_check(self):
        """Health endpoint should report the dictionary size."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "ok"
        assert data["dictionary_size"] > 0
        assert "cache_size" in data

    def test_request_id_header(self):
        """Every response carries X-Request-ID; a supplied one is echoed."""
        response = client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

        response = client.get("/api/v1/health")
        assert response.headers["X-Request-ID"]


class TestAPIInfo:
    """Test /api endpoint."""

    def test_api_info(self):
        response = client.get("/api")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "Ethiopic Name Search API"
        assert "version" in data


class TestTransliterateEndpoint:
    """Test /api/v1/transliterate endpoint."""

    def test_known_name(self):
        response = client.post("/api/v1/transliterate", json={"text": "amanuel"})
        assert response.status_code == 200

        data = response.json()
        assert data["success"] is True
        assert data["text"] == "amanuel"
        assert "አማኑኤል" in data["variants"]

    def test_exact_only(self):
        response = client.post(
            "/api/v1/transliterate",
            json={"text": "aman", "include_partial_matches": False}
        )
        assert response.status_code == 200
        assert response.json()["variants"] == []

    def test_empty_text(self):
        response = client.post("/api/v1/transliterate", json={"text": "   "})
        assert response.status_code == 200
        assert response.json()["variants"] == []

    def test_too_long_text(self):
        """Library validation errors use the AppError payload."""
        response = client.post("/api/v1/transliterate", json={"text": "a" * 1001})
        assert response.status_code == 422

        data = response.json()
        assert data["status"] == "error"
        assert data["code"] == "INPUT_TOO_LONG"
        assert data["details"]["field"] == "text"

    def test_missing_field(self):
        response = client.post("/api/v1/transliterate", json={})
        assert response.status_code == 422


class TestMatchEndpoint:
    """Test /api/v1/match endpoint."""

    def test_cross_script_match(self):
        response = client.post(
            "/api/v1/match",
            json={"name": "አማኑኤል", "query": "Amanuel"}
        )
        assert response.status_code == 200
        assert response.json() == {"success": True, "matches": True}

    def test_no_match(self):
        response = client.post("/api/v1/match", json={"name": "John", "query": "amanuel"})
        assert response.status_code == 200
        assert response.json()["matches"] is False

    def test_options_are_applied(self):
        response = client.post(
            "/api/v1/match",
            json={"name": "Mekonnen", "query": "Mekonen", "fuzzy": True}
        )
        assert response.json()["matches"] is True

        response = client.post(
            "/api/v1/match",
            json={"name": "Amanuel", "query": "amanuel", "case_sensitive": True}
        )
        assert response.json()["matches"] is False

    def test_empty_query(self):
        response = client.post("/api/v1/match", json={"name": "Amanuel", "query": ""})
        assert response.status_code == 200
        assert response.json()["matches"] is False

    def test_empty_name(self):
        response = client.post("/api/v1/match", json={"name": "", "query": "aman"})
        assert response.status_code == 422
        assert response.json()["code"] == "INPUT_EMPTY"

    def test_negative_distance_rejected(self):
        response = client.post(
            "/api/v1/match",
            json={"name": "Amanuel", "query": "aman", "max_distance": -1}
        )
        assert response.status_code == 422


class TestExpandEndpoint:
    """Test /api/v1/expand endpoint."""

    def test_expand(self):
        response = client.post("/api/v1/expand", json={"query": "amanuel"})
        assert response.status_code == 200
        assert response.json() == {"success": True, "terms": ["amanuel", "አማኑኤል"]}

    def test_expand_empty(self):
        response = client.post("/api/v1/expand", json={"query": ""})
        assert response.status_code == 200
        assert response.json()["terms"] == []


class TestCacheEndpoint:
    """Test /api/v1/cache/clear endpoint."""

    def test_clear_cache(self):
        client.post("/api/v1/transliterate", json={"text": "amanuel"})
        assert client.get("/api/v1/health").json()["cache_size"] >= 1

        response = client.post("/api/v1/cache/clear")
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/api/v1/health").json()["cache_size"] == 0


class TestAPIKeyMiddleware:
    """API key checks on a minimal app."""

    @pytest.fixture
    def secured_client(self):
        secured = FastAPI()
        secured.add_middleware(APIKeyMiddleware, api_keys=["secret"])

        @secured.get("/api/v1/health")
        async def health():
            return {"status": "ok"}

        @secured.post("/api/v1/match")
        async def match():
            return {"matches": True}

        return TestClient(secured)

    def test_public_path_needs_no_key(self, secured_client):
        assert secured_client.get("/api/v1/health").status_code == 200

    def test_missing_key(self, secured_client):
        response = secured_client.post("/api/v1/match")
        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"

    def test_invalid_key(self, secured_client):
        response = secured_client.post("/api/v1/match", headers={"X-API-Key": "wrong"})
        assert response.status_code == 401

    def test_valid_key(self, secured_client):
        response = secured_client.post("/api/v1/match", headers={"X-API-Key": "secret"})
        assert response.status_code == 200
