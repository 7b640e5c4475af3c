"""
Unit tests for FastAPI endpoints.
"""

import pytest
import sys
import os
from unittest.mock import patch

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..', 'src'))

from fastapi.testclient import TestClient
from app import app


@pytest.fixture
def client():
    """Create FastAPI test client."""
    return TestClient(app)


class TestHealthCheck:
    """Test cases for /ping health check endpoint."""

    def test_health_check_status_code(self, client):
        """Test health check returns 200 status code."""
        response = client.get("/ping")
        assert response.status_code == 200

    def test_health_check_response_structure(self, client):
        """Test health check response structure."""
        data = client.get("/ping").json()

        assert data["status"] == "healthy"
        assert "service" in data
        assert "version" in data

    def test_health_check_content_type(self, client):
        """Test health check returns JSON content type."""
        response = client.get("/ping")
        assert response.headers["content-type"] == "application/json"


class TestApiInfo:
    """Test cases for /api endpoint."""

    def test_api_info_endpoints(self, client):
        """Test /api lists the evaluation endpoints."""
        data = client.get("/api").json()

        assert data["endpoints"]["health"] == "/ping"
        assert data["endpoints"]["evaluate"] == "/api/evaluate"
        assert data["endpoints"]["batch"] == "/api/evaluate/batch"

    def test_api_info_functions(self, client):
        """Test /api lists the supported functions."""
        data = client.get("/api").json()

        assert data["functions"] == ["sqrt", "sin", "cos", "tan"]
        assert "^" in data["operators"]


class TestEvaluateEndpoint:
    """Test cases for POST /api/evaluate."""

    def test_valid_expression(self, client):
        """Test a valid expression returns its formatted result."""
        response = client.post("/api/evaluate", json={"expression": "3+5*2"})
        assert response.status_code == 200

        data = response.json()
        assert data["expression"] == "3+5*2"
        assert data["result"] == "13"
        assert data["success"] is True
        assert data["processing_time_ms"] >= 0
        assert "timestamp" in data

    def test_error_expression(self, client):
        """Test a failing expression returns the sentinel with success false."""
        data = client.post("/api/evaluate", json={"expression": "10/0"}).json()

        assert data["result"] == "Error"
        assert data["success"] is False

    def test_blank_expression(self, client):
        """Test blank input returns an empty result."""
        data = client.post("/api/evaluate", json={"expression": "  "}).json()

        assert data["result"] == ""
        assert data["success"] is True

    def test_missing_expression_field(self, client):
        """Test a body without expression is rejected by validation."""
        response = client.post("/api/evaluate", json={})
        assert response.status_code == 422

    def test_expression_too_long(self, client):
        """Test an over-long expression is rejected with 413."""
        with patch("app.MAX_EXPRESSION_LENGTH", 5):
            response = client.post("/api/evaluate", json={"expression": "1+2+3+4"})
        assert response.status_code == 413

    def test_logs_request_and_result(self, client):
        """Test the request and result are logged."""
        with patch("app.eval_logger") as mock_logger:
            client.post("/api/evaluate", json={"expression": "2^10"})

        mock_logger.log_request.assert_called_once_with("2^10")
        args = mock_logger.log_result.call_args[0]
        assert args[0] == "1024"
        assert args[2] is True


class TestBatchEndpoint:
    """Test cases for POST /api/evaluate/batch."""

    def test_results_keep_order(self, client):
        """Test results come back in request order."""
        expressions = ["(3+5)*2", "foo(1)", "sin(30)", ""]
        response = client.post("/api/evaluate/batch", json={"expressions": expressions})
        assert response.status_code == 200

        results = response.json()["results"]
        assert [r["expression"] for r in results] == expressions
        assert [r["result"] for r in results] == ["16", "Error", "0.5", ""]
        assert [r["success"] for r in results] == [True, False, True, True]

    def test_empty_batch_rejected(self, client):
        """Test an empty list is rejected by validation."""
        response = client.post("/api/evaluate/batch", json={"expressions": []})
        assert response.status_code == 422

    def test_batch_with_too_long_expression(self, client):
        """Test one over-long expression rejects the whole batch."""
        with patch("app.MAX_EXPRESSION_LENGTH", 3):
            response = client.post("/api/evaluate/batch", json={"expressions": ["1", "1+2+3"]})
        assert response.status_code == 413


class TestStartup:
    """Test cases for module start-up."""

    def test_env_file_loaded_through_runtime_config(self):
        """Test the .env file is loaded by RuntimeConfig before settings are read."""
        import importlib
        import app as app_module
        from config.runtime import RuntimeConfig

        with patch.object(RuntimeConfig, "load_env_file", autospec=True) as mock_load:
            importlib.reload(app_module)
        importlib.reload(app_module)

        mock_load.assert_called_once()


class TestMain:
    """Test cases for the server entry point."""

    def test_main_runs_uvicorn_with_config(self):
        """Test main passes host and port to uvicorn."""
        import app as app_module

        with patch("uvicorn.run") as mock_run:
            app_module.main(host="127.0.0.1", port=9999)

        mock_run.assert_called_once()
        kwargs = mock_run.call_args[1]
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9999
