"""Tests for health check endpoints."""

import unittest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from src.api.app import app


class TestHealthEndpoint(unittest.TestCase):
    """Tests for /health_check endpoint."""

    def setUp(self) -> None:
        """Set up test client."""
        self.app = app
        self.client = TestClient(self.app)

    def test_health_check_returns_200(self) -> None:
        """Test that health check returns 200 OK."""
        response = self.client.get("/health_check")
        self.assertEqual(response.status_code, 200)

    def test_health_check_returns_healthy_status(self) -> None:
        """Test that health check returns healthy status."""
        response = self.client.get("/health_check")
        data = response.json()
        self.assertEqual(data["status"], "healthy")
        self.assertIn("version", data)

    def test_health_check_returns_version(self) -> None:
        """Test that health check returns version string."""
        response = self.client.get("/health_check")
        data = response.json()
        self.assertEqual(data["version"], "0.1.0")

    @patch("src.database.connection.get_session")
    def test_health_check_does_not_touch_the_database(self, mock_get_session: MagicMock) -> None:
        """Test that health check answers without a session."""
        self.client.get("/health_check")
        mock_get_session.assert_not_called()


class TestRequestIdMiddleware(unittest.TestCase):
    """Tests for the X-Request-ID middleware."""

    def setUp(self) -> None:
        """Set up test client."""
        self.client = TestClient(app)

    def test_generates_request_id(self) -> None:
        """Test that a request without an ID gets one in the response."""
        response = self.client.get("/health_check")

        self.assertTrue(response.headers["X-Request-ID"])

    def test_reuses_caller_request_id(self) -> None:
        """Test that a caller supplied ID is echoed back."""
        response = self.client.get("/health_check", headers={"X-Request-ID": "abc-123"})

        self.assertEqual(response.headers["X-Request-ID"], "abc-123")


if __name__ == "__main__":
    unittest.main()
