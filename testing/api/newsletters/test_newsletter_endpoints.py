"""Tests for newsletter API endpoints."""

import unittest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from src.api.app import app
from src.api.dependencies import get_email_client
from src.api.models import INTERNAL_ERROR_DETAIL, INVALID_REQUEST_DETAIL
from src.email_client import EmailClient
from src.errors import NewsletterDeliveryError, PersistenceError
from src.newsletters import BroadcastResult, NewsletterIssue

PAYLOAD = {
    "title": "Newsletter title",
    "content": {
        "html": "<p>Newsletter body as HTML</p>",
        "text": "Newsletter body as plain text",
    },
}


class TestPublishNewsletterEndpoint(unittest.TestCase):
    """Tests for POST /newsletters endpoint."""

    def setUp(self) -> None:
        """Set up test client with a mock email client."""
        self.app = app
        self.email_client = MagicMock(spec=EmailClient)
        self.app.dependency_overrides[get_email_client] = lambda: self.email_client
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        """Remove dependency overrides."""
        self.app.dependency_overrides.clear()

    @patch("src.api.newsletters.endpoints.publish_newsletter")
    def test_publish_returns_200(self, mock_publish: MagicMock) -> None:
        """Test that a valid issue is broadcast."""
        mock_publish.return_value = BroadcastResult(recipients=3)

        response = self.client.post("/newsletters", json=PAYLOAD)

        self.assertEqual(response.status_code, 200)
        mock_publish.assert_called_once_with(
            NewsletterIssue(
                title="Newsletter title",
                html_content="<p>Newsletter body as HTML</p>",
                text_content="Newsletter body as plain text",
            ),
            email_client=self.email_client,
        )

    @patch("src.api.newsletters.endpoints.publish_newsletter")
    def test_malformed_body_returns_400(self, mock_publish: MagicMock) -> None:
        """Test that bodies missing fields or not JSON at all are rejected."""
        cases = [
            {"json": {"title": "Newsletter title"}},
            {"json": {"content": PAYLOAD["content"]}},
            {"json": {"title": "Newsletter title", "content": {"html": "<p>Hi</p>"}}},
            {"content": b"not json", "headers": {"Content-Type": "application/json"}},
        ]

        for kwargs in cases:
            with self.subTest(kwargs=kwargs):
                response = self.client.post("/newsletters", **kwargs)

                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()["detail"], INVALID_REQUEST_DETAIL)
        mock_publish.assert_not_called()

    @patch("src.api.newsletters.endpoints.publish_newsletter")
    def test_delivery_failure_returns_500(self, mock_publish: MagicMock) -> None:
        """Test that an aborted broadcast is a server error."""
        mock_publish.side_effect = NewsletterDeliveryError(
            "Failed to send newsletter issue to b@example.com", recipient="b@example.com"
        )

        response = self.client.post("/newsletters", json=PAYLOAD)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], INTERNAL_ERROR_DETAIL)

    @patch("src.api.newsletters.endpoints.publish_newsletter")
    def test_persistence_failure_returns_500(self, mock_publish: MagicMock) -> None:
        """Test that a store failure is a server error."""
        mock_publish.side_effect = PersistenceError("pool timeout")

        response = self.client.post("/newsletters", json=PAYLOAD)

        self.assertEqual(response.status_code, 500)


if __name__ == "__main__":
    unittest.main()
