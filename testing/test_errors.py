"""Tests for the service error types."""

import unittest

from src.errors import (
    ConfirmationEmailError,
    DeliveryError,
    NewsletterDeliveryError,
    PersistenceError,
    SubscriptionServiceError,
    format_error_chain,
)


class TestFormatErrorChain(unittest.TestCase):
    """Tests for format_error_chain."""

    def test_single_error(self) -> None:
        """Test that an error without a cause renders on one line."""
        self.assertEqual(format_error_chain(PersistenceError("down")), "PersistenceError: down")

    def test_renders_explicit_causes_outermost_first(self) -> None:
        """Test that every error in a raise-from chain is listed."""
        try:
            try:
                try:
                    raise ConnectionError("refused")
                except ConnectionError as e:
                    raise RuntimeError("pool timeout") from e
            except RuntimeError as e:
                raise PersistenceError("store unavailable") from e
        except PersistenceError as e:
            rendered = format_error_chain(e)

        self.assertEqual(
            rendered,
            "PersistenceError: store unavailable\n"
            "Caused by:\n\tRuntimeError: pool timeout\n"
            "Caused by:\n\tConnectionError: refused",
        )

    def test_follows_implicit_context(self) -> None:
        """Test that an error raised while handling another includes it."""
        try:
            try:
                raise KeyError("token")
            except KeyError:
                raise PersistenceError("lookup failed")  # noqa: B904
        except PersistenceError as e:
            rendered = format_error_chain(e)

        self.assertIn("Caused by:\n\tKeyError", rendered)

    def test_suppressed_context_is_omitted(self) -> None:
        """Test that ``raise ... from None`` hides the context."""
        try:
            try:
                raise KeyError("token")
            except KeyError:
                raise PersistenceError("lookup failed") from None
        except PersistenceError as e:
            rendered = format_error_chain(e)

        self.assertNotIn("Caused by", rendered)


class TestErrorHierarchy(unittest.TestCase):
    """Tests for the error class hierarchy."""

    def test_delivery_errors_share_a_base(self) -> None:
        """Test that both delivery failures are DeliveryError."""
        self.assertTrue(issubclass(ConfirmationEmailError, DeliveryError))
        self.assertTrue(issubclass(NewsletterDeliveryError, DeliveryError))
        self.assertTrue(issubclass(DeliveryError, SubscriptionServiceError))

    def test_newsletter_delivery_error_keeps_recipient(self) -> None:
        """Test that the failing recipient is available to callers."""
        error = NewsletterDeliveryError("failed", recipient="b@example.com")

        self.assertEqual(error.recipient, "b@example.com")
        self.assertEqual(str(error), "failed")


if __name__ == "__main__":
    unittest.main()
