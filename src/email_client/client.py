"""HTTP client for the outbound email provider."""

import logging
from typing import Any

import requests
from requests.exceptions import RequestException

from src.domain import SubscriberEmail
from src.utils.config import EmailClientSettings

logger = logging.getLogger(__name__)

# Default timeout for provider requests in seconds
DEFAULT_TIMEOUT = 10

# HTTP status code threshold for errors
HTTP_ERROR_THRESHOLD = 400


class EmailDeliveryError(Exception):
    """Raised when the email provider rejects or fails a send."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialise the error.

        :param message: Error message.
        :param status_code: HTTP status code if available.
        """
        super().__init__(message)
        self.status_code = status_code


class EmailClient:
    """Client for a Postmark-compatible email API.

    Each call to ``send_email`` is a single HTTP request. Failed sends are
    not retried.
    """

    def __init__(
        self,
        base_url: str,
        sender: SubscriberEmail,
        authorization_token: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the email client.

        :param base_url: Base URL of the email provider API.
        :param sender: Address emails are sent from.
        :param authorization_token: Provider server token.
        :param timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.sender = sender
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({"X-Postmark-Server-Token": authorization_token})

        logger.debug(f"EmailClient initialised: base_url={self.base_url}, sender={sender}")

    @classmethod
    def from_settings(cls, settings: EmailClientSettings) -> "EmailClient":
        """Build a client from configuration.

        :param settings: Email client settings.
        :returns: A configured client.
        :raises SubscriberValidationError: If the sender address is malformed.
        """
        return cls(
            base_url=settings.base_url,
            sender=settings.sender(),
            authorization_token=settings.authorization_token.get_secret_value(),
            timeout=settings.timeout,
        )

    def send_email(
        self,
        recipient: SubscriberEmail,
        subject: str,
        html_content: str,
        text_content: str,
    ) -> None:
        """Send one email.

        :param recipient: Destination address.
        :param subject: Email subject.
        :param html_content: HTML body.
        :param text_content: Plain-text body.
        :raises EmailDeliveryError: If the provider call fails.
        """
        url = f"{self.base_url}/email"
        payload: dict[str, Any] = {
            "From": self.sender.value,
            "To": recipient.value,
            "Subject": subject,
            "HtmlBody": html_content,
            "TextBody": text_content,
        }

        try:
            logger.debug(f"Sending email: to={recipient}, subject={subject!r}")
            response = self._session.post(url, json=payload, timeout=self.timeout)
        except RequestException as e:
            logger.warning(f"Email request error: to={recipient}: {e}")
            raise EmailDeliveryError(f"Request failed: {e}") from e

        if response.status_code >= HTTP_ERROR_THRESHOLD:
            detail = self._extract_error_detail(response)
            logger.warning(f"Email provider rejected send: to={recipient} -> {response.status_code}")
            raise EmailDeliveryError(detail, status_code=response.status_code)

    @staticmethod
    def _extract_error_detail(response: requests.Response) -> str:
        """Extract error detail from a provider response.

        :param response: HTTP response.
        :returns: Error message string.
        """
        try:
            data = response.json()
            if isinstance(data, dict):
                return str(data.get("Message", data))
            return str(data)
        except ValueError:
            return response.text or f"HTTP {response.status_code}"

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()

    def __enter__(self) -> "EmailClient":
        """Enter context manager."""
        return self

    def __exit__(self, *args: object) -> None:
        """Exit context manager."""
        self.close()
