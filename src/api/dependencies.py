"""Shared dependencies for API endpoints."""

import logging
from functools import lru_cache

from fastapi import HTTPException, status

from src.domain.subscription_token import TokenGenerator
from src.domain.subscription_token import get_token_generator as get_default_token_generator
from src.email_client import EmailClient
from src.errors import SubscriberValidationError
from src.utils.config import get_application_settings, get_email_client_settings

logger = logging.getLogger(__name__)


@lru_cache
def _build_email_client() -> EmailClient:
    return EmailClient.from_settings(get_email_client_settings())


def get_email_client() -> EmailClient:
    """Get the shared email client.

    :returns: The configured EmailClient.
    :raises HTTPException: If the email client is not configured.
    """
    try:
        return _build_email_client()
    except (ValueError, SubscriberValidationError) as e:
        logger.error(f"Email client configuration error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Email client not configured",
        ) from e


def get_base_url() -> str:
    """Get the public base URL used in confirmation links.

    :returns: The configured base URL.
    """
    return get_application_settings().base_url


def get_token_generator() -> TokenGenerator:
    """Get the token generator used for new subscriptions.

    :returns: The process-wide TokenGenerator.
    """
    return get_default_token_generator()
